# borr/language.py
"""
borr/language.py
================

Translation table and parser engine.

A `Language` is built from the text of one language file:

    lang_id   = "en_GB"
    lang_desc = "English (United Kingdom)"
    lang_ver  = "1.0.0"

    [greetings]
    hello   = "Hello, ${user}!"
    footer[] = "Built with ${lib}"
    footer[] = "on ${os}"

    [errors]
    generic = "Something went wrong. ${greetings:hello}"

Parsing
-------
Lines are classified one at a time (see `borr.grammar`) and folded into a
nested mapping `section -> field -> value`. The only state threaded from
line to line is the current section, carried by an explicit
`ParserState` created for each parse call.

- Lines before the first section header belong to the global section.
  Only `lang_id`, `lang_desc` and `lang_ver` are kept from it.
- A field repeated with the `[]` marker is appended with a newline;
  otherwise the last assignment wins.
- Lines that match no rule are skipped.

Querying
--------
`get_section` returns raw values. `get_string` expands `${...}`
placeholders (see `borr.resolver`) unless `expand=False`. Both return
None for unknown sections/fields and never raise.

Error behaviour
---------------
- `from_string` raises `LanguageFormatError` if the text has no line at all.
- `from_file` raises `LanguageFileNotFound` / `LanguageFileError` when the
  file cannot be read; these are never swallowed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from borr.config import settings
from borr.errors import LanguageFileError, LanguageFileNotFound, LanguageFormatError
from borr.expanders import ExpanderRegistry, default_registry
from borr.extensions import iter_split, trim
from borr.grammar import (
    MULTILINE_MARKER,
    is_empty_or_comment,
    is_multiline_field,
    is_section,
    is_translation,
    remove_inline_comments,
)
from borr.logging_config import get_logger
from borr.resolver import VariableResolver
from borr.version import LanguageVersion

logger = get_logger(__name__)

Section = Dict[str, str]
TranslationTable = Dict[str, Section]

GLOBAL_SECTION = ""

LANG_ID_FIELD = "lang_id"
LANG_DESC_FIELD = "lang_desc"
LANG_VER_FIELD = "lang_ver"

LINE_TERMINATOR = "\n"


@dataclass
class ParserState:
    """Mutable state carried from one line to the next during a single parse."""

    current_section: str = GLOBAL_SECTION
    line_number: int = 0


class Language:
    """
    One parsed language file.

    Args:
        registry:
            Variable expander registry used by `get_string`. Defaults to the
            process-wide `borr.expanders.default_registry`.
    """

    def __init__(self, registry: Optional[ExpanderRegistry] = None) -> None:
        self._registry = registry if registry is not None else default_registry
        self._resolver = VariableResolver(self._registry, self._raw_value)

        self._lang_id = ""
        self._lang_description = ""
        self._version = LanguageVersion()
        self._table: TranslationTable = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_string(
        cls,
        text: str,
        registry: Optional[ExpanderRegistry] = None,
    ) -> "Language":
        """Parse the full text of a language file."""
        lang = cls(registry=registry)
        lang.parse(text)
        return lang

    @classmethod
    def from_file(
        cls,
        path: Union[str, os.PathLike],
        encoding: Optional[str] = None,
        registry: Optional[ExpanderRegistry] = None,
    ) -> "Language":
        """Read a language file from disk and parse it."""
        file_path = Path(path)
        if not file_path.exists():
            raise LanguageFileNotFound(str(file_path))
        if not file_path.is_file():
            raise LanguageFileError(str(file_path), "not a regular file")

        try:
            text = file_path.read_text(encoding=encoding or settings.FILE_ENCODING)
        except UnicodeDecodeError as e:
            raise LanguageFileError(str(file_path), f"could not decode: {e}") from e
        except OSError as e:
            raise LanguageFileError(str(file_path), f"read error: {e}") from e

        logger.debug("language_file_read", path=str(file_path), size=len(text))
        return cls.from_string(text, registry=registry)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str) -> None:
        """
        Replace the contents of this language with the parsed `text`.

        Raises:
            LanguageFormatError: if `text` is not a string or contains no
                non-empty line.
        """
        if not isinstance(text, str):
            raise LanguageFormatError(
                f"Language text must be a string, got {type(text).__name__!r}."
            )

        lines = list(iter_split(text, LINE_TERMINATOR))
        if not any(lines):
            raise LanguageFormatError()

        self.clear()
        state = ParserState()
        for line in lines:
            state.line_number += 1
            self.parse_line(line, state)

        logger.debug(
            "language_parsed",
            lang_id=self._lang_id,
            sections=len(self.sections()),
            lines=state.line_number,
        )

    def parse_line(self, line: str, state: ParserState) -> None:
        """Fold a single line into the translation table."""
        if is_empty_or_comment(line):
            return

        commentless = remove_inline_comments(line)

        found, section_name = is_section(commentless)
        if found:
            state.current_section = section_name
            return

        found, field, value = is_translation(commentless)
        if not found:
            logger.debug("line_ignored", line_number=state.line_number, line=commentless)
            return

        if state.current_section == GLOBAL_SECTION:
            self._apply_global_field(field, value)
            return

        section = self._table.setdefault(state.current_section, {})
        name = trim(field, MULTILINE_MARKER)

        if name in section and is_multiline_field(field):
            section[name] = section[name] + LINE_TERMINATOR + value
        else:
            section[name] = value

    def _apply_global_field(self, field: str, value: str) -> None:
        if field == LANG_ID_FIELD:
            self._lang_id = value
        elif field == LANG_DESC_FIELD:
            self._lang_description = value
        elif field == LANG_VER_FIELD:
            self._version = LanguageVersion.from_string(value)
        else:
            logger.debug("global_field_ignored", field=field)
            return

        # Metadata stays reachable as get_string("", "lang_id") etc.
        self._table.setdefault(GLOBAL_SECTION, {})[field] = value
        logger.debug("language_metadata_found", field=field, value=value)

    def clear(self) -> None:
        """Reset metadata and drop every section."""
        self._lang_id = ""
        self._lang_description = ""
        self._version = LanguageVersion()
        self._table = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def lang_id(self) -> str:
        return self._lang_id

    @property
    def lang_description(self) -> str:
        return self._lang_description

    @property
    def version(self) -> LanguageVersion:
        return self._version

    @property
    def registry(self) -> ExpanderRegistry:
        return self._registry

    def sections(self) -> List[str]:
        """Sorted names of every non-global section."""
        return sorted(name for name in self._table if name != GLOBAL_SECTION)

    def get_section(self, name: str) -> Optional[Section]:
        """
        Return a copy of a whole section, without variable expansion.
        None if the section does not exist.
        """
        section = self._table.get(name)
        if section is None:
            return None
        return dict(section)

    def get_string(self, section: str, field: str, expand: bool = True) -> Optional[str]:
        """
        Return one translation.

        Args:
            section: Section name.
            field: Field name (without the '[]' marker).
            expand: Replace `${...}` placeholders before returning.

        Returns:
            The value, or None if the section or field does not exist.
        """
        if not expand:
            return self._raw_value(section, field)
        return self._resolver.resolve(section, field)

    def expand_variable(self, name: str) -> str:
        """Expand a single variable name as it would be inside a value."""
        return self._resolver.expand_variable(name)

    def _raw_value(self, section: str, field: str) -> Optional[str]:
        sect = self._table.get(section)
        if sect is None:
            return None
        return sect.get(field)

    def __contains__(self, section: object) -> bool:
        return section in self._table

    def __repr__(self) -> str:
        return (
            f"Language(lang_id={self._lang_id!r}, version='{self._version}', "
            f"sections={len(self.sections())})"
        )


def from_string(text: str, registry: Optional[ExpanderRegistry] = None) -> Language:
    return Language.from_string(text, registry=registry)


def from_file(
    path: Union[str, os.PathLike],
    encoding: Optional[str] = None,
    registry: Optional[ExpanderRegistry] = None,
) -> Language:
    return Language.from_file(path, encoding=encoding, registry=registry)


__all__ = [
    "GLOBAL_SECTION",
    "LANG_ID_FIELD",
    "LANG_DESC_FIELD",
    "LANG_VER_FIELD",
    "Section",
    "TranslationTable",
    "ParserState",
    "Language",
    "from_string",
    "from_file",
]
