# borr/grammar.py
"""
borr/grammar.py
---------------

Line classifier for borr language files.

A language file is line oriented. Each line is one of:

    # a comment                      (ignored)
    [section_name]                   (switches the current section)
    field = "translated text"        (single-line field)
    field[] = "one more line"        (multiline field, appended with "\n")

anything else is ignored. Trailing `# ...` comments are allowed after a
section header or a field, as long as the `#` is outside the quoted value.

Every function in this module is pure: it inspects one line (or one value)
and reports what it found. Deciding what to do with it is the job of
`borr.language.Language.parse_line`.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from borr.extensions import trim

__all__ = [
    "COMMENT_CHAR",
    "MULTILINE_MARKER",
    "SECTION_RE",
    "TRANSLATION_RE",
    "VARIABLE_RE",
    "is_empty_or_comment",
    "remove_inline_comments",
    "is_section",
    "is_translation",
    "is_multiline_field",
    "contains_variable",
    "find_variable",
]

COMMENT_CHAR = "#"
MULTILINE_MARKER = "[]"

_IDENT = r"[A-Za-z_][A-Za-z0-9_]*"

# [section]  (no whitespace allowed inside the brackets)
SECTION_RE = re.compile(rf"^\[(?P<name>{_IDENT})\]$")

# field = "value"  /  field[] = "value"
TRANSLATION_RE = re.compile(
    rf'^(?P<field>{_IDENT}(?:\[\])?)\s*=\s*"(?P<value>[^"]*)"$'
)

# ${name}  /  ${section:field}
VARIABLE_RE = re.compile(rf"\$\{{\s*(?P<name>{_IDENT}(?:\s*:\s*{_IDENT})?)\s*\}}")


def is_empty_or_comment(line: str) -> bool:
    """True if the line is blank or its first non-blank character is '#'."""
    stripped = trim(line)
    return not stripped or stripped.startswith(COMMENT_CHAR)


def remove_inline_comments(line: str) -> str:
    """
    Strip a trailing '# ...' comment and return the trimmed remainder.

    A '#' between double quotes belongs to the translated text and is kept:

        '[section] # comment'               -> '[section]'
        'field = "" # comment'              -> 'field = ""'
        'field = "this # is inside quotes"' -> unchanged
    """
    in_quotes = False
    for idx, ch in enumerate(line):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == COMMENT_CHAR and not in_quotes:
            return trim(line[:idx])
    return trim(line)


def is_section(line: str) -> Tuple[bool, str]:
    """
    Check whether `line` is a section header.

    Returns:
        (True, name) for '[name]', otherwise (False, "").
    """
    match = SECTION_RE.match(trim(line))
    if match is None:
        return False, ""
    return True, match.group("name")


def is_translation(line: str) -> Tuple[bool, str, str]:
    """
    Check whether `line` is a field assignment.

    Returns:
        (True, field, value) where `field` is the raw token (still carrying
        the '[]' marker for multiline fields) and `value` is the quoted text
        without quotes and surrounding blanks. (False, "", "") otherwise.
    """
    match = TRANSLATION_RE.match(trim(line))
    if match is None:
        return False, "", ""
    return True, match.group("field"), trim(match.group("value"))


def is_multiline_field(field: str) -> bool:
    """True if the raw field token ends with the '[]' multiline marker."""
    return len(field) > len(MULTILINE_MARKER) and field.endswith(MULTILINE_MARKER)


def find_variable(value: str) -> Optional[Tuple[int, int, str]]:
    """
    Locate the first '${...}' placeholder in `value`.

    Returns:
        (start, end, name) where `value[start:end]` is the whole placeholder
        and `name` is its trimmed inner name (which may be a
        'section:field' cross-reference), or None if there is none.
    """
    match = VARIABLE_RE.search(value)
    if match is None:
        return None
    return match.start(), match.end(), trim(match.group("name"))


def contains_variable(value: str) -> Tuple[bool, str]:
    """Return (True, name) for the first placeholder in `value`, else (False, "")."""
    found = find_variable(value)
    if found is None:
        return False, ""
    return True, found[2]
