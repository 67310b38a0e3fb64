# borr/errors.py
"""
borr/errors.py
--------------

Custom exception types for the borr language parser.

These are intentionally small and descriptive so that callers can
distinguish between:

    - language files that cannot be read at all
    - text that cannot be split into lines

Everything else (malformed lines, unknown global fields, missing lookups,
unresolvable variables) is recovered silently and never raised.

Typical usage:

    from borr.errors import BorrError, LanguageFileNotFound

    try:
        lang = Language.from_file("lang/en_GB.borr")
    except LanguageFileNotFound as e:
        log.error("No language file: %s", e)
    except BorrError as e:
        log.error("Bad language file: %s", e)
"""

from __future__ import annotations

from typing import Optional


class BorrError(Exception):
    """
    Base class for all borr errors.

    Catch this if you want to handle any parsing problem in a single
    place; catch subclasses for more fine-grained handling.
    """


class LanguageFormatError(BorrError, ValueError):
    """
    Raised when the input text cannot be tokenized into lines at all.

    Typically thrown by:
        - borr.language.Language.from_string(text)
    """

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Failed to split input string into lines. Are newlines missing?"
        super().__init__(message)


class LanguageFileError(BorrError, OSError):
    """
    Raised when a language file path is not a regular file or cannot be read.
    """

    def __init__(self, path: str, detail: Optional[str] = None) -> None:
        msg = f"Invalid language file '{path}'."
        if detail:
            msg += f" Detail: {detail}"
        super().__init__(msg)
        self.path = path
        self.detail = detail


class LanguageFileNotFound(LanguageFileError, FileNotFoundError):
    """
    Raised when a language file does not exist.

    Typically thrown by:
        - borr.language.Language.from_file(path)
        - borr.catalog.get_language(name)
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, "file does not exist")


__all__ = [
    "BorrError",
    "LanguageFormatError",
    "LanguageFileError",
    "LanguageFileNotFound",
]
