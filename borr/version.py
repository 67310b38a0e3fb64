# borr/version.py
"""
borr/version.py

Version value for language files.

The `lang_ver` field of a language file holds a dotted three-part version
(`MAJOR.MINOR.REVISION`, optionally prefixed with `v`). Each component is
kept as an `int`, or `None` when the input did not provide it, so that
"unset" stays distinguishable from an explicit `0`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from borr.extensions import trim
from borr.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LanguageVersion:
    major: Optional[int] = None
    minor: Optional[int] = None
    revision: Optional[int] = None

    @classmethod
    def from_string(cls, value: str) -> "LanguageVersion":
        """
        Parse a dotted version string.

            "1.2.3"   -> (1, 2, 3)
            "v2.0"    -> (2, 0, None)
            "1.2.3.4" -> (1, 2, 3)   extra components are ignored

        Components that are not non-negative integers stay unset.
        """
        text = trim(value or "")
        if text[:1] in ("v", "V"):
            text = text[1:]

        if not text:
            return cls()

        # Empty components keep their position: "1..2" -> (1, None, 2).
        parts = text.split(".")[:3]
        components = []
        for part in parts:
            part = trim(part)
            if part.isascii() and part.isdigit():
                components.append(int(part))
            else:
                logger.warning("language_version_component_invalid", value=value, component=part)
                components.append(None)

        components.extend([None] * (3 - len(components)))
        return cls(*components)

    @property
    def is_complete(self) -> bool:
        return None not in self.as_tuple()

    def as_tuple(self) -> Tuple[Optional[int], Optional[int], Optional[int]]:
        return (self.major, self.minor, self.revision)

    def __str__(self) -> str:
        return "v" + ".".join("?" if c is None else str(c) for c in self.as_tuple())


__all__ = ["LanguageVersion"]
