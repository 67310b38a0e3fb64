# borr/resources.py
"""Library metadata exposed to language files through the built-in expanders."""

from __future__ import annotations

import platform

from borr.config import settings

LIB_NAME = "borr"
LIB_DESCRIPTION = "Borr; A simple cross-platform language file parser"
LIB_VERSION = "1.0.1"


def get_borr_description() -> str:
    return LIB_DESCRIPTION


def get_borr_version() -> str:
    return LIB_VERSION


def get_lib_url() -> str:
    return settings.LIB_URL


def get_operating_system_name() -> str:
    # platform.system() is "" when the OS cannot be determined.
    return platform.system() or "Unknown"


__all__ = [
    "LIB_NAME",
    "LIB_DESCRIPTION",
    "LIB_VERSION",
    "get_borr_description",
    "get_borr_version",
    "get_lib_url",
    "get_operating_system_name",
]
