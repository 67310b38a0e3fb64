# borr/__init__.py
"""
borr
----

Public entrypoint for the borr language file parser.

This module re-exports the most common APIs so callers can do:

    from borr import Language, add_var_expansion_callback

    lang = Language.from_file("lang/en_GB.borr")
    add_var_expansion_callback("user", lambda _: "Ada")
    print(lang.get_string("greetings", "hello"))

Separation of concerns
======================
- grammar.py: pure line classification (comments, sections, fields)
- language.py: translation table, parsing, queries
- resolver.py: ${...} expansion with cycle protection
- expanders.py: process-wide expander registry and built-in expanders
- catalog.py: directory scanning and caching of parsed languages
- version.py: lang_ver parsing
"""

from __future__ import annotations

import logging

from .catalog import (
    available_languages,
    cached_languages,
    clear_cache,
    get_language,
    preload_languages,
)
from .errors import BorrError, LanguageFileError, LanguageFileNotFound, LanguageFormatError
from .expanders import (
    DEFAULT_EXPANDERS,
    ExpanderRegistry,
    add_var_expansion_callback,
    default_registry,
    remove_var_expansion_callback,
)
from .language import GLOBAL_SECTION, Language, ParserState, from_file, from_string
from .resources import LIB_VERSION as __version__
from .version import LanguageVersion

# Silent unless the host (or the CLI) configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Language
    "Language",
    "ParserState",
    "GLOBAL_SECTION",
    "from_string",
    "from_file",
    "LanguageVersion",
    # Expanders
    "ExpanderRegistry",
    "DEFAULT_EXPANDERS",
    "default_registry",
    "add_var_expansion_callback",
    "remove_var_expansion_callback",
    # Catalog
    "available_languages",
    "get_language",
    "clear_cache",
    "cached_languages",
    "preload_languages",
    # Errors
    "BorrError",
    "LanguageFormatError",
    "LanguageFileError",
    "LanguageFileNotFound",
]
