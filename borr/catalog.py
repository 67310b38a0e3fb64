# borr/catalog.py
"""
borr/catalog.py
---------------

Directory of language files with an in-memory cache of parsed languages.

Layout
======
A language directory holds one file per language, named after the
language and carrying one of the configured suffixes:

    data/lang/
        en_GB.borr
        de_DE.borr
        fr_FR.lang

`available_languages()` lists the names ("de_DE", "en_GB", "fr_FR");
`get_language("en_GB")` parses the file once and returns the cached
`Language` on later calls.

Implementation notes
====================
- Cache keys are (resolved directory, casefolded name), so the same name
  in two directories does not collide.
- A lock protects cache mutations; parsed `Language` objects are read-only
  and can be shared between threads once built.
- Nothing is persisted to disk.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from borr.config import settings
from borr.errors import LanguageFileNotFound
from borr.logging_config import get_logger
from borr.language import Language

logger = get_logger(__name__)

PathLike = Union[str, Path]

# ---------------------------------------------------------------------------
# Internal state
# ---------------------------------------------------------------------------

# Map: (directory, normalized name) -> Language
_LANGUAGE_CACHE: Dict[Tuple[str, str], Language] = {}

_CACHE_LOCK = threading.RLock()


def _norm_name(name: str) -> str:
    if not isinstance(name, str):
        return ""
    return name.strip().casefold()


def _language_dir(directory: Optional[PathLike]) -> Path:
    return Path(directory if directory is not None else settings.LANGUAGE_DIR)


def _iter_language_files(lang_dir: Path) -> Iterable[Path]:
    suffixes = {s.lower() for s in settings.LANGUAGE_FILE_SUFFIXES}
    for item in sorted(lang_dir.iterdir()):
        if item.is_file() and item.suffix.lower() in suffixes:
            yield item


def _find_language_file(lang_dir: Path, name: str) -> Optional[Path]:
    wanted = _norm_name(name)
    if not lang_dir.is_dir():
        return None
    for path in _iter_language_files(lang_dir):
        if _norm_name(path.stem) == wanted:
            return path
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def available_languages(directory: Optional[PathLike] = None) -> List[str]:
    """
    Return the sorted names of language files in `directory`
    (default: `settings.LANGUAGE_DIR`). A missing directory yields [].
    """
    lang_dir = _language_dir(directory)
    if not lang_dir.is_dir():
        return []
    return sorted({path.stem for path in _iter_language_files(lang_dir)})


def get_language(name: str, directory: Optional[PathLike] = None) -> Language:
    """
    Return the parsed language called `name`, loading and caching it if needed.

    Raises:
        ValueError: empty name.
        LanguageFileNotFound: no matching file in the directory.
        LanguageFileError / LanguageFormatError: bubbled from the parser.
    """
    nname = _norm_name(name)
    if not nname:
        raise ValueError("Language name must be a non-empty string.")

    lang_dir = _language_dir(directory)
    key = (str(lang_dir.resolve()), nname)

    existing = _LANGUAGE_CACHE.get(key)
    if existing is not None:
        return existing

    with _CACHE_LOCK:
        existing = _LANGUAGE_CACHE.get(key)
        if existing is not None:
            return existing

        path = _find_language_file(lang_dir, nname)
        if path is None:
            raise LanguageFileNotFound(str(lang_dir / name))

        lang = Language.from_file(path)
        _LANGUAGE_CACHE[key] = lang
        logger.info("language_cached", name=nname, path=str(path), lang_id=lang.lang_id)
        return lang


def clear_cache(name: Optional[str] = None) -> None:
    """
    Clear the in-memory cache.

    Args:
        name: if provided, clears only that language (in every directory);
            otherwise clears everything.
    """
    with _CACHE_LOCK:
        if name is None:
            _LANGUAGE_CACHE.clear()
            return
        nname = _norm_name(name)
        for key in [k for k in _LANGUAGE_CACHE if k[1] == nname]:
            del _LANGUAGE_CACHE[key]


def cached_languages() -> List[str]:
    """Return the normalized names of cached languages."""
    with _CACHE_LOCK:
        return sorted({key[1] for key in _LANGUAGE_CACHE})


def preload_languages(names: Iterable[str], directory: Optional[PathLike] = None) -> None:
    """
    Parse and cache several languages up front.

    Errors are propagated; the caller decides whether to continue.
    """
    for name in names:
        if not _norm_name(str(name)):
            continue
        get_language(str(name), directory)


__all__ = [
    "available_languages",
    "get_language",
    "clear_cache",
    "cached_languages",
    "preload_languages",
]
