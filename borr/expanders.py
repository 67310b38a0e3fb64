# borr/expanders.py
"""
borr/expanders.py
-----------------

Registry of variable expanders.

An expander is any callable `(name) -> str`. When a value contains
`${name}`, the resolver asks the registry for an expander in this order:

    1. callbacks registered by the application (`add_var_expansion_callback`)
    2. built-in defaults: date, time, lib, os, liburl

Application callbacks always win, so registering `date` replaces the
built-in date format for every language.

Scope
=====
`default_registry` is process-wide: every `Language` that was not given
its own registry consults it, and changes apply to all later lookups.
The registry does no locking. Applications that register or remove
callbacks from several threads must serialize those calls themselves.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional

from borr import resources
from borr.logging_config import get_logger

logger = get_logger(__name__)

Expander = Callable[[str], str]


# ---------------------------------------------------------------------------
# Built-in expanders
# ---------------------------------------------------------------------------


def date_expander(_: str) -> str:
    """Current local date, e.g. '2024-03-01'."""
    return datetime.now().strftime("%Y-%m-%d")


def time_expander(_: str) -> str:
    """Current local time, e.g. '13:05:09'."""
    return datetime.now().strftime("%H:%M:%S")


def lib_expander(_: str) -> str:
    return f"{resources.get_borr_description()} v{resources.get_borr_version()}"


def os_expander(_: str) -> str:
    return resources.get_operating_system_name()


def liburl_expander(_: str) -> str:
    return resources.get_lib_url()


DEFAULT_EXPANDERS: Mapping[str, Expander] = {
    "date": date_expander,
    "time": time_expander,
    "lib": lib_expander,
    "os": os_expander,
    "liburl": liburl_expander,
}


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ExpanderRegistry:
    """
    Two-tier lookup table of variable expanders.

    Args:
        defaults:
            Built-in expanders consulted after user callbacks. Defaults to
            `DEFAULT_EXPANDERS`; pass `{}` for a registry without built-ins.
    """

    def __init__(self, defaults: Optional[Mapping[str, Expander]] = None) -> None:
        self._callbacks: Dict[str, Expander] = {}
        self._defaults: Dict[str, Expander] = dict(
            DEFAULT_EXPANDERS if defaults is None else defaults
        )

    def add_var_expansion_callback(self, name: str, callback: Expander) -> bool:
        """
        Register `callback` for `${name}`.

        Returns:
            False if a callback is already registered under that name (the
            existing one is kept), True otherwise.
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        if name in self._callbacks:
            return False
        self._callbacks[name] = callback
        logger.debug("expander_registered", variable=name)
        return True

    def remove_var_expansion_callback(self, name: str) -> None:
        """Remove the callback for `name`; does nothing if none is registered."""
        if self._callbacks.pop(name, None) is not None:
            logger.debug("expander_removed", variable=name)

    def has_callback(self, name: str) -> bool:
        return name in self._callbacks

    def clear_callbacks(self) -> None:
        """Drop every user callback. Built-in expanders are kept."""
        self._callbacks.clear()

    def find(self, name: str) -> Optional[Expander]:
        """Return the expander for `name`, user callbacks first."""
        callback = self._callbacks.get(name)
        if callback is not None:
            return callback
        return self._defaults.get(name)

    def expanders(self) -> List[str]:
        """Sorted names of every variable this registry can expand."""
        return sorted(set(self._callbacks) | set(self._defaults))


default_registry = ExpanderRegistry()


def add_var_expansion_callback(name: str, callback: Expander) -> bool:
    """Register a callback on the process-wide registry."""
    return default_registry.add_var_expansion_callback(name, callback)


def remove_var_expansion_callback(name: str) -> None:
    """Remove a callback from the process-wide registry."""
    default_registry.remove_var_expansion_callback(name)


__all__ = [
    "Expander",
    "DEFAULT_EXPANDERS",
    "ExpanderRegistry",
    "default_registry",
    "add_var_expansion_callback",
    "remove_var_expansion_callback",
    "date_expander",
    "time_expander",
    "lib_expander",
    "os_expander",
    "liburl_expander",
]
