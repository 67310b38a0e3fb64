# borr/resolver.py
"""
borr/resolver.py
----------------

Variable expansion for translated strings.

A value such as

    "Built with ${lib} on ${os}. ${common:footer}"

is expanded by repeatedly replacing the first `${...}` placeholder until
none remain. Each name is resolved in this order:

    1. application callback registered for exactly that name
    2. built-in expander (date, time, lib, os, liburl)
    3. `section:field` cross-reference, looked up in the same language
       and itself expanded
    4. empty string

Unresolvable variables never raise.

Termination
-----------
Expansion output may contain new placeholders, so this is a fix-point loop.
Two guards keep it finite:

- cross-references currently being expanded are tracked; a reference that
  points back into that chain (`a:x -> ${b:y} -> ${a:x}`) expands to "".
- at most `settings.MAX_EXPANSION_PASSES` substitutions are made per value;
  after that every remaining placeholder is replaced with "".
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Optional, Tuple

from borr.config import settings
from borr.expanders import ExpanderRegistry
from borr.extensions import split_string, trim
from borr.grammar import VARIABLE_RE, find_variable
from borr.logging_config import get_logger

logger = get_logger(__name__)

# (section, field) -> raw stored value, or None when absent
Lookup = Callable[[str, str], Optional[str]]

_Key = Tuple[str, str]

CROSS_REFERENCE_SEPARATOR = ":"


class VariableResolver:
    def __init__(
        self,
        registry: ExpanderRegistry,
        lookup: Lookup,
        max_passes: Optional[int] = None,
    ) -> None:
        self._registry = registry
        self._lookup = lookup
        self._max_passes = max_passes

    @property
    def max_passes(self) -> int:
        if self._max_passes is not None:
            return self._max_passes
        return settings.MAX_EXPANSION_PASSES

    def resolve(self, section: str, field: str) -> Optional[str]:
        """Look up (section, field) and expand it. None if the field is absent."""
        raw = self._lookup(section, field)
        if raw is None:
            return None
        return self.expand(raw, frozenset({(section, field)}))

    def expand(self, value: str, active: FrozenSet[_Key] = frozenset()) -> str:
        """
        Replace every placeholder in `value`.

        Args:
            value: Text possibly containing `${...}` placeholders.
            active: Cross-references already being expanded further up the
                chain; used for cycle detection.
        """
        passes = 0
        while True:
            found = find_variable(value)
            if found is None:
                return value
            start, end, name = found

            if passes >= self.max_passes:
                logger.warning(
                    "expansion_pass_limit_reached",
                    limit=self.max_passes,
                    remaining=value[start:end],
                )
                return VARIABLE_RE.sub("", value)

            replacement = self.expand_variable(name, active)
            value = value[:start] + replacement + value[end:]
            passes += 1

    def expand_variable(self, name: str, active: FrozenSet[_Key] = frozenset()) -> str:
        """Resolve a single variable name to its replacement text."""
        expander = self._registry.find(name)
        if expander is not None:
            return str(expander(name))

        if CROSS_REFERENCE_SEPARATOR in name:
            tokens = [trim(t) for t in split_string(name, CROSS_REFERENCE_SEPARATOR, max_tokens=2)]
            if len(tokens) != 2:
                return ""

            key = (tokens[0], tokens[1])
            if key in active:
                logger.warning(
                    "expansion_cycle_detected",
                    section=key[0],
                    field=key[1],
                )
                return ""

            raw = self._lookup(*key)
            if raw is None:
                logger.debug("cross_reference_unresolved", section=key[0], field=key[1])
                return ""
            return self.expand(raw, active | {key})

        logger.debug("variable_unresolved", variable=name)
        return ""


__all__ = ["Lookup", "VariableResolver", "CROSS_REFERENCE_SEPARATOR"]
