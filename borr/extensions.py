# borr/extensions.py
"""
borr/extensions.py
------------------

Small string helpers shared by the grammar, version and language modules.

The trim helpers take a set of characters to strip rather than relying on
`str.strip()` defaults: language files use `" \t\r"` as their notion of
blank, which deliberately leaves newlines inside multiline values alone.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

# Characters treated as blank by the language file grammar.
DEFAULT_TRIM_CHARS = " \t\r"


def trim_start(text: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """
    Strip `chars` from the beginning of `text`.

    An empty `chars` string means "any whitespace".
    """
    return text.lstrip(chars or None)


def trim_end(text: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Strip `chars` from the end of `text`."""
    return text.rstrip(chars or None)


def trim(text: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Strip `chars` from both ends of `text`."""
    return trim_start(trim_end(text, chars), chars)


def split_string(
    text: str,
    delimiters: str,
    max_tokens: Optional[int] = None,
) -> List[str]:
    """
    Split `text` on any of the characters in `delimiters`.

    Empty tokens (runs of delimiters, leading or trailing delimiters) are
    dropped. If `max_tokens` is given, splitting stops once that many tokens
    have been collected; the rest of the input is discarded.

    >>> split_string("a::b:c", ":")
    ['a', 'b', 'c']
    >>> split_string("a:b:c", ":", max_tokens=2)
    ['a', 'b']
    """
    tokens: List[str] = []
    current: List[str] = []

    for ch in text:
        if ch in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
                if max_tokens is not None and len(tokens) >= max_tokens:
                    return tokens
            continue
        current.append(ch)

    if current and (max_tokens is None or len(tokens) < max_tokens):
        tokens.append("".join(current))

    return tokens


def iter_split(text: str, delimiter: str) -> Iterator[str]:
    """
    Lazily yield the tokens of `text` separated by `delimiter`.

    Unlike `split_string`, the delimiter is matched as a whole (it may be
    several characters long) and empty tokens are kept, so joining the
    yielded tokens with `delimiter` reproduces `text`.
    """
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string.")

    start = 0
    while True:
        end = text.find(delimiter, start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end]
        start = end + len(delimiter)


__all__ = [
    "DEFAULT_TRIM_CHARS",
    "trim_start",
    "trim_end",
    "trim",
    "split_string",
    "iter_split",
]
