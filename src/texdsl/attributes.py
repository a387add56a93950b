"""Attribute formatting for commands and environments.

Commands carry bare flags, environments carry key/value options. Both
render into the same bracketed syntax, or into nothing when empty:

    >>> format_flags(["a", "b", "c"])
    '[a, b, c]'
    >>> format_options([("x", "1"), ("y", "2")])
    '[x=1, y=2]'
    >>> format_flags([])
    ''

Values are embedded verbatim; nothing is validated or escaped.

"""

from collections.abc import Iterable, Mapping
from typing import TypeAlias

Options: TypeAlias = Mapping[str, str] | Iterable[tuple[str, str]]


def format_flags(flags: Iterable[str]) -> str:
    """Render flags as ``[f1, f2, ...]`` in the given order."""
    items = list(flags)
    if not items:
        return ""
    return "[" + ", ".join(items) + "]"


def format_options(options: Options) -> str:
    """Render key/value options as ``[k1=v1, k2=v2, ...]``.

    A mapping is rendered in its iteration order. A sequence of pairs is
    collapsed through a dict first, so a repeated key keeps its first
    position and takes its last value.

    """
    items = options if isinstance(options, Mapping) else dict(options)
    if not items:
        return ""
    return "[" + ", ".join(f"{key}={value}" for key, value in items.items()) + "]"


def format_attributes(attributes: Options | Iterable[str]) -> str:
    """Render either flags or options, depending on the input shape."""
    if isinstance(attributes, Mapping):
        return format_options(attributes)
    items = list(attributes)
    if items and not isinstance(items[0], str):
        return format_options(items)
    return format_flags(items)
