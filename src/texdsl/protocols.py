"""Protocols for texdsl.

Defines the contract for output sinks the renderer writes to.
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Anything that accepts rendered text.

    ``io.StringIO``, text-mode files, ``sys.stdout`` and
    :class:`texdsl.stringbuilder.StringBuilder` all conform.

    """

    def write(self, s: str, /) -> object:
        """Write a chunk of rendered text."""
        ...
