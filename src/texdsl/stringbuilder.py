"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Used as the in-memory sink behind
``Document.render_to_string()``.

Thread Safety:
StringBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.
    
    Appends to a list, joins once at the end.
    Conforms to the TextSink protocol through ``write()``.
    
    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.write("hello")
            >>> _ = sb.append(", ").append("world")
            >>> sb.build()
            'hello, world'
    
    Thread Safety:
        Instance is local to each render call.
        No shared mutable state.
        
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def write(self, s: str) -> int:
        """Append a string, file-object style.

        Returns:
            Number of characters written
        """
        self.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

