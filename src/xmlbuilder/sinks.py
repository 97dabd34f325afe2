"""Output sinks for the streaming builder.

A sink is anything with a ``write(str)`` method: an open text file,
``io.StringIO``, ``sys.stdout``, a socket wrapper. The builder only ever
appends to it and never reads it back.

StringBuilder is the in-memory default. It appends to a list and joins
once at the end, O(n) total vs O(n²) for repeated string concatenation.

EncodedSink adapts binary streams (``open(path, "wb")``, ``io.BytesIO``,
sockets' ``makefile("wb")``) by encoding each write.

Thread Safety:
Sinks are owned by a single builder. No shared mutable state.

"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Protocol for builder output destinations.

    Implementations must accept a string. Return values are ignored.

    """

    def write(self, s: str, /) -> object:
        """Append text to the destination."""
        ...


class StringBuilder:
    """Efficient in-memory sink.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("<h1>")
            >>> sb.write("Hello")
            >>> sb.write("</h1>")
            >>> sb.build()
            '<h1>Hello</h1>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def write(self, s: str, /) -> None:
        """Append a string (empty strings are skipped).

        Args:
            s: String to append
        """
        if s:
            self._parts.append(s)

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all written parts
        """
        if len(self._parts) > 1:
            # Collapse so repeated build() calls stay cheap
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    getvalue = build

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __str__(self) -> str:
        return self.build()

    def __len__(self) -> int:
        """Return the number of stored parts, not the text length.

        build() merges parts, so this count can drop after a read.
        Use len(sb.build()) for the character count.
        """
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if anything has been written."""
        return bool(self._parts)


class EncodedSink:
    """Text-to-bytes adapter for binary streams.

    Each write is encoded and passed straight through; nothing is buffered
    here, so errors from the underlying stream surface on the write that
    caused them.

    Args:
        stream: Binary stream with a ``write(bytes)`` method
        encoding: Target encoding
        errors: Codec error handler; the default turns unencodable
            characters into numeric character references

    Example:
        >>> import io
        >>> raw = io.BytesIO()
        >>> sink = EncodedSink(raw, "ascii")
        >>> sink.write("caf\\u00e9")
        >>> raw.getvalue()
        b'caf&#233;'

    """

    __slots__ = ("_stream", "encoding", "errors")

    def __init__(
        self,
        stream: BinaryIO,
        encoding: str = "utf-8",
        errors: str = "xmlcharrefreplace",
    ) -> None:
        self._stream = stream
        self.encoding = encoding
        self.errors = errors

    @property
    def stream(self) -> BinaryIO:
        """The wrapped binary stream."""
        return self._stream

    def write(self, s: str, /) -> None:
        self._stream.write(s.encode(self.encoding, self.errors))


__all__ = ["EncodedSink", "Sink", "StringBuilder"]
