"""Streaming markup builder.

Writes elements, attributes, character data, CDATA sections, processing
instructions and doctype declarations straight to a sink, token by token,
without keeping a document tree.

Deferred Start Tags:
``element()`` only records the element as *pending*: its start tag is
written once a later call needs the sink to move on (another element,
text, ``end()``, ...). Until then ``attr()`` can still add attributes.
A pending element that is closed straight away collapses into an empty
element tag.

Indentation Model:
A tag line is indented ``len(stack) - 1 + offset`` levels, where the stack
includes the element being written or closed; text lines sit one level
deeper. Nothing is indented and no newline is added while pretty printing
is off or an inline region is open. Entering the outermost inline region
writes the indentation once, leaving it writes one newline, so the region
renders as a single line at the right column.

Thread Safety:
A Builder is a single-writer cursor over its sink. Do not share one
between threads without external locking. The escaping tables and the
default config it reads are immutable.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from xmlbuilder.config import BuilderConfig, get_builder_config
from xmlbuilder.errors import BuilderArgumentError, BuilderStateError
from xmlbuilder.escape import escape_attr, escape_text
from xmlbuilder.profiling import get_build_accumulator
from xmlbuilder.sinks import Sink, StringBuilder
from xmlbuilder.utils.logger import get_logger

logger = get_logger(__name__)


class Builder:
    """Incremental markup writer with pretty printing.

    Usage:
        >>> b = Builder()
        >>> _ = b.element("people")
        >>> _ = b.element("person", "id", 1)
        >>> _ = b.tag("name", "Joran")
        >>> _ = b.end().end()
        >>> print(b.sink, end="")
        <people>
          <person id="1">
            <name>Joran</name>
          </person>
        </people>

    Every mutating method returns the builder so calls chain. Positional
    arguments after an element name are attribute name/value pairs; an odd
    one out at the end is the element's text.

    Thread Safety:
        Not thread-safe. One builder, one writer.
    """

    __slots__ = (
        "_sink",
        "_elements",
        "_pending",
        "_attributes",
        "_indent",
        "_offset",
        "_inline",
        "_pretty",
        "_self_closing",
        "_escape_apostrophe",
    )

    def __init__(self, sink: Sink | None = None, *, config: BuilderConfig | None = None) -> None:
        """Initialize builder.

        Args:
            sink: Destination with a ``write(str)`` method. A fresh
                StringBuilder is used when omitted.
            config: Starting options (uses the context's active config if None)
        """
        cfg = config or get_builder_config()
        self._sink = StringBuilder() if sink is None else sink
        self._elements: list[str] = []
        self._pending = False
        self._attributes: dict[str, str] = {}
        self._indent = cfg.indent
        self._offset = cfg.offset
        self._inline = 0
        self._pretty = cfg.pretty
        self._self_closing = cfg.self_closing
        self._escape_apostrophe = cfg.escape_apostrophe

    def __repr__(self) -> str:
        return (
            f"Builder(depth={len(self._elements)}, pending={self._pending}, "
            f"inline_depth={self._inline})"
        )

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def sink(self) -> Sink:
        """The destination this builder writes to."""
        return self._sink

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._elements)

    @property
    def open_elements(self) -> tuple[str, ...]:
        """Names of the open elements, outermost first."""
        return tuple(self._elements)

    @property
    def pending(self) -> bool:
        """True while the innermost element's start tag is not yet written."""
        return self._pending

    @property
    def inline_depth(self) -> int:
        return self._inline

    @property
    def is_pretty(self) -> bool:
        return self._pretty

    @property
    def indent_unit(self) -> str:
        return self._indent

    @property
    def indent_offset(self) -> int:
        return self._offset

    @property
    def self_closing(self) -> bool:
        return self._self_closing

    # =========================================================================
    # Elements and attributes
    # =========================================================================

    def element(self, name: str, /, *pairs: Any, text: Any = None, **attrs: Any) -> Builder:
        """Open a new element.

        A pending parent is flushed as an open start tag first. The new
        element stays pending so attributes can still be added.

        Args:
            name: Element name, written as given (prefixes included)
            *pairs: Attribute name/value pairs; an odd trailing value is text
            text: Character content, escaped as by ``chars()``
            **attrs: More attributes, applied after ``pairs``

        Returns:
            self for method chaining

        Raises:
            BuilderArgumentError: If text is given both positionally and by keyword
        """
        pairs, text = self._split_text("element", pairs, text)

        out = self._start_tag(close=False)
        self._elements.append(name)
        self._pending = True
        for key, value in zip(pairs[::2], pairs[1::2]):
            self._set_attr(str(key), value)
        for key, value in attrs.items():
            self._set_attr(key, value)

        acc = get_build_accumulator()
        if acc is not None:
            acc.record_element()

        if text is not None:
            out += self._start_tag(close=False) + self._text_line(escape_text(str(text)))
        self._write(out)
        return self

    def attr(self, name: str, value: Any) -> Builder:
        """Add or overwrite an attribute on the pending element.

        An overwritten attribute keeps the position where it first
        appeared. A value of None removes the attribute. Does nothing when
        no element is pending.

        Returns:
            self for method chaining
        """
        if self._pending:
            self._set_attr(name, value)
        else:
            logger.debug("attr(%r) ignored: no pending element", name)
        return self

    def end(self) -> Builder:
        """Close the innermost open element.

        A still-pending element is written as an empty element tag;
        otherwise a closing tag is written.

        Returns:
            self for method chaining

        Raises:
            BuilderStateError: If no element is open
        """
        if not self._elements:
            logger.debug("end() called with no open element")
            raise BuilderStateError("end", "no open element to close")

        if self._pending:
            self._write(self._start_tag(close=True))
            return self

        out = f"</{self._elements[-1]}>"
        if self._formatting():
            out = self._indentation(len(self._elements) - 1) + out + "\n"
        self._elements.pop()
        self._write(out)
        return self

    def tag(self, name: str, /, *pairs: Any, text: Any = None, **attrs: Any) -> Builder:
        """Write a complete element on one line.

        Same arguments as ``element()``. Equivalent to
        ``inline().element(...).end().end_inline()``.

        Raises:
            BuilderArgumentError: If text is given both positionally and by
                keyword; nothing is written and no inline region is left open
        """
        pairs, text = self._split_text("tag", pairs, text)
        self.inline()
        self.element(name, *pairs, text=text, **attrs)
        self.end()
        return self.end_inline()

    def flush(self) -> Builder:
        """Close a pending element as an empty element tag, if there is one."""
        if self._pending:
            self._write(self._start_tag(close=True))
        return self

    def end_all(self) -> Builder:
        """Close every open element, innermost first."""
        while self._elements:
            self.end()
        return self

    # =========================================================================
    # Content
    # =========================================================================

    def chars(self, value: Any) -> Builder:
        """Write escaped character data inside the innermost element."""
        self._write(self._start_tag(close=False) + self._text_line(escape_text(str(value))))
        return self

    def chars_no_escape(self, value: Any) -> Builder:
        """Write character data verbatim.

        The caller is responsible for the value being valid markup.
        """
        self._write(self._start_tag(close=False) + self._text_line(str(value)))
        return self

    def cdata(self, value: Any) -> Builder:
        """Write a CDATA section.

        The payload is not escaped or checked; it must not contain ``]]>``.
        """
        self._write(self._start_tag(close=False) + self._text_line(f"<![CDATA[{value}]]>"))
        return self

    def instruct(self, name: str, /, *pairs: Any, **attrs: Any) -> Builder:
        """Write a processing instruction on its own line.

        Always followed by a newline, whatever the pretty/inline state.

        Args:
            name: Instruction target (e.g., "xml", "xml-stylesheet")
            *pairs: Pseudo-attribute name/value pairs
            **attrs: More pseudo-attributes, applied after ``pairs``

        Returns:
            self for method chaining

        Raises:
            BuilderArgumentError: If ``pairs`` has an odd length
        """
        if len(pairs) % 2:
            raise BuilderArgumentError("instruct", f"expected name/value pairs, got {len(pairs)} values")

        parts = [self._start_tag(close=False), "<?", name]
        items = [*zip(pairs[::2], pairs[1::2]), *attrs.items()]
        for key, value in items:
            if value is not None:
                parts.append(f' {key}="{escape_attr(str(value), self._escape_apostrophe)}"')
        parts.append("?>\n")
        self._write("".join(parts))
        return self

    def instruct_xml(self) -> Builder:
        """Write the standard ``<?xml version="1.0" encoding="UTF-8"?>`` line."""
        return self.instruct("xml", "version", "1.0", "encoding", "UTF-8")

    def doctype(self, declaration: str) -> Builder:
        """Write ``<!DOCTYPE declaration>`` on its own line.

        See xmlbuilder.doctypes for common declarations.
        """
        self._write(f"{self._start_tag(close=False)}<!DOCTYPE {declaration}>\n")
        return self

    # =========================================================================
    # Inline regions
    # =========================================================================

    def inline(self) -> Builder:
        """Enter an inline region.

        Regions nest; block formatting resumes only once every ``inline()``
        has been matched by ``end_inline()``.
        """
        out = self._start_tag(close=False)
        if self._inline == 0 and self._pretty:
            out += self._indentation(len(self._elements))
        self._inline += 1
        self._write(out)
        return self

    def end_inline(self) -> Builder:
        """Leave the innermost inline region.

        Raises:
            BuilderStateError: If no inline region is open
        """
        if self._inline == 0:
            logger.debug("end_inline() called outside an inline region")
            raise BuilderStateError("end_inline", "not inside an inline region")

        out = self._start_tag(close=False)
        self._inline -= 1
        if self._inline == 0 and self._pretty:
            out += "\n"
        self._write(out)
        return self

    @contextmanager
    def open(self, name: str, /, *pairs: Any, text: Any = None, **attrs: Any) -> Iterator[Builder]:
        """Scope an element to a ``with`` block.

        Example:
            >>> b = Builder()
            >>> with b.open("ul"):
            ...     _ = b.tag("li", "one")
            >>> print(b.sink, end="")
            <ul>
              <li>one</li>
            </ul>

        The element is not closed if the block raises.
        """
        self.element(name, *pairs, text=text, **attrs)
        yield self
        self.end()

    @contextmanager
    def inline_region(self) -> Iterator[Builder]:
        """Scope an inline region to a ``with`` block."""
        self.inline()
        yield self
        self.end_inline()

    # =========================================================================
    # Formatting options
    # =========================================================================

    def offset(self, delta: int) -> Builder:
        """Set the number of levels added to the nesting depth when indenting."""
        self._offset = delta
        return self

    def indent(self, unit: str) -> Builder:
        """Set the string written once per indentation level."""
        self._indent = unit
        return self

    def pretty(self, enabled: bool = True) -> Builder:
        """Turn indentation and newlines on or off."""
        self._pretty = enabled
        return self

    def empty(self, use_self_closing: bool = True) -> Builder:
        """Choose ``<name />`` (True) or ``<name>`` (False) for empty elements."""
        self._self_closing = use_self_closing
        return self

    # =========================================================================
    # Internals
    # =========================================================================

    def _formatting(self) -> bool:
        return self._pretty and not self._inline

    def _indentation(self, level: int) -> str:
        # Repeating a string a negative number of times yields ""
        return self._indent * (level + self._offset)

    @staticmethod
    def _split_text(operation: str, pairs: tuple[Any, ...], text: Any) -> tuple[tuple[Any, ...], Any]:
        """Separate an odd trailing positional value from attribute pairs."""
        if len(pairs) % 2:
            if text is not None:
                raise BuilderArgumentError(operation, "text given both positionally and by keyword")
            return pairs[:-1], pairs[-1]
        return pairs, text

    def _set_attr(self, name: str, value: Any) -> None:
        if value is None:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = str(value)

    def _start_tag(self, close: bool) -> str:
        """Render the pending start tag, or "" when nothing is pending.

        Clears the pending state; with ``close`` the element is also popped.
        """
        if not self._pending:
            return ""

        formatting = self._formatting()
        parts: list[str] = []
        if formatting:
            parts.append(self._indentation(len(self._elements) - 1))
        parts += ("<", self._elements[-1])
        for key, value in self._attributes.items():
            parts.append(f' {key}="{escape_attr(value, self._escape_apostrophe)}"')
        if close:
            self._elements.pop()
            parts.append(" />" if self._self_closing else ">")
        else:
            parts.append(">")
        if formatting:
            parts.append("\n")

        self._pending = False
        self._attributes.clear()
        return "".join(parts)

    def _text_line(self, text: str) -> str:
        if self._formatting():
            return f"{self._indentation(len(self._elements))}{text}\n"
        return text

    def _write(self, s: str) -> None:
        if not s:
            return
        self._sink.write(s)
        acc = get_build_accumulator()
        if acc is not None:
            acc.record_write(len(s))
