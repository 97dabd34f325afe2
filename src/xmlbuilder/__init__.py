"""
xmlbuilder — Streaming XML/HTML Writer

Writes well-formed, optionally pretty-printed markup straight to a sink
without building a document tree. Zero runtime dependencies.

Quick Start:
    >>> from xmlbuilder import Builder
    >>> b = Builder()
    >>> _ = b.instruct_xml()
    >>> _ = b.element("address", "id", 12)
    >>> _ = b.tag("city", "Eindhoven")
    >>> _ = b.end()
    >>> print(b.sink, end="")
    <?xml version="1.0" encoding="UTF-8"?>
    <address id="12">
      <city>Eindhoven</city>
    </address>

    >>> # Any object with write(str) works as a sink
    >>> import sys
    >>> _ = Builder(sys.stdout).tag("p", "class", "lead", "Hello")
    <p class="lead">Hello</p>

    >>> # Or build a string in one call
    >>> from xmlbuilder import render
    >>> render(lambda b: b.tag("br"))
    '<br />\\n'
"""

from collections.abc import Callable

from xmlbuilder.builder import Builder
from xmlbuilder.config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from xmlbuilder.doctypes import (
    DOCTYPE_HTML4_FRAMESET,
    DOCTYPE_HTML4_STRICT,
    DOCTYPE_HTML4_TRANSITIONAL,
    DOCTYPE_HTML5,
    DOCTYPE_XHTML1_FRAMESET,
    DOCTYPE_XHTML1_STRICT,
    DOCTYPE_XHTML1_TRANSITIONAL,
    DOCTYPE_XHTML11,
)
from xmlbuilder.errors import BuilderArgumentError, BuilderStateError, XmlBuilderError
from xmlbuilder.escape import escape_attr, escape_text
from xmlbuilder.profiling import BuildAccumulator, get_build_accumulator, profiled_build
from xmlbuilder.sinks import EncodedSink, Sink, StringBuilder

__version__ = "0.1.0"


def render(build: Callable[[Builder], object], *, config: BuilderConfig | None = None) -> str:
    """Run ``build`` against a fresh in-memory builder and return the text.

    Args:
        build: Callable that receives the Builder and issues calls on it
        config: Builder options (uses the context's active config if None)

    Returns:
        Everything written during the call

    Example:
        >>> def page(b):
        ...     b.doctype(DOCTYPE_HTML5)
        ...     b.element("p").chars("Hi").end()
        >>> print(render(page, config=BuilderConfig(pretty=False)))
        <!DOCTYPE html>
        <p>Hi</p>
    """
    sb = StringBuilder()
    build(Builder(sb, config=config))
    return sb.build()


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "Builder",
    "render",
    # Configuration (ContextVar-based)
    "BuilderConfig",
    "get_builder_config",
    "set_builder_config",
    "reset_builder_config",
    "builder_config_context",
    # Sinks
    "Sink",
    "StringBuilder",
    "EncodedSink",
    # Escaping
    "escape_attr",
    "escape_text",
    # Errors
    "XmlBuilderError",
    "BuilderStateError",
    "BuilderArgumentError",
    # Profiling
    "BuildAccumulator",
    "get_build_accumulator",
    "profiled_build",
    # Doctypes
    "DOCTYPE_HTML5",
    "DOCTYPE_HTML4_STRICT",
    "DOCTYPE_HTML4_TRANSITIONAL",
    "DOCTYPE_HTML4_FRAMESET",
    "DOCTYPE_XHTML1_STRICT",
    "DOCTYPE_XHTML1_TRANSITIONAL",
    "DOCTYPE_XHTML1_FRAMESET",
    "DOCTYPE_XHTML11",
]
