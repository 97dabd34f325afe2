"""ContextVar-based builder configuration for xmlbuilder.

Provides the default formatting options a Builder starts with. A Builder
copies the active configuration into its own state at construction; the
per-builder setters (``indent()``, ``pretty()``, ...) never touch the
shared config.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    b = Builder(sink, config=BuilderConfig(indent="\\t"))

    # Context default, picked up by every Builder created inside the block
    with builder_config_context(BuilderConfig(pretty=False)):
        b = Builder(sink)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        indent: String repeated once per nesting level
        pretty: Emit indentation and newlines at all
        offset: Signed adjustment added to the nesting depth before indenting
        self_closing: Render empty elements as ``<name />`` rather than ``<name>``
        escape_apostrophe: Also escape ``'`` in attribute values

    """

    indent: str = "  "
    pretty: bool = True
    offset: int = 0
    self_closing: bool = True
    escape_apostrophe: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                BuilderConfig attribute names.

        Returns:
            New BuilderConfig instance with values from dict.

        Example:
            >>> config = BuilderConfig.from_dict({
            ...     "indent": "    ",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.indent
            '    '

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get current builder configuration (thread-local).

    Returns:
        The active BuilderConfig for this thread/context.

    """
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for current context.

    Args:
        config: BuilderConfig instance to use for this context.

    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: BuilderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with builder_config_context(BuilderConfig(pretty=False)):
        ...     get_builder_config().pretty
        False
        >>> get_builder_config().pretty
        True

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "BuilderConfig",
    "get_builder_config",
    "set_builder_config",
    "reset_builder_config",
    "builder_config_context",
]
