"""xmlbuilder BuildAccumulator — opt-in profiling for document generation.

This module provides accumulated metrics while builders write:
- Number of sink writes
- Characters written
- Elements opened

Zero overhead when disabled (get_build_accumulator() returns None).

Example:
    from xmlbuilder import Builder
    from xmlbuilder.profiling import profiled_build

    with profiled_build() as metrics:
        Builder().tag("p", "Hello")

    print(metrics.summary())
    # {"total_ms": 0.1, "writes": 3, "chars_written": 13, "elements": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class BuildAccumulator:
    """Accumulated metrics during document generation.

    Attributes:
        start_time: Profiling start timestamp.
        writes: Number of sink write calls.
        chars_written: Total characters handed to sinks.
        elements: Number of elements opened.

    """

    start_time: float = field(default_factory=perf_counter)
    writes: int = 0
    chars_written: int = 0
    elements: int = 0

    def record_write(self, length: int) -> None:
        """Record one sink write of ``length`` characters."""
        self.writes += 1
        self.chars_written += length

    def record_element(self) -> None:
        """Record one opened element."""
        self.elements += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of build metrics.

        Returns:
            Dict with total_ms, writes, chars_written, elements.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "writes": self.writes,
            "chars_written": self.chars_written,
            "elements": self.elements,
        }


_accumulator: ContextVar[BuildAccumulator | None] = ContextVar(
    "build_accumulator",
    default=None,
)


def get_build_accumulator() -> BuildAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_build() -> Iterator[BuildAccumulator]:
    """Context manager for profiled document generation.

    Creates a BuildAccumulator and makes it available via
    get_build_accumulator() for the duration of the with block.

    Yields:
        BuildAccumulator that will be populated by builder writes.

    """
    acc = BuildAccumulator()
    token: Token[BuildAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
