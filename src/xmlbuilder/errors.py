"""Exception classes for xmlbuilder.

Provides standardized exceptions for error handling throughout xmlbuilder.
Sink failures are not wrapped: whatever the sink raises reaches the caller
unchanged.
"""

from __future__ import annotations


class XmlBuilderError(Exception):
    """Base exception for all xmlbuilder errors.

    Subclass this for specific error categories.
    """

    pass


class BuilderStateError(XmlBuilderError):
    """A call that does not fit the builder's current state.

    Raised for the contract violations the builder can detect without a
    schema: closing an element when none is open, or leaving an inline
    region that was never entered. Nothing is written to the sink when
    this is raised.
    """

    def __init__(self, operation: str, message: str) -> None:
        """Initialize state error.

        Args:
            operation: Name of the builder method that was called (e.g., "end")
            message: Description of the violation
        """
        self.operation = operation
        super().__init__(f"{operation}(): {message}")


class BuilderArgumentError(XmlBuilderError, ValueError):
    """Malformed arguments passed to a builder method."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}(): {message}")
