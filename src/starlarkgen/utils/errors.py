"""
Error types for starlarkgen.

Render errors carry a breadcrumb message: every layer that wraps an error
prefixes the node kind and field it was rendering, so a failure deep in the
tree reads as a single "outer: inner: leaf" path.
"""

from __future__ import annotations

from typing import Optional


class StarlarkGenError(Exception):
    """Base exception for all starlarkgen errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class OptionError(StarlarkGenError):
    """Raised when a render option has an invalid value."""

    pass


class RenderError(StarlarkGenError):
    """
    Raised when a node cannot be rendered.

    Attributes:
        message: Full breadcrumb message
        cause: The exception raised by the output sink, if the failure
            originated from a write
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)

    def wrap(self, prefix: str) -> RenderError:
        """Return a copy of the error with ``prefix`` prepended to the message."""
        return type(self)(f"{prefix}: {self.message}", self.cause)


class SinkWriteError(RenderError):
    """Raised when the output sink rejects a write."""

    pass


class RenderInvariantError(StarlarkGenError):
    """
    Raised when the renderer is driven with malformed internal input.

    This signals a programming error rather than an unrenderable tree and
    is never wrapped into a breadcrumb.
    """

    pass
