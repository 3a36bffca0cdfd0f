"""
starlarkgen Utilities Package.

Common utilities for error handling.
"""

from starlarkgen.utils.errors import (
    OptionError,
    RenderError,
    RenderInvariantError,
    SinkWriteError,
    StarlarkGenError,
)

__all__ = [
    "StarlarkGenError",
    "OptionError",
    "RenderError",
    "SinkWriteError",
    "RenderInvariantError",
]
