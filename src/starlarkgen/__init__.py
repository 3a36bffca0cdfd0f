"""
starlarkgen - Render Starlark syntax trees back into source code.

Code generators and AST-rewriting tools build or modify a tree of
``starlarkgen.syntax`` nodes and serialize it with deterministic, configurable
formatting.
"""

from starlarkgen.api import starlark_expr, starlark_stmt, write_expr, write_stmt
from starlarkgen.layout import Layout
from starlarkgen.options import (
    RenderOptions,
    build_options,
    with_call_option,
    with_depth,
    with_dict_option,
    with_indent,
    with_list_option,
    with_space_eq_binary,
    with_tuple_option,
)
from starlarkgen.utils.errors import (
    OptionError,
    RenderError,
    RenderInvariantError,
    SinkWriteError,
    StarlarkGenError,
)

__version__ = "0.1.0"
__all__ = [
    "starlark_stmt",
    "starlark_expr",
    "write_stmt",
    "write_expr",
    "Layout",
    "RenderOptions",
    "build_options",
    "with_call_option",
    "with_depth",
    "with_dict_option",
    "with_indent",
    "with_list_option",
    "with_space_eq_binary",
    "with_tuple_option",
    "StarlarkGenError",
    "OptionError",
    "RenderError",
    "SinkWriteError",
    "RenderInvariantError",
]
