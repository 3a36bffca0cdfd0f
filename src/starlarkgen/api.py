"""
Public rendering entry points.

Render a statement or an expression either to a string or to any object
with a ``write(str)`` method:

    >>> from starlarkgen import starlark_stmt, with_depth
    >>> from starlarkgen.syntax import BranchStmt, Token
    >>> starlark_stmt(BranchStmt(Token.PASS), with_depth(1))
    '    pass\\n'
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from starlarkgen.expr import render_expr
from starlarkgen.options import Option, build_options
from starlarkgen.render import Writer
from starlarkgen.stmt import render_stmt
from starlarkgen.syntax import Expr, Stmt
from starlarkgen.utils.errors import RenderError

logger = logging.getLogger(__name__)


def write_stmt(out: Writer, node: Optional[Stmt], *options: Option) -> None:
    """
    Render a statement to ``out``.

    Output written before a failure stays in ``out``.

    Raises:
        OptionError: If an option is invalid, before anything is written
        RenderError: If the statement cannot be rendered
    """
    opts = build_options(*options)
    logger.debug(f"Rendering statement {type(node).__name__} at depth {opts.depth}")
    try:
        render_stmt(out, node, opts)
    except RenderError as err:
        logger.debug(f"Statement rendering failed: {err.message}")
        raise


def write_expr(out: Writer, node: Optional[Expr], *options: Option) -> None:
    """
    Render an expression to ``out``.

    Output written before a failure stays in ``out``.

    Raises:
        OptionError: If an option is invalid, before anything is written
        RenderError: If the expression cannot be rendered
    """
    opts = build_options(*options)
    logger.debug(f"Rendering expression {type(node).__name__} at depth {opts.depth}")
    try:
        render_expr(out, node, opts)
    except RenderError as err:
        logger.debug(f"Expression rendering failed: {err.message}")
        raise


def starlark_stmt(node: Optional[Stmt], *options: Option) -> str:
    """Render a statement to a string."""
    buf = io.StringIO()
    write_stmt(buf, node, *options)
    return buf.getvalue()


def starlark_expr(node: Optional[Expr], *options: Option) -> str:
    """Render an expression to a string."""
    buf = io.StringIO()
    write_expr(buf, node, *options)
    return buf.getvalue()
