"""
Item IR and render driver.

Renderers describe their output as a flat list of ``Item`` values (write this
token, render that child expression, emit the indentation) and hand it to
``render``. The driver interprets the items in order and prefixes every
failure with the renderer's prefix and the failing item's description, which
is how error breadcrumbs are built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence, Union

from starlarkgen.syntax import NON_LITERAL_TOKENS, Expr, Stmt, Token
from starlarkgen.utils.errors import RenderError, RenderInvariantError, SinkWriteError

if TYPE_CHECKING:
    from starlarkgen.options import RenderOptions


class Writer(Protocol):
    """Anything accepting text, such as ``io.StringIO`` or an open file."""

    def write(self, text: str) -> Any: ...


class ItemType(IntEnum):
    """Kinds of render items."""

    EXPR = 1
    STMTS = 2
    INDENT = 3
    TOKEN = 4
    STRING = 5
    EXTRA_INDENT = 6


@dataclass(frozen=True, slots=True)
class Item:
    """
    One step of the emission IR.

    Attributes:
        item_type: What the item emits
        token: Token written by TOKEN items
        expr: Expression rendered by EXPR items
        stmts: Statements rendered by STMTS items
        add_indent: Extra depth for the nested EXPR or STMTS render
        value: Text written by STRING items
        desc: Description used in error breadcrumbs
    """

    item_type: Union[ItemType, int] = 0
    token: Optional[Token] = None
    expr: Optional[Expr] = None
    stmts: Sequence[Stmt] = field(default_factory=tuple)
    add_indent: int = 0
    value: str = ""
    desc: str = ""


def expr_item(expr: Optional[Expr], desc: str) -> Item:
    return Item(item_type=ItemType.EXPR, expr=expr, desc=desc)


def expr_item_indent(expr: Optional[Expr], desc: str) -> Item:
    """Like ``expr_item``, rendering the expression one level deeper."""
    return Item(item_type=ItemType.EXPR, expr=expr, desc=desc, add_indent=1)


def stmts_item(stmts: Sequence[Stmt], desc: str, add_indent: bool) -> Item:
    return Item(
        item_type=ItemType.STMTS,
        stmts=stmts,
        desc=desc,
        add_indent=1 if add_indent else 0,
    )


def string_item(value: str, desc: str) -> Item:
    return Item(item_type=ItemType.STRING, value=value, desc=desc)


def token_item(token: Token, desc: str) -> Item:
    return Item(item_type=ItemType.TOKEN, token=token, desc=desc)


QUOTE = string_item('"', "quote")
SPACE = string_item(" ", "space")
COLON = token_item(Token.COLON, "COLON")
COMMA = token_item(Token.COMMA, "COMMA")
NEWLINE = token_item(Token.NEWLINE, "NEWLINE")
INDENT = Item(item_type=ItemType.INDENT)
EXTRA_INDENT = Item(item_type=ItemType.EXTRA_INDENT)

COMMA_SPACE = (COMMA, SPACE)


def write(out: Writer, text: str) -> None:
    """
    Write ``text`` to the sink.

    Raises:
        SinkWriteError: If the sink raises for any reason
    """
    try:
        out.write(text)
    except Exception as exc:
        raise SinkWriteError(str(exc), cause=exc) from exc


def _token_text(token: Optional[Token]) -> str:
    if token is None or token in NON_LITERAL_TOKENS:
        raise RenderError(f"{token} not supported")
    if token == Token.NEWLINE:
        return "\n"
    return str(token)


def render(out: Writer, err_prefix: str, opts: RenderOptions, *items: Optional[Item]) -> None:
    """
    Interpret ``items`` in order, writing their output to ``out``.

    Raises:
        RenderError: With a breadcrumb built from ``err_prefix`` and the
            description of the item that failed
        RenderInvariantError: If an item is None
    """
    # Imported here, the renderers build their items with this module.
    from starlarkgen.expr import render_expr
    from starlarkgen.stmt import render_stmt

    for item in items:
        if item is None:
            raise RenderInvariantError(f"nil item in render, errPrefix: {err_prefix}")

        if item.item_type == ItemType.EXPR:
            expr_opts = opts.add_depth(item.add_indent) if item.add_indent > 0 else opts
            try:
                render_expr(out, item.expr, expr_opts)
            except RenderError as err:
                raise err.wrap(f"{err_prefix} {item.desc}") from err.cause

        elif item.item_type == ItemType.STMTS:
            stmt_opts = opts.add_depth(item.add_indent) if item.add_indent > 0 else opts
            for i, stmt in enumerate(item.stmts):
                try:
                    render_stmt(out, stmt, stmt_opts)
                except RenderError as err:
                    raise err.wrap(
                        f"{err_prefix}, rendering {item.desc} statement index {i}"
                    ) from err.cause

        elif item.item_type in (ItemType.INDENT, ItemType.EXTRA_INDENT):
            extra = 1 if item.item_type == ItemType.EXTRA_INDENT else 0
            try:
                write(out, opts.indentation(extra))
            except RenderError as err:
                raise err.wrap(f"{err_prefix} indent") from err.cause

        elif item.item_type == ItemType.STRING:
            try:
                write(out, item.value)
            except RenderError as err:
                raise err.wrap(f"{err_prefix} {item.desc}") from err.cause

        elif item.item_type == ItemType.TOKEN:
            try:
                write(out, _token_text(item.token))
            except RenderError as err:
                raise err.wrap(f"{err_prefix} {item.desc} token") from err.cause

        else:
            raise RenderError(
                f"{err_prefix}: item type {int(item.item_type)} is not supported in render"
            )
