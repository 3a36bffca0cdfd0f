"""
Expression rendering.

One function per expression kind. Each builds the item list for its node
and hands it to the render driver, so every failure carries a breadcrumb
such as ``rendering call expression element 1: rendering ident Name: ...``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from starlarkgen.layout import sequence_items
from starlarkgen.literals import render_literal_value
from starlarkgen.render import (
    COLON,
    SPACE,
    Item,
    Writer,
    expr_item,
    render,
    string_item,
    token_item,
)
from starlarkgen.syntax import (
    BinaryExpr,
    CallExpr,
    Comprehension,
    CondExpr,
    DictEntry,
    DictExpr,
    DotExpr,
    Expr,
    ForClause,
    Ident,
    IfClause,
    IndexExpr,
    ListExpr,
    Literal,
    ParenExpr,
    SliceExpr,
    Token,
    TupleExpr,
    UnaryExpr,
)
from starlarkgen.utils.errors import RenderError

if TYPE_CHECKING:
    from starlarkgen.options import RenderOptions


def binary_expr(out: Writer, node: Optional[BinaryExpr], opts: RenderOptions) -> None:
    """Render ``x op y``. Keyword ``=`` is unspaced unless configured."""
    if node is None:
        raise RenderError("rendering binary expression: nil input")

    spaced = node.op != Token.EQ or opts.space_eq_binary
    items: list[Item] = [expr_item(node.x, "X")]
    if spaced:
        items.append(SPACE)
    items.append(token_item(node.op, "Op"))
    if spaced:
        items.append(SPACE)
    items.append(expr_item(node.y, "Y"))

    render(out, "rendering binary expression", opts, *items)


def call_expr(out: Writer, node: Optional[CallExpr], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering call expression: nil input")

    render(
        out,
        "rendering call expression",
        opts,
        expr_item(node.fn, "Fn"),
        token_item(Token.LPAREN, "LPAREN"),
        *sequence_items(node.args, opts.call_option),
        token_item(Token.RPAREN, "RPAREN"),
    )


def comprehension(out: Writer, node: Optional[Comprehension], opts: RenderOptions) -> None:
    """Render a list or dict comprehension with its clauses in order."""
    if node is None:
        raise RenderError("rendering comprehension: nil input")

    if node.curly:
        left, right = Token.LBRACE, Token.RBRACE
    else:
        left, right = Token.LBRACK, Token.RBRACK

    items: list[Item] = [token_item(left, "left"), expr_item(node.body, "Body")]
    for clause in node.clauses:
        if isinstance(clause, ForClause):
            items += [
                SPACE,
                token_item(Token.FOR, "FOR"),
                SPACE,
                expr_item(clause.vars, "for clause Vars"),
                SPACE,
                token_item(Token.IN, "IN"),
                SPACE,
                expr_item(clause.x, "for clause X"),
            ]
        elif isinstance(clause, IfClause):
            items += [
                SPACE,
                token_item(Token.IF, "IF"),
                SPACE,
                expr_item(clause.cond, "if clause Cond"),
            ]
        else:
            raise RenderError(
                f"unexpected clause type {type(clause).__name__} rendering comprehension"
            )
    items.append(token_item(right, "right"))

    render(out, "rendering comprehension", opts, *items)


def cond_expr(out: Writer, node: Optional[CondExpr], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering condition expression: nil input")

    render(
        out,
        "rendering condition expression",
        opts,
        expr_item(node.true, "True"),
        SPACE,
        token_item(Token.IF, "IF"),
        SPACE,
        expr_item(node.cond, "Cond"),
        SPACE,
        token_item(Token.ELSE, "ELSE"),
        SPACE,
        expr_item(node.false, "False"),
    )


def dict_entry(out: Writer, node: Optional[DictEntry], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering dict entry: nil input")

    render(
        out,
        "rendering dict entry",
        opts,
        expr_item(node.key, "Key"),
        COLON,
        SPACE,
        expr_item(node.value, "Value"),
    )


def dict_expr(out: Writer, node: Optional[DictExpr], opts: RenderOptions) -> None:
    """
    Render a dict literal.

    Raises:
        RenderError: If any element is not a DictEntry, before anything is
            written
    """
    if node is None:
        raise RenderError("rendering dict expression: nil input")

    for element in node.elements:
        if not isinstance(element, DictEntry):
            raise RenderError(
                f"expected DictEntry, got {type(element).__name__} in dict expression"
            )

    render(
        out,
        "rendering dict expression",
        opts,
        token_item(Token.LBRACE, "LBRACE"),
        *sequence_items(node.elements, opts.dict_option),
        token_item(Token.RBRACE, "RBRACE"),
    )


def dot_expr(out: Writer, node: Optional[DotExpr], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering dot expression: nil input")

    render(
        out,
        "rendering dot expression",
        opts,
        expr_item(node.x, "X"),
        token_item(Token.DOT, "DOT"),
        expr_item(node.name, "Name"),
    )


def ident(out: Writer, node: Optional[Ident], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering ident: nil input")

    render(out, "rendering ident", opts, string_item(node.name, "Name"))


def index_expr(out: Writer, node: Optional[IndexExpr], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering index expression: nil input")

    render(
        out,
        "rendering index expression",
        opts,
        expr_item(node.x, "X"),
        token_item(Token.LBRACK, "LBRACK"),
        expr_item(node.y, "Y"),
        token_item(Token.RBRACK, "RBRACK"),
    )


def list_expr(out: Writer, node: Optional[ListExpr], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering list expression: nil input")

    render(
        out,
        "rendering list expression",
        opts,
        token_item(Token.LBRACK, "LBRACK"),
        *sequence_items(node.elements, opts.list_option),
        token_item(Token.RBRACK, "RBRACK"),
    )


def literal(out: Writer, node: Optional[Literal], opts: RenderOptions) -> None:
    """
    Render a literal.

    A typed payload is formatted from its value; without one, the raw
    source text is written as is.
    """
    if node is None:
        raise RenderError("rendering literal: nil input")

    if node.value is None:
        render(out, "rendering literal", opts, string_item(node.raw, "raw payload"))
        return

    try:
        kind, text = render_literal_value(node.value)
    except ValueError as exc:
        raise RenderError(str(exc)) from exc

    render(out, f"rendering literal {kind} value", opts, string_item(text, f"{kind} payload"))


def paren_expr(out: Writer, node: Optional[ParenExpr], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering paren expression: nil input")

    items: list[Item] = [token_item(Token.LPAREN, "LPAREN")]
    # An empty tuple already renders its own parentheses.
    if not (isinstance(node.x, TupleExpr) and not node.x.elements):
        items.append(expr_item(node.x, "X"))
    items.append(token_item(Token.RPAREN, "RPAREN"))

    render(out, "rendering paren expression", opts, *items)


def slice_expr(out: Writer, node: Optional[SliceExpr], opts: RenderOptions) -> None:
    """Render ``x[lo:hi]`` or ``x[lo:hi:step]``, omitting absent bounds."""
    if node is None:
        raise RenderError("rendering slice expression: nil input")

    items: list[Item] = [expr_item(node.x, "X"), token_item(Token.LBRACK, "LBRACK")]
    if node.lo is not None:
        items.append(expr_item(node.lo, "Lo"))
    items.append(COLON)
    if node.hi is not None:
        items.append(expr_item(node.hi, "Hi"))
    if node.step is not None:
        items += [COLON, expr_item(node.step, "Step")]
    items.append(token_item(Token.RBRACK, "RBRACK"))

    render(out, "rendering slice expression", opts, *items)


def tuple_expr(out: Writer, node: Optional[TupleExpr], opts: RenderOptions) -> None:
    """Render tuple elements without brackets; the empty tuple is ``()``."""
    if node is None:
        raise RenderError("rendering tuple expression: nil input")

    if not node.elements:
        render(
            out,
            "rendering tuple expression",
            opts,
            token_item(Token.LPAREN, "LPAREN"),
            token_item(Token.RPAREN, "RPAREN"),
        )
        return

    render(
        out,
        "rendering tuple expression",
        opts,
        *sequence_items(node.elements, opts.tuple_option),
    )


def unary_expr(out: Writer, node: Optional[UnaryExpr], opts: RenderOptions) -> None:
    """
    Render ``op x``.

    A bare ``*`` without an operand is the keyword-only marker in parameter
    lists; any other operator requires one.
    """
    if node is None:
        raise RenderError("rendering unary expression: nil input")

    if node.x is None and node.op != Token.STAR:
        raise RenderError(f'rendering unary expression, nil X value for "{node.op}" token')

    render(out, "rendering unary expression,", opts, token_item(node.op, f'writing "{node.op}"'))

    if node.x is not None:
        items: list[Item] = []
        if node.op.is_keyword:
            items.append(SPACE)
        items.append(expr_item(node.x, "X"))
        render(out, "rendering unary expression", opts, *items)


def render_expr(out: Writer, node: Optional[Expr], opts: RenderOptions) -> None:
    """
    Render any expression node.

    Raises:
        RenderError: If the node kind is not renderable or any part of it
            fails to render
    """
    if isinstance(node, BinaryExpr):
        binary_expr(out, node, opts)
    elif isinstance(node, CallExpr):
        call_expr(out, node, opts)
    elif isinstance(node, Comprehension):
        comprehension(out, node, opts)
    elif isinstance(node, CondExpr):
        cond_expr(out, node, opts)
    elif isinstance(node, DictEntry):
        dict_entry(out, node, opts)
    elif isinstance(node, DictExpr):
        dict_expr(out, node, opts)
    elif isinstance(node, DotExpr):
        dot_expr(out, node, opts)
    elif isinstance(node, Ident):
        ident(out, node, opts)
    elif isinstance(node, IndexExpr):
        index_expr(out, node, opts)
    elif isinstance(node, ListExpr):
        list_expr(out, node, opts)
    elif isinstance(node, Literal):
        literal(out, node, opts)
    elif isinstance(node, ParenExpr):
        paren_expr(out, node, opts)
    elif isinstance(node, SliceExpr):
        slice_expr(out, node, opts)
    elif isinstance(node, TupleExpr):
        tuple_expr(out, node, opts)
    elif isinstance(node, UnaryExpr):
        unary_expr(out, node, opts)
    else:
        # LambdaExpr among others
        raise RenderError(f"type {type(node).__name__} is not supported")
