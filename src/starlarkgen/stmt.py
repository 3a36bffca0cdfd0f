"""
Statement rendering.

Every statement starts with the indentation for the current depth and ends
with a newline. Block bodies are rendered one level deeper through a
statements item, which labels failures with the index of the statement.

A string expression statement is rendered as a triple-quoted docstring; see
``docstring`` for the re-indentation rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from starlarkgen.render import (
    COLON,
    COMMA,
    INDENT,
    NEWLINE,
    QUOTE,
    SPACE,
    Item,
    Writer,
    expr_item,
    render,
    stmts_item,
    string_item,
    token_item,
)
from starlarkgen.syntax import (
    AssignStmt,
    BranchStmt,
    DefStmt,
    ExprStmt,
    ForStmt,
    IfStmt,
    Literal,
    LoadStmt,
    ReturnStmt,
    Stmt,
    Token,
    WhileStmt,
)
from starlarkgen.utils.errors import RenderError

if TYPE_CHECKING:
    from starlarkgen.options import RenderOptions

TRIPLE_QUOTE = '"""'
ESCAPED_TRIPLE_QUOTE = '\\"\\"\\"'

ASSIGN_TOKENS = (Token.EQ, Token.PLUS_EQ, Token.MINUS_EQ, Token.STAR_EQ, Token.PERCENT_EQ)
BRANCH_TOKENS = (Token.BREAK, Token.CONTINUE, Token.PASS)


def assign_stmt(out: Writer, node: Optional[AssignStmt], opts: RenderOptions) -> None:
    """
    Render ``lhs op rhs``.

    Raises:
        RenderError: If the operator is not an assignment operator, before
            anything is written
    """
    if node is None:
        raise RenderError("rendering assign statement: nil input")

    if node.op not in ASSIGN_TOKENS:
        expected = ", ".join(str(tok) for tok in ASSIGN_TOKENS)
        raise RenderError(
            f"rendering assign statement: unsupported Op token {node.op}, expected one of: {expected}"
        )

    render(
        out,
        "rendering assignment statement",
        opts,
        INDENT,
        expr_item(node.lhs, "LHS"),
        SPACE,
        token_item(node.op, "Op"),
        SPACE,
        expr_item(node.rhs, "RHS"),
        NEWLINE,
    )


def branch_stmt(out: Writer, node: Optional[BranchStmt], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering branch statement: nil input")

    if node.token not in BRANCH_TOKENS:
        raise RenderError(
            f"rendering branch statement: unsupported token {node.token}, "
            f"expected {Token.BREAK}, {Token.CONTINUE} or {Token.PASS}"
        )

    render(
        out,
        "rendering branch statement",
        opts,
        INDENT,
        token_item(node.token, "Token"),
        NEWLINE,
    )


def def_stmt(out: Writer, node: Optional[DefStmt], opts: RenderOptions) -> None:
    """Render a function definition. Parameters always stay on one line."""
    if node is None:
        raise RenderError("rendering def statement: nil input")

    items: list[Item] = [
        INDENT,
        token_item(Token.DEF, "DEF"),
        SPACE,
        expr_item(node.name, "Name"),
        token_item(Token.LPAREN, "LPAREN"),
    ]
    for i, param in enumerate(node.params):
        if i > 0:
            items += [COMMA, SPACE]
        items.append(expr_item(param, f"param {i}"))
    items += [
        token_item(Token.RPAREN, "RPAREN"),
        COLON,
        NEWLINE,
        stmts_item(node.body, "Body", True),
    ]

    render(out, "rendering def statement", opts, *items)


def _strip_prefix(line: str, width: int) -> str:
    if width > 0 and line.startswith(" " * width):
        return line[width:]
    return line


def docstring(out: Writer, node: Literal, text: str, opts: RenderOptions) -> None:
    """
    Render a string literal as a triple-quoted docstring.

    Lines after the first are re-indented to the current depth. A literal
    that came from a parser keeps the source indentation of its continuation
    lines; when its column is known, that many leading spaces are stripped
    first. Empty lines stay empty, except the last one, which holds the
    indentation of the closing quotes.
    """
    strip = 0
    if node.token == Token.STRING and node.token_pos is not None and node.token_pos.col > 1:
        strip = node.token_pos.col - 1

    lines = text.replace(TRIPLE_QUOTE, ESCAPED_TRIPLE_QUOTE).split("\n")

    items: list[Item] = [
        INDENT,
        string_item(TRIPLE_QUOTE, "TRIPLE QUOTE"),
        string_item(lines[0], "docstring line 1"),
    ]
    last = len(lines) - 1
    for n, line in enumerate(lines[1:], start=1):
        line = _strip_prefix(line, strip)
        items.append(NEWLINE)
        if line or n == last:
            items += [INDENT, string_item(line, f"docstring line {n + 1}")]
    items += [string_item(TRIPLE_QUOTE, "TRIPLE QUOTE"), NEWLINE]

    render(out, "rendering docstring expression statement", opts, *items)


def expr_stmt(out: Writer, node: Optional[ExprStmt], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering expression statement: nil input")

    if isinstance(node.x, Literal) and isinstance(node.x.value, str):
        docstring(out, node.x, node.x.value, opts)
        return

    render(
        out,
        "rendering expression statement",
        opts,
        INDENT,
        expr_item(node.x, "X"),
        NEWLINE,
    )


def for_stmt(out: Writer, node: Optional[ForStmt], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering for statement: nil input")

    render(
        out,
        "rendering for statement",
        opts,
        INDENT,
        token_item(Token.FOR, "FOR"),
        SPACE,
        expr_item(node.vars, "Vars"),
        SPACE,
        token_item(Token.IN, "IN"),
        SPACE,
        expr_item(node.x, "X"),
        COLON,
        NEWLINE,
        stmts_item(node.body, "Body", True),
    )


def if_stmt(out: Writer, node: Optional[IfStmt], opts: RenderOptions) -> None:
    """Render an if statement. An elif chain is a nested if in the else block."""
    if node is None:
        raise RenderError("rendering if statement: nil input")

    items: list[Item] = [
        INDENT,
        token_item(Token.IF, "IF"),
        SPACE,
        expr_item(node.cond, "Cond"),
        COLON,
        NEWLINE,
        stmts_item(node.true, "True", True),
    ]
    if node.false:
        items += [
            INDENT,
            token_item(Token.ELSE, "ELSE"),
            COLON,
            NEWLINE,
            stmts_item(node.false, "False", True),
        ]

    render(out, "rendering if statement", opts, *items)


def load_stmt(out: Writer, node: Optional[LoadStmt], opts: RenderOptions) -> None:
    """
    Render ``load("module", "name", alias="name")``.

    An alias is written only when it differs from the loaded name.

    Raises:
        RenderError: If ``from_`` and ``to`` differ in length, before
            anything is written
    """
    if node is None:
        raise RenderError("rendering load statement: nil input")

    if len(node.from_) != len(node.to):
        raise RenderError(
            f"rendering load statement, lengths mismatch, From: {len(node.from_)}, To: {len(node.to)}"
        )

    items: list[Item] = [
        INDENT,
        token_item(Token.LOAD, "LOAD"),
        token_item(Token.LPAREN, "LPAREN"),
        expr_item(node.module, "Module"),
    ]
    for i, (src, alias) in enumerate(zip(node.from_, node.to)):
        items += [COMMA, SPACE]
        if alias is not None and (src is None or alias.name != src.name):
            items.append(expr_item(alias, f"To[{i}]"))
            if opts.space_eq_binary:
                items += [SPACE, token_item(Token.EQ, "EQ"), SPACE]
            else:
                items.append(token_item(Token.EQ, "EQ"))
        items += [QUOTE, expr_item(src, f"From[{i}]"), QUOTE]
    items += [token_item(Token.RPAREN, "RPAREN"), NEWLINE]

    render(out, "rendering load statement", opts, *items)


def return_stmt(out: Writer, node: Optional[ReturnStmt], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering return statement: nil input")

    items: list[Item] = [INDENT, token_item(Token.RETURN, "RETURN")]
    if node.result is not None:
        items += [SPACE, expr_item(node.result, "Result")]
    items.append(NEWLINE)

    render(out, "rendering return statement", opts, *items)


def while_stmt(out: Writer, node: Optional[WhileStmt], opts: RenderOptions) -> None:
    if node is None:
        raise RenderError("rendering while statement: nil input")

    render(
        out,
        "rendering while statement",
        opts,
        INDENT,
        token_item(Token.WHILE, "WHILE"),
        SPACE,
        expr_item(node.cond, "Cond"),
        COLON,
        NEWLINE,
        stmts_item(node.body, "Body", True),
    )


def render_stmt(out: Writer, node: Optional[Stmt], opts: RenderOptions) -> None:
    """
    Render any statement node.

    Raises:
        RenderError: If the node kind is not renderable or any part of it
            fails to render
    """
    if isinstance(node, AssignStmt):
        assign_stmt(out, node, opts)
    elif isinstance(node, BranchStmt):
        branch_stmt(out, node, opts)
    elif isinstance(node, DefStmt):
        def_stmt(out, node, opts)
    elif isinstance(node, ExprStmt):
        expr_stmt(out, node, opts)
    elif isinstance(node, ForStmt):
        for_stmt(out, node, opts)
    elif isinstance(node, IfStmt):
        if_stmt(out, node, opts)
    elif isinstance(node, LoadStmt):
        load_stmt(out, node, opts)
    elif isinstance(node, ReturnStmt):
        return_stmt(out, node, opts)
    elif isinstance(node, WhileStmt):
        while_stmt(out, node, opts)
    else:
        raise RenderError(f"unsupported type {type(node).__name__}")
