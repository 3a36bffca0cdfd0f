"""
Abstract Syntax Tree (AST) node definitions for Starlark.

This module defines the closed set of node kinds the renderer understands.
Nodes are immutable; sequence fields accept any sequence and are only ever
iterated. Trees are usually built by a parser or by a code generator, then
rewritten with ``dataclasses.replace`` and rendered back to source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from starlarkgen.syntax.tokens import Position, Token


class Node:
    """Base class for all AST nodes."""

    __slots__ = ()


class Expr(Node):
    """Base class for expressions."""

    __slots__ = ()


class Stmt(Node):
    """Base class for statements."""

    __slots__ = ()


# -----------------------------------------------------------------------------
# Expressions
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Ident(Expr):
    """
    An identifier.

    Examples:
        foo, _private, native
    """

    name: str
    name_pos: Optional[Position] = None


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """
    A literal value.

    ``value`` holds the typed payload (``str``, ``int`` or a numpy integer
    scalar). When it is ``None`` the ``raw`` text is rendered verbatim,
    which covers literals reconstructed without a typed value.

    Examples:
        "hello", 42, 0x10
    """

    value: Any = None
    raw: str = ""
    token: Token = Token.STRING
    token_pos: Optional[Position] = None


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """
    A binary operation. An ``EQ`` operator marks a keyword argument or a default
    parameter value.

    Examples:
        a + b, x not in y, key=value
    """

    x: Optional[Expr]
    op: Token
    y: Optional[Expr]


@dataclass(frozen=True, slots=True)
class UnaryExpr(Expr):
    """
    A unary operation.

    A ``STAR`` operator without an operand is the bare ``*`` separating
    keyword-only parameters in ``def f(a, *, b)``.

    Examples:
        -x, not done, *args, **kwargs
    """

    op: Token
    x: Optional[Expr] = None


@dataclass(frozen=True, slots=True)
class CallExpr(Expr):
    """
    A function call. Keyword arguments are ``BinaryExpr`` nodes with ``EQ``.

    Examples:
        f(), cc_library(name="foo", srcs=srcs)
    """

    fn: Optional[Expr]
    args: Sequence[Expr] = ()


@dataclass(frozen=True, slots=True)
class ForClause(Node):
    """The ``for vars in x`` part of a comprehension."""

    vars: Optional[Expr]
    x: Optional[Expr]


@dataclass(frozen=True, slots=True)
class IfClause(Node):
    """The ``if cond`` part of a comprehension."""

    cond: Optional[Expr]


@dataclass(frozen=True, slots=True)
class Comprehension(Expr):
    """
    A list or dict comprehension.

    For dict comprehensions ``curly`` is set and the body is a
    ``DictEntry``.

    Examples:
        [x * 2 for x in xs if x], {k: v for k, v in items}
    """

    body: Optional[Expr]
    clauses: Sequence[Node] = ()
    curly: bool = False


@dataclass(frozen=True, slots=True)
class CondExpr(Expr):
    """
    A conditional expression.

    Example:
        a if cond else b
    """

    cond: Optional[Expr]
    true: Optional[Expr]
    false: Optional[Expr]


@dataclass(frozen=True, slots=True)
class DictEntry(Expr):
    """A ``key: value`` pair inside a dict literal or comprehension."""

    key: Optional[Expr]
    value: Optional[Expr]


@dataclass(frozen=True, slots=True)
class DictExpr(Expr):
    """
    A dict literal. Every element must be a ``DictEntry``.

    Example:
        {"a": 1, "b": 2}
    """

    elements: Sequence[Expr] = ()


@dataclass(frozen=True, slots=True)
class DotExpr(Expr):
    """
    An attribute access.

    Example:
        ctx.attr
    """

    x: Optional[Expr]
    name: Optional[Ident]


@dataclass(frozen=True, slots=True)
class IndexExpr(Expr):
    """
    A subscript.

    Example:
        deps[0]
    """

    x: Optional[Expr]
    y: Optional[Expr]


@dataclass(frozen=True, slots=True)
class SliceExpr(Expr):
    """
    A slice. Each bound is optional.

    Examples:
        s[1:], s[:n], s[::-1]
    """

    x: Optional[Expr]
    lo: Optional[Expr] = None
    hi: Optional[Expr] = None
    step: Optional[Expr] = None


@dataclass(frozen=True, slots=True)
class ListExpr(Expr):
    """
    A list literal.

    Example:
        [1, 2, 3]
    """

    elements: Sequence[Expr] = ()


@dataclass(frozen=True, slots=True)
class TupleExpr(Expr):
    """
    A tuple. Parentheses are a separate ``ParenExpr`` node.

    Examples:
        a, b    (a, b)
    """

    elements: Sequence[Expr] = ()


@dataclass(frozen=True, slots=True)
class ParenExpr(Expr):
    """A parenthesized expression."""

    x: Optional[Expr]


@dataclass(frozen=True, slots=True)
class LambdaExpr(Expr):
    """
    A lambda expression.

    Part of the grammar, but it has no rendering rule.

    Example:
        lambda x: x + 1
    """

    params: Sequence[Expr] = ()
    body: Optional[Expr] = None


# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AssignStmt(Stmt):
    """
    An assignment or augmented assignment.

    Examples:
        x = 1, total += n
    """

    lhs: Optional[Expr]
    op: Token
    rhs: Optional[Expr]


@dataclass(frozen=True, slots=True)
class BranchStmt(Stmt):
    """A ``break``, ``continue`` or ``pass`` statement."""

    token: Token


@dataclass(frozen=True, slots=True)
class DefStmt(Stmt):
    """
    A function definition.

    Example:
        def f(a, b=1, *args, **kwargs):
            pass
    """

    name: Optional[Ident]
    params: Sequence[Expr] = ()
    body: Sequence[Stmt] = ()


@dataclass(frozen=True, slots=True)
class ExprStmt(Stmt):
    """An expression evaluated for its effect, or a docstring."""

    x: Optional[Expr]


@dataclass(frozen=True, slots=True)
class ForStmt(Stmt):
    """
    A for loop.

    Example:
        for x in xs:
            pass
    """

    vars: Optional[Expr]
    x: Optional[Expr]
    body: Sequence[Stmt] = ()


@dataclass(frozen=True, slots=True)
class WhileStmt(Stmt):
    """A while loop."""

    cond: Optional[Expr]
    body: Sequence[Stmt] = ()


@dataclass(frozen=True, slots=True)
class IfStmt(Stmt):
    """
    An if statement.

    An ``elif`` is represented as an ``IfStmt`` that is the only statement
    of the enclosing ``false`` branch.
    """

    cond: Optional[Expr]
    true: Sequence[Stmt] = ()
    false: Sequence[Stmt] = ()


@dataclass(frozen=True, slots=True)
class LoadStmt(Stmt):
    """
    A load statement.

    ``from_[i]`` is the symbol name in the loaded module, ``to[i]`` the
    local binding; ``None`` in ``to`` binds under the same name.

    Example:
        load("//lib:defs.bzl", "rule", alias="other")
    """

    module: Optional[Literal]
    from_: Sequence[Ident] = ()
    to: Sequence[Optional[Ident]] = ()


@dataclass(frozen=True, slots=True)
class ReturnStmt(Stmt):
    """A return statement with an optional result."""

    result: Optional[Expr] = None
