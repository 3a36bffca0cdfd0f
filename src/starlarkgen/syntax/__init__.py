"""
Starlark syntax tree package.

Node and token definitions consumed by the renderer:
- Token: every token kind with its textual form
- Position: source position carried by tokens
- Node, Expr, Stmt: node base classes and the concrete node kinds
"""

from starlarkgen.syntax.nodes import (
    AssignStmt,
    BinaryExpr,
    BranchStmt,
    CallExpr,
    Comprehension,
    CondExpr,
    DefStmt,
    DictEntry,
    DictExpr,
    DotExpr,
    Expr,
    ExprStmt,
    ForClause,
    ForStmt,
    Ident,
    IfClause,
    IfStmt,
    IndexExpr,
    LambdaExpr,
    ListExpr,
    Literal,
    LoadStmt,
    Node,
    ParenExpr,
    ReturnStmt,
    SliceExpr,
    Stmt,
    TupleExpr,
    UnaryExpr,
    WhileStmt,
)
from starlarkgen.syntax.tokens import KEYWORDS, NON_LITERAL_TOKENS, Position, Token

__all__ = [
    # Tokens
    "Token",
    "Position",
    "KEYWORDS",
    "NON_LITERAL_TOKENS",
    # Base classes
    "Node",
    "Expr",
    "Stmt",
    # Expressions
    "BinaryExpr",
    "CallExpr",
    "Comprehension",
    "ForClause",
    "IfClause",
    "CondExpr",
    "DictEntry",
    "DictExpr",
    "DotExpr",
    "Ident",
    "IndexExpr",
    "LambdaExpr",
    "ListExpr",
    "Literal",
    "ParenExpr",
    "SliceExpr",
    "TupleExpr",
    "UnaryExpr",
    # Statements
    "AssignStmt",
    "BranchStmt",
    "DefStmt",
    "ExprStmt",
    "ForStmt",
    "IfStmt",
    "LoadStmt",
    "ReturnStmt",
    "WhileStmt",
]
