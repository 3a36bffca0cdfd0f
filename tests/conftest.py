"""
Pytest configuration and shared fixtures for starlarkgen tests.
"""

import ast

import pytest

from starlarkgen.syntax import (
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
    ListExpr,
    Literal,
    LoadStmt,
    ParenExpr,
    Position,
    ReturnStmt,
    SliceExpr,
    Stmt,
    Token,
    TupleExpr,
    UnaryExpr,
    WhileStmt,
)


class FailingWriter:
    """A sink that raises on the Nth write of a given string."""

    def __init__(self, token: str, fail_on: int) -> None:
        self.token = token
        self.fail_on = fail_on
        self.seen = 0
        self.parts: list[str] = []

    @property
    def error(self) -> str:
        return f"AS EXPECTED: {self.token!r} occurrence {self.fail_on}"

    def write(self, text: str) -> int:
        if text == self.token:
            self.seen += 1
            if self.seen == self.fail_on:
                raise OSError(self.error)
        self.parts.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.parts)


@pytest.fixture
def failing_writer():
    """Factory fixture for sinks failing on a given write."""

    def _create(token: str, fail_on: int = 1) -> FailingWriter:
        return FailingWriter(token, fail_on)

    return _create


# =============================================================================
# Parsing Starlark source into starlarkgen syntax trees
# =============================================================================

BIN_OPS = {
    ast.Add: Token.PLUS,
    ast.Sub: Token.MINUS,
    ast.Mult: Token.STAR,
    ast.Div: Token.SLASH,
    ast.FloorDiv: Token.SLASHSLASH,
    ast.Mod: Token.PERCENT,
    ast.BitAnd: Token.AMP,
    ast.BitOr: Token.PIPE,
    ast.BitXor: Token.CIRCUMFLEX,
    ast.LShift: Token.LTLT,
    ast.RShift: Token.GTGT,
}

CMP_OPS = {
    ast.Eq: Token.EQL,
    ast.NotEq: Token.NEQ,
    ast.Lt: Token.LT,
    ast.LtE: Token.LE,
    ast.Gt: Token.GT,
    ast.GtE: Token.GE,
    ast.In: Token.IN,
    ast.NotIn: Token.NOT_IN,
}

UNARY_OPS = {
    ast.USub: Token.MINUS,
    ast.UAdd: Token.PLUS,
    ast.Invert: Token.TILDE,
    ast.Not: Token.NOT,
}

AUG_OPS = {
    ast.Add: Token.PLUS_EQ,
    ast.Sub: Token.MINUS_EQ,
    ast.Mult: Token.STAR_EQ,
    ast.Mod: Token.PERCENT_EQ,
}


class StarlarkTreeBuilder:
    """
    Convert a Python ``ast`` tree of Starlark source into starlarkgen nodes.

    Starlark's syntax is a subset of Python's, so the stdlib parser covers
    it. Parentheses are only preserved around tuples.
    """

    def __init__(self, source: str) -> None:
        self.lines = source.splitlines()

    def build(self, module: ast.Module) -> list[Stmt]:
        return [self.stmt(node) for node in module.body]

    def stmts(self, nodes: list[ast.stmt]) -> list[Stmt]:
        return [self.stmt(node) for node in nodes]

    def stmt(self, node: ast.stmt) -> Stmt:
        if isinstance(node, ast.Assign):
            return AssignStmt(self.expr(node.targets[0]), Token.EQ, self.expr(node.value))
        if isinstance(node, ast.AugAssign):
            return AssignStmt(self.expr(node.target), AUG_OPS[type(node.op)], self.expr(node.value))
        if isinstance(node, ast.Pass):
            return BranchStmt(Token.PASS)
        if isinstance(node, ast.Break):
            return BranchStmt(Token.BREAK)
        if isinstance(node, ast.Continue):
            return BranchStmt(Token.CONTINUE)
        if isinstance(node, ast.Return):
            return ReturnStmt(self.expr(node.value) if node.value is not None else None)
        if isinstance(node, ast.For):
            return ForStmt(self.expr(node.target), self.expr(node.iter), self.stmts(node.body))
        if isinstance(node, ast.While):
            return WhileStmt(self.expr(node.test), self.stmts(node.body))
        if isinstance(node, ast.If):
            return IfStmt(self.expr(node.test), self.stmts(node.body), self.stmts(node.orelse))
        if isinstance(node, ast.FunctionDef):
            return DefStmt(Ident(node.name), self.params(node.args), self.stmts(node.body))
        if isinstance(node, ast.Expr):
            value = node.value
            if isinstance(value, ast.Call) and isinstance(value.func, ast.Name) and value.func.id == "load":
                return self.load(value)
            if isinstance(value, ast.Constant) and isinstance(value.value, str):
                return ExprStmt(
                    Literal(
                        value=value.value,
                        token=Token.STRING,
                        token_pos=Position(value.lineno, value.col_offset + 1),
                    )
                )
            return ExprStmt(self.expr(value))
        raise ValueError(f"unsupported statement {type(node).__name__}")

    def load(self, node: ast.Call) -> LoadStmt:
        from_: list[Ident] = []
        to: list[Ident] = []
        for arg in node.args[1:]:
            from_.append(Ident(arg.value))
            to.append(Ident(arg.value))
        for keyword in node.keywords:
            from_.append(Ident(keyword.value.value))
            to.append(Ident(keyword.arg))
        return LoadStmt(self.expr(node.args[0]), from_, to)

    def params(self, args: ast.arguments) -> list[Expr]:
        params: list[Expr] = []
        first_default = len(args.args) - len(args.defaults)
        for i, arg in enumerate(args.args):
            if i >= first_default:
                default = self.expr(args.defaults[i - first_default])
                params.append(BinaryExpr(Ident(arg.arg), Token.EQ, default))
            else:
                params.append(Ident(arg.arg))
        if args.vararg is not None:
            params.append(UnaryExpr(Token.STAR, Ident(args.vararg.arg)))
        elif args.kwonlyargs:
            params.append(UnaryExpr(Token.STAR))
        for arg, default in zip(args.kwonlyargs, args.kw_defaults):
            if default is None:
                params.append(Ident(arg.arg))
            else:
                params.append(BinaryExpr(Ident(arg.arg), Token.EQ, self.expr(default)))
        if args.kwarg is not None:
            params.append(UnaryExpr(Token.STARSTAR, Ident(args.kwarg.arg)))
        return params

    def is_parenthesized(self, node: ast.expr) -> bool:
        return self.lines[node.lineno - 1][node.col_offset] == "("

    def clauses(self, generators: list[ast.comprehension]) -> list:
        clauses: list = []
        for gen in generators:
            clauses.append(ForClause(self.expr(gen.target), self.expr(gen.iter)))
            clauses += [IfClause(self.expr(cond)) for cond in gen.ifs]
        return clauses

    def expr(self, node: ast.expr) -> Expr:
        if isinstance(node, ast.Name):
            return Ident(node.id)
        if isinstance(node, ast.Constant):
            if isinstance(node.value, bool) or node.value is None:
                return Ident(repr(node.value))
            if isinstance(node.value, str):
                return Literal(value=node.value, token=Token.STRING)
            if isinstance(node.value, int):
                return Literal(value=node.value, raw=str(node.value), token=Token.INT)
            return Literal(raw=repr(node.value), token=Token.FLOAT)
        if isinstance(node, ast.BinOp):
            return BinaryExpr(self.expr(node.left), BIN_OPS[type(node.op)], self.expr(node.right))
        if isinstance(node, ast.Compare):
            return BinaryExpr(
                self.expr(node.left), CMP_OPS[type(node.ops[0])], self.expr(node.comparators[0])
            )
        if isinstance(node, ast.BoolOp):
            op = Token.AND if isinstance(node.op, ast.And) else Token.OR
            result = self.expr(node.values[0])
            for value in node.values[1:]:
                result = BinaryExpr(result, op, self.expr(value))
            return result
        if isinstance(node, ast.UnaryOp):
            return UnaryExpr(UNARY_OPS[type(node.op)], self.expr(node.operand))
        if isinstance(node, ast.Starred):
            return UnaryExpr(Token.STAR, self.expr(node.value))
        if isinstance(node, ast.Call):
            args = [self.expr(arg) for arg in node.args]
            for keyword in node.keywords:
                if keyword.arg is None:
                    args.append(UnaryExpr(Token.STARSTAR, self.expr(keyword.value)))
                else:
                    args.append(BinaryExpr(Ident(keyword.arg), Token.EQ, self.expr(keyword.value)))
            return CallExpr(self.expr(node.func), args)
        if isinstance(node, ast.Attribute):
            return DotExpr(self.expr(node.value), Ident(node.attr))
        if isinstance(node, ast.Subscript):
            if isinstance(node.slice, ast.Slice):
                sl = node.slice
                return SliceExpr(
                    self.expr(node.value),
                    lo=self.expr(sl.lower) if sl.lower is not None else None,
                    hi=self.expr(sl.upper) if sl.upper is not None else None,
                    step=self.expr(sl.step) if sl.step is not None else None,
                )
            return IndexExpr(self.expr(node.value), self.expr(node.slice))
        if isinstance(node, ast.List):
            return ListExpr([self.expr(el) for el in node.elts])
        if isinstance(node, ast.Tuple):
            tup = TupleExpr([self.expr(el) for el in node.elts])
            if node.elts and self.is_parenthesized(node):
                return ParenExpr(tup)
            return tup
        if isinstance(node, ast.Dict):
            return DictExpr(
                [DictEntry(self.expr(k), self.expr(v)) for k, v in zip(node.keys, node.values)]
            )
        if isinstance(node, ast.ListComp):
            return Comprehension(self.expr(node.elt), self.clauses(node.generators))
        if isinstance(node, ast.DictComp):
            return Comprehension(
                DictEntry(self.expr(node.key), self.expr(node.value)),
                self.clauses(node.generators),
                curly=True,
            )
        if isinstance(node, ast.IfExp):
            return CondExpr(self.expr(node.test), self.expr(node.body), self.expr(node.orelse))
        raise ValueError(f"unsupported expression {type(node).__name__}")


@pytest.fixture
def parse():
    """Fixture to parse Starlark source into a list of statements."""

    def _parse(source: str) -> list[Stmt]:
        return StarlarkTreeBuilder(source).build(ast.parse(source))

    return _parse
