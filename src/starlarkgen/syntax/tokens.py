"""
Token definitions for Starlark syntax trees.

The values of ``Token`` are the textual forms the tokens take in source
code. Tokens that have no fixed spelling (identifiers, literals, layout
tokens) carry a descriptive name instead and cannot be emitted verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Token(Enum):
    """Enumeration of all Starlark token kinds."""

    # Special and layout tokens
    ILLEGAL = "illegal token"
    EOF = "end of file"
    NEWLINE = "newline"
    INDENT = "indent"
    OUTDENT = "outdent"

    # Tokens with values
    IDENT = "identifier"
    INT = "int literal"
    FLOAT = "float literal"
    STRING = "string literal"
    BYTES = "bytes literal"

    # Punctuation
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    SLASHSLASH = "//"
    PERCENT = "%"
    AMP = "&"
    PIPE = "|"
    CIRCUMFLEX = "^"
    LTLT = "<<"
    GTGT = ">>"
    TILDE = "~"
    DOT = "."
    COMMA = ","
    EQ = "="
    SEMI = ";"
    COLON = ":"
    LPAREN = "("
    RPAREN = ")"
    LBRACK = "["
    RBRACK = "]"
    LBRACE = "{"
    RBRACE = "}"
    LT = "<"
    GT = ">"
    GE = ">="
    LE = "<="
    EQL = "=="
    NEQ = "!="
    PLUS_EQ = "+="
    MINUS_EQ = "-="
    STAR_EQ = "*="
    SLASH_EQ = "/="
    SLASHSLASH_EQ = "//="
    PERCENT_EQ = "%="
    AMP_EQ = "&="
    PIPE_EQ = "|="
    CIRCUMFLEX_EQ = "^="
    LTLT_EQ = "<<="
    GTGT_EQ = ">>="
    STARSTAR = "**"

    # Keywords
    AND = "and"
    BREAK = "break"
    CONTINUE = "continue"
    DEF = "def"
    ELIF = "elif"
    ELSE = "else"
    FOR = "for"
    IF = "if"
    IN = "in"
    LAMBDA = "lambda"
    LOAD = "load"
    NOT = "not"
    NOT_IN = "not in"
    OR = "or"
    PASS = "pass"
    RETURN = "return"
    WHILE = "while"

    def __str__(self) -> str:
        return self.value

    @property
    def is_keyword(self) -> bool:
        """Check if the token is spelled as a keyword."""
        return self in KEYWORDS


KEYWORDS: frozenset[Token] = frozenset(
    {
        Token.AND,
        Token.BREAK,
        Token.CONTINUE,
        Token.DEF,
        Token.ELIF,
        Token.ELSE,
        Token.FOR,
        Token.IF,
        Token.IN,
        Token.LAMBDA,
        Token.LOAD,
        Token.NOT,
        Token.NOT_IN,
        Token.OR,
        Token.PASS,
        Token.RETURN,
        Token.WHILE,
    }
)

# Tokens that only exist on the input side and have no literal spelling.
NON_LITERAL_TOKENS: frozenset[Token] = frozenset(
    {
        Token.ILLEGAL,
        Token.EOF,
        Token.INDENT,
        Token.OUTDENT,
        Token.IDENT,
        Token.INT,
        Token.FLOAT,
        Token.STRING,
        Token.BYTES,
    }
)


@dataclass(frozen=True, slots=True)
class Position:
    """
    A position of a token in the source text.

    Attributes:
        line: 1-indexed line number
        col: 1-indexed column number
        filename: Optional filename for error reporting
    """

    line: int
    col: int
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.col}"
        return f"{self.line}:{self.col}"
