"""
Token and literal emission.

Pure functions turning lexical units into source text: quoted strings,
numeric literals and the payload classification used by literal rendering.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

SUPPORTED_LITERAL_TYPES = "str, int or a numpy integer"

_SIMPLE_ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _escape_char(ch: str) -> str:
    """Escape a single character for a double-quoted string literal."""
    if ch == '"' or ch == "\\":
        return "\\" + ch
    if ch.isprintable():
        return ch
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]

    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0xD800 <= code <= 0xDFFF:
        # Lone surrogates are not valid code points.
        code = 0xFFFD
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(value: str) -> str:
    """
    Quote a string as a double-quoted Starlark literal.

    Printable characters are kept as they are; quotes, backslashes and
    control characters are escaped.

    Example:
        quote('say "hi"\\n') == '"say \\\\"hi\\\\"\\\\n"'
    """
    return '"' + "".join(_escape_char(ch) for ch in value) + '"'


def render_number(value: Any) -> str:
    """Render an integer payload in decimal notation."""
    return str(int(value))


def literal_kind(value: Any) -> Optional[str]:
    """
    Classify a literal payload.

    Returns:
        "string", "int", "uint", "int64", "uint64" or "big int", or None
        when the payload type is not supported.
    """
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return None
    if isinstance(value, np.unsignedinteger):
        return "uint64" if value.dtype.itemsize == 8 else "uint"
    if isinstance(value, np.signedinteger):
        return "int64" if value.dtype.itemsize == 8 else "int"
    if isinstance(value, int):
        if INT64_MIN <= value <= INT64_MAX:
            return "int"
        return "big int"
    return None


def render_literal_value(value: Any) -> tuple[str, str]:
    """
    Render a typed literal payload.

    Returns:
        A ``(kind, text)`` pair.

    Raises:
        ValueError: If the payload type is not supported
    """
    kind = literal_kind(value)
    if kind is None:
        raise ValueError(
            f"unsupported literal value type {type(value).__name__}, "
            f"expected {SUPPORTED_LITERAL_TYPES}"
        )
    if kind == "string":
        return kind, quote(value)
    return kind, render_number(value)
