"""
Render options.

``RenderOptions`` is an immutable value threaded through every render call.
Entering a nested block copies it with a deeper ``depth``, so siblings never
observe each other's indentation. Options are built by folding ``with_*``
builders over the defaults:

    opts = build_options(with_depth(1), with_call_option(Layout.MULTILINE_COMMA))
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Callable, Union

from starlarkgen.layout import Layout
from starlarkgen.utils.errors import OptionError

DEFAULT_INDENT = "    "
DEFAULT_DEPTH = 0
DEFAULT_SPACE_EQ_BINARY = False

LayoutValue = Union[Layout, int, str]


def _coerce_layout(name: str, value: LayoutValue) -> Layout:
    """Convert a layout given as a member, its value or its name."""
    if isinstance(value, bool):
        raise OptionError(f"invalid {name} value {value!r}")
    if isinstance(value, str):
        try:
            return Layout[value.upper()]
        except KeyError:
            raise OptionError(f"invalid {name} value {value!r}") from None
    try:
        return Layout(value)
    except ValueError:
        raise OptionError(f"invalid {name} value {value!r}") from None


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """
    Configuration for rendering.

    Attributes:
        depth: Current indentation depth, never negative
        indent: Indentation unit repeated ``depth`` times
        space_eq_binary: Put spaces around ``=`` in keyword arguments,
            default parameter values and load aliases
        call_option: Layout of call arguments
        dict_option: Layout of dict literal entries
        list_option: Layout of list literal elements
        tuple_option: Layout of tuple elements
    """

    depth: int = DEFAULT_DEPTH
    indent: str = DEFAULT_INDENT
    space_eq_binary: bool = DEFAULT_SPACE_EQ_BINARY
    call_option: Layout = Layout.SINGLE_LINE
    dict_option: Layout = Layout.SINGLE_LINE
    list_option: Layout = Layout.SINGLE_LINE
    tuple_option: Layout = Layout.SINGLE_LINE

    def __post_init__(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise OptionError(f"invalid depth value {self.depth!r}, value must be an integer")
        if self.depth < 0:
            raise OptionError(f"invalid depth value {self.depth}, value must be >= 0")
        if not isinstance(self.indent, str):
            raise OptionError(f"invalid indent value {self.indent!r}, value must be a string")
        if not isinstance(self.space_eq_binary, bool):
            raise OptionError(
                f"invalid space_eq_binary value {self.space_eq_binary!r}, value must be a boolean"
            )
        for f in fields(self):
            if f.name.endswith("_option"):
                object.__setattr__(self, f.name, _coerce_layout(f.name, getattr(self, f.name)))

    def add_depth(self, n: int) -> RenderOptions:
        """Return a copy with the depth increased by ``n``."""
        return replace(self, depth=self.depth + n)

    def indentation(self, extra: int = 0) -> str:
        """Get the indentation string for the current depth plus ``extra``."""
        return self.indent * (self.depth + extra)


DEFAULT_OPTIONS = RenderOptions()

Option = Callable[[RenderOptions], RenderOptions]


def with_space_eq_binary(value: bool) -> Option:
    """
    Set whether ``=`` in binary pairs is surrounded by spaces.

    With ``True`` calls render as ``foo(bar = 1)``, with ``False`` (the
    default) as ``foo(bar=1)``. The setting also applies to aliases in
    ``load`` statements. Assignment statements are always spaced.
    """

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, space_eq_binary=value)

    return apply


def with_depth(depth: int) -> Option:
    """Set the initial indentation depth."""

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, depth=depth)

    return apply


def with_indent(indent: str) -> Option:
    """Replace the default four-space indentation unit."""

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, indent=indent)

    return apply


def with_call_option(value: LayoutValue) -> Option:
    """Set the layout of function call arguments."""

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, call_option=_coerce_layout("call_option", value))

    return apply


def with_dict_option(value: LayoutValue) -> Option:
    """Set the layout of dict literals."""

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, dict_option=_coerce_layout("dict_option", value))

    return apply


def with_list_option(value: LayoutValue) -> Option:
    """Set the layout of list literals."""

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, list_option=_coerce_layout("list_option", value))

    return apply


def with_tuple_option(value: LayoutValue) -> Option:
    """Set the layout of tuples."""

    def apply(opts: RenderOptions) -> RenderOptions:
        return replace(opts, tuple_option=_coerce_layout("tuple_option", value))

    return apply


def build_options(*options: Option) -> RenderOptions:
    """
    Fold option builders over the defaults.

    Raises:
        OptionError: If any option value is invalid
    """
    opts = DEFAULT_OPTIONS
    for option in options:
        opts = option(opts)
    return opts
