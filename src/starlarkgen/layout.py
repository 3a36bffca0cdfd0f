"""
Sequence layout policies.

A layout policy combines two independent axes:

- line breaks: never, only when there is more than one element, or always
- trailing comma: never, always, or only when there are two or more elements

``decide`` turns a policy and an element count into a ``LayoutDecision``;
``sequence_items`` turns that decision into render items for the elements
between a pair of brackets. The brackets themselves belong to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from starlarkgen.render import (
    COMMA,
    EXTRA_INDENT,
    INDENT,
    NEWLINE,
    SPACE,
    Item,
    expr_item,
    expr_item_indent,
)
from starlarkgen.syntax import Expr


class LineBreak(IntEnum):
    """When a sequence is split one element per line."""

    NEVER = 0
    MULTIPLE = 1
    ALWAYS = 2


class TrailingComma(IntEnum):
    """When a comma follows the last element of a sequence."""

    NEVER = 0
    ALWAYS = 1
    TWO_AND_MORE = 2


class Layout(IntEnum):
    """
    Rendering policy for a comma separated sequence.

    The value encodes ``line_break * 3 + trailing_comma``.
    """

    # Single line
    SINGLE_LINE = 0
    SINGLE_LINE_COMMA = 1
    SINGLE_LINE_COMMA_TWO_AND_MORE = 2

    # Single line for one element, one element per line otherwise
    MULTILINE_MULTIPLE = 3
    MULTILINE_MULTIPLE_COMMA = 4
    MULTILINE_MULTIPLE_COMMA_TWO_AND_MORE = 5

    # One element per line
    MULTILINE = 6
    MULTILINE_COMMA = 7
    MULTILINE_COMMA_TWO_AND_MORE = 8

    @property
    def line_break(self) -> LineBreak:
        return LineBreak(self // 3)

    @property
    def trailing_comma(self) -> TrailingComma:
        return TrailingComma(self % 3)

    @classmethod
    def compose(cls, line_break: LineBreak, trailing_comma: TrailingComma) -> Layout:
        """Build the policy for a combination of the two axes."""
        return cls(int(line_break) * 3 + int(trailing_comma))


@dataclass(frozen=True, slots=True)
class LayoutDecision:
    """Structural decisions for rendering one sequence."""

    break_lines: bool
    trailing_comma: bool


def decide(policy: Layout, element_count: int) -> LayoutDecision:
    """Decide how a sequence of ``element_count`` elements is laid out."""
    line_break = policy.line_break
    trailing_comma = policy.trailing_comma

    break_lines = (line_break == LineBreak.ALWAYS and element_count > 0) or (
        line_break == LineBreak.MULTIPLE and element_count > 1
    )
    comma = (trailing_comma == TrailingComma.ALWAYS and element_count > 0) or (
        trailing_comma == TrailingComma.TWO_AND_MORE and element_count > 1
    )
    return LayoutDecision(break_lines=break_lines, trailing_comma=comma)


def sequence_items(elements: Sequence[Expr], policy: Layout) -> list[Item]:
    """
    Build the render items for the elements of a bracketed sequence.

    Broken sequences put every element on its own line one level deeper and
    leave the closing bracket on a fresh line at the current depth.
    """
    decision = decide(policy, len(elements))
    items: list[Item] = []

    if decision.break_lines:
        items += [NEWLINE, EXTRA_INDENT]
        separator = [COMMA, NEWLINE, EXTRA_INDENT]
    else:
        separator = [COMMA, SPACE]

    for i, element in enumerate(elements):
        if i > 0:
            items += separator
        if decision.break_lines:
            items.append(expr_item_indent(element, f"element {i}"))
        else:
            items.append(expr_item(element, f"element {i}"))

    if decision.trailing_comma:
        items.append(COMMA)
    if decision.break_lines:
        items += [NEWLINE, INDENT]

    return items
