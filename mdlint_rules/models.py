"""Data models for mdlint-rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Token:
    """Immutable view of a parser token.

    Attributes:
        type: Token type, e.g. ``heading_open`` or ``bullet_list_close``.
        tag: HTML tag name emitted for the token.
        line: Raw source text of the token's first line ("" when unmapped).
        line_number: One-based line number of ``line``, or None when unmapped.
        map: Half-open ``(start, end)`` range of source lines, or None.
        content: Token content (inline text, code, ...).
        markup: Markup characters, e.g. ``##`` or ``-``.
        info: Fence info string.
        children: Inline child tokens.
    """

    type: str
    tag: str = ""
    line: str = ""
    line_number: int | None = None
    map: tuple[int, int] | None = None
    content: str = ""
    markup: str = ""
    info: str = ""
    children: tuple[Token, ...] = ()


class FenceBoundary(Enum):
    """Position of a line relative to a fenced code block delimiter."""

    NONE = 0
    OPEN = 1
    CLOSE = -1


@dataclass(frozen=True)
class LineMetadata:
    """Classification of a single source line.

    Attributes:
        in_code: Whether the line is part of a code block, fence lines included.
        fence: Whether the line opens or closes a fenced code block.
        in_table: Whether the line is part of a table.
    """

    in_code: bool = False
    fence: FenceBoundary = FenceBoundary.NONE
    in_table: bool = False

    @property
    def bitmask(self) -> int:
        """Legacy encoding: 1 code, 2 fence boundary, 4 opening fence, 8 table."""
        value = 1 if self.in_code else 0
        if self.fence is not FenceBoundary.NONE:
            value |= 2
        if self.fence is FenceBoundary.OPEN:
            value |= 4
        if self.in_table:
            value |= 8
        return value


@dataclass
class ListDescriptor:
    """One bullet or ordered list instance in a flattened document.

    Attributes:
        is_unordered: True for bullet lists.
        all_ancestors_unordered: True when this list and every enclosing list
            are bullet lists.
        open_token: The ``*_list_open`` token.
        indent: Column of the list marker after block-quote markers.
        parent_indent: Indent of the enclosing list, 0 at the top level.
        items: ``list_item_open`` tokens, in order.
        nesting_depth: 0 for top-level lists.
        last_line_index: Exclusive line index where the list content ends.
        insertion_index: Position of the list among all lists in document order.
    """

    is_unordered: bool
    all_ancestors_unordered: bool
    open_token: Token
    indent: int
    parent_indent: int
    nesting_depth: int
    insertion_index: int
    items: list[Token] = field(default_factory=list)
    last_line_index: int = -1


@dataclass(frozen=True)
class LintError:
    """A single violation reported by a rule.

    Attributes:
        line_number: One-based line number of the violation.
        detail: Optional explanation, e.g. ``Expected: 1; Actual: 2``.
        context: Optional snippet of the offending text.
        range: Optional one-based ``(column, length)`` pair.
    """

    line_number: int
    detail: str | None = None
    context: str | None = None
    range: tuple[int, int] | None = None


OnError = Callable[[LintError], None]


@dataclass(frozen=True)
class Rule:
    """A custom lint rule as registered with the host.

    Attributes:
        names: Rule identifier followed by its aliases.
        description: Human readable description.
        tags: Tags used to group rules.
        function: Entry point called with ``(params, on_error)``.
    """

    names: tuple[str, ...]
    description: str
    tags: tuple[str, ...]
    function: Callable[[Any, OnError], None]

    @property
    def name(self) -> str:
        return self.names[0]
