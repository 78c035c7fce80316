"""Helpers shared by rule implementations."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .constants import MAX_CONTEXT_LENGTH
from .document import Document
from .logging import get_logger
from .models import LintError, OnError, Token

logger = get_logger("rules")

_ATX_CLOSED_PATTERN = re.compile(r"[^\\]#\s*$")


def filter_tokens(params: Document, token_type: str) -> Iterator[Token]:
    """Yield the block-level tokens of a given type."""
    for token in params.tokens:
        if token.type == token_type:
            yield token


def for_each_inline_child(params: Document, token_type: str) -> Iterator[tuple[Token, Token]]:
    """Yield ``(child, inline_token)`` pairs for inline children of a given type."""
    for token in filter_tokens(params, "inline"):
        for child in token.children:
            if child.type == token_type:
                yield child, token


def for_each_heading(params: Document) -> Iterator[tuple[Token, str]]:
    """Yield ``(heading_open, content)`` for every heading.

    ``content`` is the raw inline text between the opening and closing
    heading tokens, without ``#`` markers or setext underlines.

    Examples:
        for heading, content in for_each_heading(document):
            print(heading.line_number, content)
    """
    heading: Token | None = None
    for token in params.tokens:
        if token.type == "heading_open":
            heading = token
        elif token.type == "heading_close":
            heading = None
        elif token.type == "inline" and heading is not None:
            yield heading, token.content


def heading_style_for(token: Token) -> str:
    """Return ``"atx"``, ``"atx_closed"`` or ``"setext"`` for a heading token."""
    if token.map is not None and token.map[1] - token.map[0] == 1:
        if _ATX_CLOSED_PATTERN.search(token.line):
            return "atx_closed"
        return "atx"
    return "setext"


def add_error(
    on_error: OnError,
    line_number: int,
    detail: str | None = None,
    context: str | None = None,
    range: tuple[int, int] | None = None,
) -> None:
    on_error(LintError(line_number=line_number, detail=detail, context=context, range=range))


def add_error_detail_if(
    on_error: OnError,
    line_number: int,
    expected: object,
    actual: object,
    detail: str | None = None,
    range: tuple[int, int] | None = None,
) -> None:
    """Report ``Expected: x; Actual: y`` when `expected` differs from `actual`.

    Args:
        on_error: Callback receiving the error.
        line_number: One-based line number.
        expected: Expected value.
        actual: Observed value.
        detail: Optional extra detail appended after the comparison.
        range: Optional ``(column, length)``.

    Returns:
        None.

    Examples:
        add_error_detail_if(on_error, 3, 1, 2)  # detail "Expected: 1; Actual: 2"
    """
    if expected != actual:
        message = f"Expected: {expected}; Actual: {actual}"
        if detail:
            message += f"; {detail}"
        add_error(on_error, line_number, message, None, range)


def truncate_context(context: str, left: bool = False, right: bool = False) -> str:
    """Shorten a context snippet, keeping the start, the end, or both.

    Args:
        context: Snippet to shorten.
        left: Keep the beginning of the snippet.
        right: Keep the end of the snippet.

    Returns:
        str: The snippet itself when it is short enough, otherwise an
            ellipsized version of at most ``MAX_CONTEXT_LENGTH`` characters
            plus the ellipsis.

    Examples:
        truncate_context("x" * 40, left=True, right=True)  # 15 x, "...", 15 x
        truncate_context("x" * 40, right=True)  # "..." then the last 30 x
    """
    if len(context) <= MAX_CONTEXT_LENGTH:
        return context
    half = MAX_CONTEXT_LENGTH // 2
    if left and right:
        return f"{context[:half]}...{context[-half:]}"
    if right:
        return f"...{context[-MAX_CONTEXT_LENGTH:]}"
    return f"{context[:MAX_CONTEXT_LENGTH]}..."


def add_error_context(
    on_error: OnError,
    line_number: int,
    context: str,
    left: bool = False,
    right: bool = False,
    range: tuple[int, int] | None = None,
) -> None:
    add_error(on_error, line_number, None, truncate_context(context, left, right), range)


def add_warning_context(filename: str, line_number: int, line: str, rule: str) -> None:
    """Log an informational warning about a line; nothing is reported to the host."""
    logger.warning("%s: %d: %s: %s", filename, line_number, rule, truncate_context(line))


def range_from_regexp(line: str, pattern: re.Pattern[str]) -> tuple[int, int] | None:
    """Compute a one-based ``(column, length)`` range from a pattern match.

    When the pattern has a second group that matched, the range is narrowed
    to start after the first group.

    Args:
        line: Line to search.
        pattern: Compiled pattern.

    Returns:
        tuple[int, int] | None: Range of the match, or None when nothing matched.

    Examples:
        range_from_regexp("see http://x.io", BARE_URL_PATTERN)  # (5, 11)
    """
    match = pattern.search(line)
    if match is None:
        return None
    column = match.start() + 1
    length = len(match.group(0))
    if (match.lastindex or 0) >= 2 and match.group(2):
        column += len(match.group(1) or "")
        length -= len(match.group(1) or "")
    return column, length


def in_code_block(line: str, in_code: bool) -> bool:
    """Toggle a code state on any line containing a triple backtick.

    A rough fallback for callers scanning raw lines without an index.
    """
    if "```" in line:
        return not in_code
    return in_code
