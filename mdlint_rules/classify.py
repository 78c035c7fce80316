"""Per-line classification of code, fence and table regions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from .constants import CODE_FENCE_PATTERN
from .models import FenceBoundary, LineMetadata, Token

PLAIN_LINE = LineMetadata()
CODE_LINE = LineMetadata(in_code=True)
OPENING_FENCE_LINE = LineMetadata(in_code=True, fence=FenceBoundary.OPEN)
CLOSING_FENCE_LINE = LineMetadata(in_code=True, fence=FenceBoundary.CLOSE)


@dataclass
class FenceContext:
    """Fence scanning state.

    Attributes:
        fence: Fence run that opened the active block, or None outside fences.
        open_index: Zero-based index of the opening fence line.
    """

    fence: str | None = None
    open_index: int = -1


def match_fence(line: str) -> str | None:
    """Return the fence run at the start of `line`, if any.

    Grammar: up to three spaces, then three or more backticks or tildes.
    Anything after the run (info string, stray text) is ignored.

    Args:
        line: Source line without its terminator.

    Returns:
        str | None: The backtick or tilde run, or None when the line is not a fence.

    Examples:
        match_fence("```python")  # "```"
        match_fence("   ~~~~")  # "~~~~"
        match_fence("    ```")  # None, indented code
    """
    match = CODE_FENCE_PATTERN.match(line)
    return match.group("fence") if match else None


def _try_open_fence(ctx: FenceContext, line: str, line_index: int) -> bool:
    if ctx.fence is not None:
        return False

    fence = match_fence(line)
    if fence is None:
        return False

    ctx.fence = fence
    ctx.open_index = line_index
    return True


def _try_close_fence(ctx: FenceContext, line: str) -> bool:
    """Close the active fence when `line` is a run of the same fence character.

    The run length is not compared with the opening run: ```` ``` ```` closes
    a block opened by ```` ```` ````.
    """
    if ctx.fence is None:
        return False

    fence = match_fence(line)
    if fence is None or fence[0] != ctx.fence[0]:
        return False

    ctx.fence = None
    ctx.open_index = -1
    return True


def scan_fences(lines: Sequence[str]) -> list[LineMetadata]:
    """Classify lines by fenced code pattern alone.

    The parser does not always report fenced code (for example when a fence
    contains a closing-fence look-alike), so fences are also found by
    pattern. A fence that is never closed does not count: the scan resumes on
    the line after it as if it were plain text.

    Args:
        lines: Document lines.

    Returns:
        list[LineMetadata]: One record per line.
    """
    metadata = [PLAIN_LINE] * len(lines)
    ctx = FenceContext()
    line_index = 0

    while line_index < len(lines):
        line = lines[line_index]
        if _try_open_fence(ctx, line, line_index):
            metadata[line_index] = OPENING_FENCE_LINE
        elif _try_close_fence(ctx, line):
            metadata[line_index] = CLOSING_FENCE_LINE
        elif ctx.fence is not None:
            metadata[line_index] = CODE_LINE
        line_index += 1

        if line_index == len(lines) and ctx.fence is not None:
            # Unmatched opening fence
            restart = ctx.open_index
            metadata[restart:] = [PLAIN_LINE] * (len(lines) - restart)
            ctx = FenceContext()
            line_index = restart + 1

    return metadata


def _token_line_range(token: Token, line_count: int) -> range:
    if token.map is None:
        return range(0)
    start, end = token.map
    return range(max(start, 0), min(end, line_count))


def mark_code_blocks(metadata: list[LineMetadata], tokens: Iterable[Token]) -> None:
    """Flag lines covered by parser ``code_block`` tokens as code."""
    for token in tokens:
        if token.type == "code_block":
            for line_index in _token_line_range(token, len(metadata)):
                metadata[line_index] = replace(metadata[line_index], in_code=True)


def mark_tables(metadata: list[LineMetadata], tokens: Iterable[Token]) -> None:
    """Flag lines covered by parser ``table_open`` tokens as table lines."""
    for token in tokens:
        if token.type == "table_open":
            for line_index in _token_line_range(token, len(metadata)):
                metadata[line_index] = replace(metadata[line_index], in_table=True)


def classify_lines(lines: Sequence[str], tokens: Sequence[Token]) -> tuple[LineMetadata, ...]:
    """Build the line metadata for a document.

    Combines the fence pattern scan with parser-confirmed code blocks and
    tables. Signals only ever add flags, so a line may be both code and table.

    Args:
        lines: Document lines.
        tokens: Block-level parser tokens for the same lines.

    Returns:
        tuple[LineMetadata, ...]: One record per line, ``len(lines)`` long.

    Examples:
        classify_lines(["```", "code", "```"], [])[1].in_code  # True
    """
    metadata = scan_fences(lines)
    mark_code_blocks(metadata, tokens)
    mark_tables(metadata, tokens)
    return tuple(metadata)
