"""Structural index bundling line metadata and flattened lists for one document."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .classify import classify_lines
from .lists import flatten_lists
from .logging import get_logger
from .models import FenceBoundary, LineMetadata, ListDescriptor

if TYPE_CHECKING:
    from .document import Document

logger = get_logger("index")

LineCallback = Callable[[str, int, bool, int, bool], None]


@dataclass(frozen=True)
class LineInfo:
    """A document line together with its classification.

    Attributes:
        line: Source text of the line.
        line_index: Zero-based line index.
        in_code: Whether the line is part of a code block.
        fence: Fence boundary kind for the line.
        in_table: Whether the line is part of a table.
    """

    line: str
    line_index: int
    in_code: bool
    fence: FenceBoundary
    in_table: bool


@dataclass(frozen=True)
class StructuralIndex:
    """Queryable structure of a single document.

    Instances are plain values: build one per document with `build_index`
    and hand it to whatever needs it. Nothing is cached at module level.

    Attributes:
        params: The document the index was built from.
        line_metadata: One `LineMetadata` per document line.
        lists: All lists in document order.
    """

    params: Document
    line_metadata: tuple[LineMetadata, ...]
    lists: tuple[ListDescriptor, ...]

    def iter_lines(self) -> Iterator[LineInfo]:
        """Yield every document line with its classification, in order."""
        for line_index, line in enumerate(self.params.lines):
            metadata = self.line_metadata[line_index]
            yield LineInfo(
                line=line,
                line_index=line_index,
                in_code=metadata.in_code,
                fence=metadata.fence,
                in_table=metadata.in_table,
            )

    def for_each_line(self, callback: LineCallback) -> None:
        """Call ``callback(line, line_index, in_code, on_fence, in_table)`` per line.

        ``on_fence`` is 1 on an opening fence, -1 on a closing fence and 0
        elsewhere.

        Args:
            callback: Function invoked once per line.

        Returns:
            None.

        Examples:
            index.for_each_line(lambda line, index, in_code, on_fence, in_table: ...)
        """
        for info in self.iter_lines():
            callback(info.line, info.line_index, info.in_code, info.fence.value, info.in_table)

    def iter_lists(self) -> Iterator[ListDescriptor]:
        """Yield the flattened lists in document order."""
        yield from self.lists

    def flatten_lists(self) -> list[ListDescriptor]:
        return list(self.lists)


def build_index(params: Document) -> StructuralIndex:
    """Classify lines and flatten lists for a document.

    Args:
        params: Object exposing ``lines`` and ``tokens``.

    Returns:
        StructuralIndex: Index for exactly this document.

    Raises:
        TokenStreamError: If the token stream has unbalanced list tokens.

    Examples:
        index = build_index(parse_document("- a\\n- b\\n"))
        index.lists[0].is_unordered  # True
    """
    line_metadata = classify_lines(params.lines, params.tokens)
    lists = flatten_lists(params.tokens)
    logger.debug(
        "Indexed %d lines and %d lists for %s",
        len(line_metadata),
        len(lists),
        getattr(params, "name", "") or "<string>",
    )
    return StructuralIndex(params=params, line_metadata=line_metadata, lists=lists)
