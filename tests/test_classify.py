from __future__ import annotations

import pytest

from mdlint_rules.classify import (
    FenceContext,
    _try_close_fence,
    _try_open_fence,
    classify_lines,
    match_fence,
    scan_fences,
)
from mdlint_rules.document import parse_document
from mdlint_rules.models import FenceBoundary, Token


def _code_lines(metadata) -> list[int]:
    return [index for index, line in enumerate(metadata) if line.in_code]


def _interior_lines(metadata) -> list[int]:
    return [
        index
        for index, line in enumerate(metadata)
        if line.in_code and line.fence is FenceBoundary.NONE
    ]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("```", "```"),
        ("```python", "```"),
        ("   ~~~~ info", "~~~~"),
        ("    ```", None),
        ("``", None),
        ("text ```", None),
        ("\t```", None),
    ],
)
def test_match_fence(line: str, expected: str | None):
    assert match_fence(line) == expected


def test_try_open_fence_sets_context_fields():
    ctx = FenceContext()

    assert _try_open_fence(ctx, "  ~~~~", 4) is True
    assert ctx.fence == "~~~~"
    assert ctx.open_index == 4


def test_try_open_fence_ignored_when_already_fenced():
    ctx = FenceContext(fence="```", open_index=0)

    assert _try_open_fence(ctx, "~~~", 2) is False
    assert ctx.fence == "```"


def test_try_close_fence_requires_same_character():
    ctx = FenceContext(fence="```", open_index=0)

    assert _try_close_fence(ctx, "~~~") is False
    assert _try_close_fence(ctx, "```") is True
    assert ctx.fence is None
    assert ctx.open_index == -1


def test_try_close_fence_ignores_run_length():
    ctx = FenceContext(fence="`````", open_index=0)

    assert _try_close_fence(ctx, "```") is True


def test_fenced_block_marks_boundaries_and_interior():
    metadata = classify_lines(["intro", "```", "code", "more", "```", "outro"], [])

    assert [line.fence for line in metadata] == [
        FenceBoundary.NONE,
        FenceBoundary.OPEN,
        FenceBoundary.NONE,
        FenceBoundary.NONE,
        FenceBoundary.CLOSE,
        FenceBoundary.NONE,
    ]
    assert _code_lines(metadata) == [1, 2, 3, 4]
    assert _interior_lines(metadata) == [2, 3]
    assert [line.bitmask for line in metadata] == [0, 7, 1, 1, 3, 0]


def test_adjacent_fences_have_no_interior():
    metadata = classify_lines(["text", "```", "```", "after"], [])

    assert _interior_lines(metadata) == []
    assert metadata[1].fence is FenceBoundary.OPEN
    assert metadata[2].fence is FenceBoundary.CLOSE
    assert not metadata[3].in_code


def test_unmatched_fence_marks_nothing():
    metadata = classify_lines(["intro", "```", "a", "b"], [])

    assert _code_lines(metadata) == []
    assert all(line.fence is FenceBoundary.NONE for line in metadata)


def test_scan_resumes_after_unmatched_fence():
    metadata = scan_fences(["```", "~~~", "x", "~~~"])

    assert [line.fence for line in metadata] == [
        FenceBoundary.NONE,
        FenceBoundary.OPEN,
        FenceBoundary.NONE,
        FenceBoundary.CLOSE,
    ]
    assert _interior_lines(metadata) == [2]


def test_other_fence_character_does_not_close():
    metadata = scan_fences(["```", "~~~", "```"])

    assert _interior_lines(metadata) == [1]
    assert metadata[2].fence is FenceBoundary.CLOSE


def test_shorter_run_closes_longer_fence():
    metadata = scan_fences(["````", "a", "```", "b"])

    assert metadata[2].fence is FenceBoundary.CLOSE
    assert not metadata[3].in_code


def test_code_block_tokens_mark_code():
    tokens = [Token("code_block", map=(1, 3))]

    metadata = classify_lines(["text", "    a", "    b", "text"], tokens)

    assert _code_lines(metadata) == [1, 2]
    assert all(line.fence is FenceBoundary.NONE for line in metadata)


def test_table_tokens_mark_tables():
    tokens = [Token("table_open", map=(0, 3)), Token("table_close")]

    metadata = classify_lines(["| a |", "| - |", "| 1 |", ""], tokens)

    assert [line.in_table for line in metadata] == [True, True, True, False]
    assert [line.bitmask for line in metadata] == [8, 8, 8, 0]


def test_signals_are_additive():
    tokens = [Token("table_open", map=(0, 3))]

    metadata = classify_lines(["```", "x", "```"], tokens)

    assert all(line.in_table and line.in_code for line in metadata)
    assert metadata[0].bitmask == 15


def test_token_ranges_are_clipped_to_document():
    metadata = classify_lines(["a"], [Token("code_block", map=(0, 5))])

    assert len(metadata) == 1
    assert metadata[0].in_code


def test_parser_indented_code_block():
    document = parse_document("text\n\n    indented\n    code\n\nafter\n")

    metadata = classify_lines(document.lines, document.tokens)

    assert len(metadata) == len(document.lines)
    assert _code_lines(metadata) == [2, 3]


def test_parser_table():
    document = parse_document("| a | b |\n| --- | --- |\n| 1 | 2 |\n\ntext\n")

    metadata = classify_lines(document.lines, document.tokens)

    assert [line.in_table for line in metadata] == [True, True, True, False, False, False]
