from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from mdlint_rules.models import FenceBoundary, LineMetadata, LintError, Rule, Token


def test_fence_boundary_values():
    assert [boundary.value for boundary in FenceBoundary] == [0, 1, -1]


@pytest.mark.parametrize(
    ("metadata", "expected"),
    [
        (LineMetadata(), 0),
        (LineMetadata(in_code=True), 1),
        (LineMetadata(in_code=True, fence=FenceBoundary.OPEN), 7),
        (LineMetadata(in_code=True, fence=FenceBoundary.CLOSE), 3),
        (LineMetadata(in_table=True), 8),
        (LineMetadata(in_code=True, in_table=True), 9),
    ],
)
def test_line_metadata_bitmask(metadata: LineMetadata, expected: int):
    assert metadata.bitmask == expected


def test_tokens_are_immutable():
    token = Token("heading_open", tag="h1", line="# A", line_number=1, map=(0, 1))

    with pytest.raises(FrozenInstanceError):
        token.line = "# B"


def test_lint_error_defaults():
    assert LintError(3) == LintError(line_number=3, detail=None, context=None, range=None)


def test_rule_name_is_first_name():
    rule = Rule(("XX001", "alias"), "Example", ("tag",), lambda params, on_error: None)

    assert rule.name == "XX001"
