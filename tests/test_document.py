from __future__ import annotations

import dataclasses

import pytest

from mdlint_rules.document import create_parser, parse_document


def test_tokens_carry_source_lines():
    document = parse_document("intro\n\n## Heading\n")

    heading = next(token for token in document.tokens if token.type == "heading_open")

    assert heading.line == "## Heading"
    assert heading.line_number == 3
    assert heading.map == (2, 3)
    assert heading.markup == "##"


def test_unmapped_tokens_have_no_line():
    document = parse_document("text\n")

    closing = next(token for token in document.tokens if token.type == "paragraph_close")

    assert closing.map is None
    assert closing.line_number is None
    assert closing.line == ""


def test_inline_children_advance_on_line_breaks():
    document = parse_document("first\nsecond\n")

    inline = next(token for token in document.tokens if token.type == "inline")

    assert [(child.type, child.line_number) for child in inline.children] == [
        ("text", 1),
        ("softbreak", 1),
        ("text", 2),
    ]
    assert inline.children[2].line == "second"


def test_tokens_are_immutable():
    token = parse_document("text\n").tokens[0]

    with pytest.raises(dataclasses.FrozenInstanceError):
        token.type = "other"


def test_document_keeps_name_and_front_matter():
    document = parse_document("# A\n", name="doc.md", front_matter_lines=["---", "---"])

    assert document.name == "doc.md"
    assert document.front_matter_lines == ["---", "---"]
    assert document.lines == ["# A", ""]


def test_parser_enables_tables():
    tokens = create_parser().parse("| a |\n| - |\n")

    assert tokens[0].type == "table_open"
