"""Markdown document loading on top of markdown-it-py."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cached_property

from markdown_it import MarkdownIt
from markdown_it.token import Token as ParserToken

from .index import StructuralIndex, build_index
from .models import Token
from .text import split_lines

_BREAK_TYPES = frozenset({"softbreak", "hardbreak"})


def create_parser() -> MarkdownIt:
    """Return the CommonMark parser used for linting, with tables enabled."""
    return MarkdownIt("commonmark").enable("table")


@dataclass
class Document:
    """A Markdown document ready for linting.

    Attributes:
        lines: Document lines without terminators (front matter excluded).
        tokens: Block-level tokens for `lines`.
        name: File name or identifier used in messages.
        front_matter_lines: Lines removed from the top of the file.
    """

    lines: list[str]
    tokens: list[Token]
    name: str = ""
    front_matter_lines: list[str] = field(default_factory=list)

    @cached_property
    def index(self) -> StructuralIndex:
        """Structural index for this document, built on first access."""
        return build_index(self)


def _line_at(lines: Sequence[str], line_number: int | None) -> str:
    if line_number is None or not 0 < line_number <= len(lines):
        return ""
    return lines[line_number - 1]


def _convert_children(
    children: Sequence[ParserToken] | None, lines: Sequence[str], line_number: int | None
) -> tuple[Token, ...]:
    converted = []
    for child in children or ():
        converted.append(
            Token(
                type=child.type,
                tag=child.tag,
                line=_line_at(lines, line_number),
                line_number=line_number,
                content=child.content,
                markup=child.markup,
                info=child.info,
                children=_convert_children(child.children, lines, line_number),
            )
        )
        if child.type in _BREAK_TYPES and line_number is not None:
            line_number += 1
    return tuple(converted)


def convert_token(token: ParserToken, lines: Sequence[str]) -> Token:
    """Convert a markdown-it token into an immutable `Token`.

    Inline children inherit the parent's line number, advanced by one after
    every soft or hard line break.

    Args:
        token: Token produced by markdown-it-py.
        lines: Lines of the parsed text.

    Returns:
        Token: Frozen copy carrying the source line.
    """
    token_map = tuple(token.map) if token.map else None
    line_number = token_map[0] + 1 if token_map else None
    return Token(
        type=token.type,
        tag=token.tag,
        line=_line_at(lines, line_number),
        line_number=line_number,
        map=token_map,
        content=token.content,
        markup=token.markup,
        info=token.info,
        children=_convert_children(token.children, lines, line_number),
    )


def parse_document(
    content: str, name: str = "", front_matter_lines: list[str] | None = None
) -> Document:
    """Tokenize Markdown content into a `Document`.

    Args:
        content: Markdown text, front matter already removed.
        name: File name or identifier used in messages.
        front_matter_lines: Lines removed from the top of the original text.

    Returns:
        Document: Lines and tokens of the content.

    Examples:
        document = parse_document("# Title\\n\\n- item\\n")
        [token.type for token in document.tokens][:3]  # ["heading_open", "inline", "heading_close"]
    """
    lines = split_lines(content)
    tokens = [convert_token(token, lines) for token in create_parser().parse(content)]
    return Document(
        lines=lines,
        tokens=tokens,
        name=name,
        front_matter_lines=list(front_matter_lines or []),
    )
