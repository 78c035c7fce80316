"""Stateless string helpers shared by the classification engines and rules."""

from __future__ import annotations

import re

from .constants import BLOCK_QUOTE_PREFIX_PATTERN, NEWLINE_PATTERN
from .models import Token

_REGEXP_SPECIAL_CHARACTERS = re.compile(r"[-/\\^$*+?.()|\[\]{}]")


def trim_left(text: str) -> str:
    """Remove leading whitespace."""
    return text.lstrip()


def trim_right(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip()


def is_empty_string(text: str) -> bool:
    return len(text) == 0


def escape_for_regexp(text: str) -> str:
    r"""Escape regular expression metacharacters in `text`.

    Only the characters that carry meaning in a pattern are escaped, so the
    result stays readable when embedded in an error message.

    Args:
        text: Literal text to embed in a pattern.

    Returns:
        str: Text safe to use inside ``re.compile``.

    Examples:
        escape_for_regexp("a.b")  # "a\\.b"
        escape_for_regexp("[x]")  # "\\[x\\]"
    """
    return _REGEXP_SPECIAL_CHARACTERS.sub(lambda match: "\\" + match.group(0), text)


def split_lines(text: str) -> list[str]:
    """Split text on every newline sequence markdown-it recognizes.

    Unlike ``str.splitlines``, a trailing newline yields a final empty line,
    which keeps the line count aligned with parser line maps.

    Args:
        text: Full document text.

    Returns:
        list[str]: Lines without their line terminators.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b", ""]
    """
    return NEWLINE_PATTERN.split(text)


def strip_block_quote_markers(line: str) -> str:
    """Drop leading block-quote markers (``>``) from a source line."""
    return BLOCK_QUOTE_PREFIX_PATTERN.sub("", line, count=1)


def indent_for(token: Token) -> int:
    """Compute the indentation of a token's first line.

    Block-quote markers are removed before counting, so a list nested in a
    quote reports the indent relative to the quoted content.

    Args:
        token: Token whose source line should be measured.

    Returns:
        int: Number of whitespace characters before the first content character.

    Examples:
        indent_for(Token("bullet_list_open", line="  - item"))  # 2
        indent_for(Token("bullet_list_open", line="> - item"))  # 0
    """
    line = strip_block_quote_markers(token.line)
    return len(line) - len(trim_left(line))
