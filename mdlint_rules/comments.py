"""Position-preserving removal of HTML comment text.

Rules that scan raw lines should not trip over prose hidden in comments, but
the errors they report must still point at the right line and column. The
transform below therefore overwrites comment contents in place instead of
deleting them.

See https://www.w3.org/TR/html5/syntax.html#comments for the comment grammar.
"""

from __future__ import annotations

import re

from .constants import (
    BLANK_ESCAPE_MARKER,
    HTML_COMMENT_BEGIN,
    HTML_COMMENT_END,
    INLINE_COMMENT_PATTERN,
)

_NON_NEWLINE = re.compile(r"[^\r\n]")
_SPACE_BEFORE_NEWLINE = re.compile(r" ([\r\n])")


def is_blankable_comment(content: str) -> bool:
    """Check whether comment content is well formed enough to blank.

    Empty comments, comments starting with ``>`` or ending with ``-``, and
    comments containing ``--`` are malformed and stay untouched so they keep
    triggering whatever rules look at them.

    Args:
        content: Text between ``<!--`` and ``-->``.

    Returns:
        bool: True when the content may be blanked.

    Examples:
        is_blankable_comment(" note ")  # True
        is_blankable_comment("> nope")  # False
        is_blankable_comment(" a -- b ")  # False
    """
    return (
        len(content) > 0
        and content[0] != ">"
        and content[-1] != "-"
        and "--" not in content
    )


def blank_text(content: str) -> str:
    """Replace every character except newlines with a space.

    A space that would end up right before a newline becomes the escape
    marker instead, so no trailing whitespace is introduced.

    Examples:
        blank_text("abc")  # "   "
    """
    blanks = _NON_NEWLINE.sub(" ", content)
    return _SPACE_BEFORE_NEWLINE.sub(lambda match: BLANK_ESCAPE_MARKER + match.group(1), blanks)


def _is_already_blank_remainder(content: str) -> bool:
    return (
        content.endswith(BLANK_ESCAPE_MARKER)
        and blank_text(content[: -len(BLANK_ESCAPE_MARKER)]) + BLANK_ESCAPE_MARKER == content
    )


def clear_html_comment_text(text: str) -> str:
    """Blank the contents of all well-formed HTML comments.

    Delimiters and text outside comments are untouched, and every line keeps
    its length, so line/column positions in the result match the input.
    Inline rule-control directives (``<!-- markdownlint-disable ... -->``)
    are kept verbatim. An unterminated comment runs to the end of the text;
    when it is blanked a single escape marker is appended so the document
    does not end in whitespace. Applying the transform to its own output
    changes nothing.

    Args:
        text: Full document text.

    Returns:
        str: Text with comment contents replaced by blanks.

    Examples:
        clear_html_comment_text("a <!-- b --> c")  # "a <!--   --> c"
        clear_html_comment_text("<!-- -- -->")  # unchanged, malformed
    """
    start = text.find(HTML_COMMENT_BEGIN)
    while start != -1:
        content_start = start + len(HTML_COMMENT_BEGIN)
        end = text.find(HTML_COMMENT_END, start)

        if end == -1:
            content = text[content_start:]
            if is_blankable_comment(content) and not _is_already_blank_remainder(content):
                text = text[:content_start] + blank_text(content) + BLANK_ESCAPE_MARKER
            break

        content = text[content_start:end]
        comment = text[start : end + len(HTML_COMMENT_END)]
        if is_blankable_comment(content) and not INLINE_COMMENT_PATTERN.search(comment):
            text = text[:content_start] + blank_text(content) + text[end:]

        start = text.find(HTML_COMMENT_BEGIN, end + len(HTML_COMMENT_END))

    return text
