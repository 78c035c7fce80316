"""Constants and shared patterns used across the mdlint-rules package."""

from __future__ import annotations

import re

# Newline characters recognized by markdown-it (see NEWLINES_RE in its normalize rule)
NEWLINE_PATTERN = re.compile(r"\r[\n\u0085]?|[\n\u2424\u2028\u0085]")

# YAML (---) or TOML (+++) front matter; only honored at the very start of a file.
# Line ends are spelled out since $ does not match before a lone \r
FRONT_MATTER_PATTERN = re.compile(
    r"(---|\+\+\+)(?:\r\n|\r|\n)(?:.*?(?:\r\n|\r|\n))??\1(?:\r\n|\r|\n)", re.DOTALL
)

# Inline rule-control directives, e.g. <!-- markdownlint-disable AM022 -->
INLINE_COMMENT_PATTERN = re.compile(
    r"<!--\s*markdownlint-(dis|en)able((?:\s+[a-z0-9_-]+)*)\s*-->", re.IGNORECASE
)

# Range matching
ATX_HEADING_SPACE_PATTERN = re.compile(r"^#+\s*\S")
BARE_URL_PATTERN = re.compile(r"(?:http|ftp)s?://[^\s]*", re.IGNORECASE)
LIST_ITEM_MARKER_PATTERN = re.compile(r"^[\s>]*(?:[*+-]|\d+[.)])\s+")
ORDERED_LIST_ITEM_MARKER_PATTERN = re.compile(r"^[\s>]*0*(\d+)[.)]")

# Line classification
CODE_FENCE_PATTERN = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})")
BLOCK_QUOTE_PREFIX_PATTERN = re.compile(r"^[\s>]*(> |>)")

# Comment blanking
HTML_COMMENT_BEGIN = "<!--"
HTML_COMMENT_END = "-->"
BLANK_ESCAPE_MARKER = "\\"

# Anchors
EXPLICIT_ANCHOR_PATTERN = re.compile(r"\s*\{#(?P<anchor>.*?)\}\s*$")
LOCALIZATION_MARKER_PATTERN = re.compile(r"\[!(?:DNL|UICONTROL) (?P<text>.*?)\]")

# Error context
MAX_CONTEXT_LENGTH = 30

# Limits and file handling
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 10_000
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".mkdn")
