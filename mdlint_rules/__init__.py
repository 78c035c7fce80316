"""
mdlint-rules: custom Markdown lint rules and the structural index they share.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    mdlint-rules README.md

Library Usage:
    from mdlint_rules import lint_content, parse_document

    for violation in lint_content(Path("README.md").read_text()):
        print(violation.format("README.md"))

    document = parse_document("- a\\n  - b\\n")
    for descriptor in document.index.iter_lists():
        print(descriptor.nesting_depth, descriptor.last_line_index)
"""

from .comments import clear_html_comment_text
from .document import Document, parse_document
from .engine import RuleViolation, lint_content, lint_file
from .exceptions import LintFileError, TokenStreamError, UnbalancedListError
from .index import LineInfo, StructuralIndex, build_index
from .models import FenceBoundary, LineMetadata, LintError, ListDescriptor, Rule, Token
from .rules import AM022, RULES
from .slugify import slugify

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "build_index",
    "clear_html_comment_text",
    "lint_content",
    "lint_file",
    "parse_document",
    "slugify",
    # Data models
    "Document",
    "FenceBoundary",
    "LineInfo",
    "LineMetadata",
    "LintError",
    "ListDescriptor",
    "Rule",
    "RuleViolation",
    "StructuralIndex",
    "Token",
    # Rules
    "AM022",
    "RULES",
    # Exceptions
    "LintFileError",
    "TokenStreamError",
    "UnbalancedListError",
    # Version
    "__version__",
]
