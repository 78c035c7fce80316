"""Package-specific exception types."""

from __future__ import annotations


class TokenStreamError(ValueError):
    """Base class for malformed token stream errors.

    Raised when the parser output violates the structure the index relies on.
    These are contract violations, not document issues, and are never turned
    into lint errors.
    """


class UnbalancedListError(TokenStreamError):
    """Raised when list open/close tokens do not pair up.

    Args:
        token_type: Type of the offending token.
        position: Zero-based index of the token within the stream, or None when
            the imbalance is only detected at the end of the stream.
    """

    def __init__(self, token_type: str, position: int | None = None):
        self.token_type = token_type
        self.position = position
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.position is None:
            return f"Token stream ended with unclosed list ({self.token_type})"
        return f"Unbalanced list token `{self.token_type}` at token {self.position}"


class LintFileError(Exception):
    """Raised when a Markdown file cannot be read or linted."""
