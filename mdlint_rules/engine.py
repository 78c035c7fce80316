"""Running the custom rules over a Markdown document."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

from .comments import clear_html_comment_text
from .config import LintConfig, validate_config
from .constants import FRONT_MATTER_PATTERN
from .document import Document, parse_document
from .exceptions import LintFileError
from .filesystem import collect_file_stat, enforce_file_size, get_max_file_size, safe_read
from .helpers import add_warning_context
from .logging import get_logger
from .models import LintError, Rule
from .rules import RULES, find_rule
from .text import split_lines

logger = get_logger("engine")


@dataclass(frozen=True)
class RuleViolation:
    """A `LintError` attributed to the rule that reported it.

    Attributes:
        rule_names: Identifier and aliases of the rule.
        description: Rule description.
        error: The reported error, with line numbers relative to the full file.
    """

    rule_names: tuple[str, ...]
    description: str
    error: LintError

    @property
    def line_number(self) -> int:
        return self.error.line_number

    def format(self, name: str = "") -> str:
        """Render ``name:line RULE/alias description [detail] [context]``."""
        parts = [f"{name}:{self.line_number}" if name else str(self.line_number)]
        parts.append("/".join(self.rule_names))
        parts.append(self.description)
        if self.error.detail:
            parts.append(f"[{self.error.detail}]")
        if self.error.context:
            parts.append(f"[Context: \"{self.error.context}\"]")
        return " ".join(parts)


def split_front_matter(content: str) -> tuple[list[str], str]:
    """Separate leading YAML (``---``) or TOML (``+++``) front matter.

    Args:
        content: Full file text.

    Returns:
        tuple[list[str], str]: Front matter lines (empty when absent) and the
            remaining text.

    Examples:
        split_front_matter("---\\ntitle: x\\n---\\n# Doc\\n")  # (["---", "title: x", "---"], "# Doc\\n")
    """
    match = FRONT_MATTER_PATTERN.match(content)
    if match is None:
        return [], content
    front_matter = match.group(0)
    return split_lines(front_matter)[:-1], content[len(front_matter) :]


def enabled_rules(config: LintConfig) -> list[Rule]:
    disabled = {find_rule(name) for name in config.disable}
    return [rule for rule in RULES if rule not in disabled]


def _warn_long_lines(document: Document, config: LintConfig, offset: int) -> None:
    for line_index, line in enumerate(document.lines):
        if len(line) > config.max_line_length:
            add_warning_context(
                document.name or "<string>", line_index + offset + 1, line, "line-length"
            )


def run_rules(
    document: Document, rules: Iterable[Rule], line_offset: int = 0
) -> list[RuleViolation]:
    """Run rules over a document and collect their errors.

    Rule exceptions are not caught: a rule that fails means the run is invalid.

    Args:
        document: Document to lint.
        rules: Rules to run.
        line_offset: Number of lines removed before the document (front matter);
            added to every reported line number.

    Returns:
        list[RuleViolation]: Violations ordered by line number, then rule.
    """
    violations: list[RuleViolation] = []
    for rule in rules:
        errors: list[LintError] = []
        rule.function(document, errors.append)
        logger.debug("%s reported %d error(s) for %s", rule.name, len(errors), document.name)
        for error in errors:
            if line_offset:
                error = replace(error, line_number=error.line_number + line_offset)
            violations.append(RuleViolation(rule.names, rule.description, error))

    violations.sort(key=lambda violation: (violation.line_number, violation.rule_names[0]))
    return violations


def lint_content(
    content: str, config: LintConfig | None = None, name: str = ""
) -> list[RuleViolation]:
    """Lint Markdown text with every enabled rule.

    Args:
        content: Markdown text.
        config: Configuration for the run. Defaults to a new `LintConfig`.
        name: File name used in messages.

    Returns:
        list[RuleViolation]: Violations with line numbers relative to `content`.

    Raises:
        ConfigError: If the configuration fails validation.
        TokenStreamError: If the parser output is malformed.

    Examples:
        lint_content("# A\\n\\n# A\\n")  # two AM022 violations
    """
    config = config or LintConfig()
    validate_config(config)

    front_matter_lines: list[str] = []
    if config.strip_front_matter:
        front_matter_lines, content = split_front_matter(content)
    if config.clear_html_comments:
        content = clear_html_comment_text(content)

    document = parse_document(content, name=name, front_matter_lines=front_matter_lines)
    offset = len(front_matter_lines)
    _warn_long_lines(document, config, offset)
    return run_rules(document, enabled_rules(config), offset)


def lint_file(filepath: Path, config: LintConfig | None = None) -> list[RuleViolation]:
    """Read and lint a Markdown file.

    Args:
        filepath: Path to the file.
        config: Configuration for the run. Defaults to a new `LintConfig`.

    Returns:
        list[RuleViolation]: Violations found in the file.

    Raises:
        LintFileError: If the configuration is invalid or the file cannot be
            read, is too large, or is not valid UTF-8.
    """
    config = config or LintConfig()
    try:
        validate_config(config)
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise LintFileError(str(error)) from error

    try:
        enforce_file_size(collect_file_stat(filepath), max_file_size, filepath)
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        raise LintFileError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except IOError as error:
        raise LintFileError(str(error)) from error

    return lint_content(content, config, name=str(filepath))
