"""
Lints Markdown files with the custom rules.
Prints one line per violation and exits with status 1 when any are found.
"""

from __future__ import annotations

from pathlib import Path

import click

from .config import ConfigError, build_config
from .engine import lint_file
from .exceptions import LintFileError, TokenStreamError
from .filesystem import normalize_filepath
from .logging import configure_logging, get_logger

__all__ = ["cli"]

logger = get_logger("cli")


@click.command()
@click.version_option()
@click.option(
    "--disable", "disabled_rules", multiple=True, help="Rule name or alias to skip (repeatable)"
)
@click.option(
    "--clear-comments/--no-clear-comments",
    default=None,
    help="Blank HTML comment contents before linting",
)
@click.option("--max-line-length", type=int, help="Warn about lines longer than this")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.argument("filepaths", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.pass_context
def cli(
    ctx: click.Context,
    filepaths: tuple[str, ...],
    disabled_rules: tuple[str, ...] = (),
    clear_comments: bool | None = None,
    max_line_length: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for linting Markdown files.

    Args:
        ctx: Click context, used to set the exit status.
        filepaths: Paths to the Markdown files to lint.
        disabled_rules: Rules to skip in addition to configured ones.
        clear_comments: Override for blanking HTML comment contents.
        max_line_length: Override for the long-line warning threshold.
        verbose: Whether to log debug output.

    Returns:
        None.

    Raises:
        click.BadParameter: If a path is invalid or the configuration is invalid.
        click.ClickException: If a file cannot be read or parsed.

    Examples:
        mdlint-rules README.md docs/guide.md --disable AM022
    """
    configure_logging(verbose=verbose)

    violation_count = 0
    for raw_path in filepaths:
        try:
            filepath = normalize_filepath(raw_path)
        except ValueError as error:
            raise click.BadParameter(str(error)) from error

        try:
            config = build_config(
                filepath.parent,
                disable=list(disabled_rules) or None,
                clear_html_comments=clear_comments,
                max_line_length=max_line_length,
            )
        except ConfigError as error:
            raise click.BadParameter(str(error)) from error

        try:
            violations = lint_file(filepath, config)
        except (LintFileError, TokenStreamError) as error:
            raise click.ClickException(str(error)) from error

        logger.debug("%s: %d violation(s)", raw_path, len(violations))
        for violation in violations:
            click.echo(violation.format(raw_path))
        violation_count += len(violations)

    if violation_count:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
