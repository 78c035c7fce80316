"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, DEFAULT_MAX_LINE_LENGTH
from .rules import find_rule

CONFIG_TABLE = "mdlint-rules"
DOTFILE_NAME = ".mdlint-rules.toml"


@dataclass
class LintConfig:
    """Configuration for a lint run.

    Attributes:
        disable: Rule identifiers or aliases that should not run.
        clear_html_comments: Whether comment contents are blanked before rules run.
        strip_front_matter: Whether YAML/TOML front matter is skipped.
        max_file_size: Maximum file size in bytes that will be processed.
        max_line_length: Lines longer than this are logged as warnings.

    Examples:
        LintConfig(disable=["AM022"], max_line_length=120)
    """

    disable: list[str] = field(default_factory=list)
    clear_html_comments: bool = True
    strip_front_matter: bool = True

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_line_length` must be a positive integer")
    """


def load_config(search_path: Path) -> LintConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.mdlint-rules]`` table from `pyproject.toml` and the
    ``[mdlint-rules]`` or ``[tool.mdlint-rules]`` table from
    `.mdlint-rules.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        LintConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / DOTFILE_NAME,
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return LintConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> LintConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> LintConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return LintConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: LintConfig) -> None:
    """Validate a `LintConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If `disable` is not a list of known rule names, flags are
            not booleans, or numeric limits are not positive integers.

    Examples:
        validate_config(LintConfig(disable=["header-anchor-collision"]))
    """
    if not isinstance(config.disable, list) or not all(
        isinstance(name, str) for name in config.disable
    ):
        raise ConfigError("`disable` must be a list of rule names")
    unknown = [name for name in config.disable if find_rule(name) is None]
    if unknown:
        raise ConfigError(f"Unknown rule(s) in `disable`: {', '.join(unknown)}")

    for key in ("clear_html_comments", "strip_front_matter"):
        if not isinstance(getattr(config, key), bool):
            raise ConfigError(f"`{key}` must be a boolean")

    _ensure_positive_integers(
        {
            "max_file_size": config.max_file_size,
            "max_line_length": config.max_line_length,
        }
    )


def apply_overrides(config: LintConfig, **overrides: object) -> LintConfig:
    """Apply override values to a `LintConfig`.

    Values set to None are ignored. Rules passed in ``disable`` are added to
    the configured ones rather than replacing them.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name.

    Returns:
        LintConfig: New configuration with the overrides applied. The original
        configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `LintConfig`.

    Examples:
        updated = apply_overrides(config, disable=["AM022"], max_line_length=80)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if "disable" in changes:
        extra = [name for name in changes["disable"] if name not in config.disable]
        changes["disable"] = [*config.disable, *extra]
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> LintConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        LintConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), disable=["AM022"])
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")
