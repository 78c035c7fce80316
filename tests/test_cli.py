from __future__ import annotations

import textwrap
from pathlib import Path

from mdlint_rules.cli import cli


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def test_cli_reports_duplicate_anchors(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "doc.md",
        """
        # Setup

        ## Setup
        """,
    )

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert result.output.splitlines() == [
        f"{target}:1 AM022/header-anchor-collision Heading anchor has collision "
        "[Context: \"Duplicate anchor (autogenerated) 'setup'\"]",
        f"{target}:3 AM022/header-anchor-collision Heading anchor has collision "
        "[Generated anchor: 'setup-1'] [Context: \"Duplicate anchor (autogenerated) 'setup'\"]",
    ]


def test_cli_clean_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "clean.md", "# Intro\n\n## Usage\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_disable_option(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# A\n\n# A\n")

    result = cli_runner.invoke(cli, ["--disable", "AM022", str(target)])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_reads_config_next_to_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_text(
        '[tool.mdlint-rules]\ndisable = ["header-anchor-collision"]\n', encoding="utf-8"
    )
    target = _write(tmp_path, "doc.md", "# A\n\n# A\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 0


def test_cli_lints_several_files(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = _write(tmp_path, "one.md", "# A\n\n# A\n")
    second = _write(tmp_path, "two.md", "# B\n")

    result = cli_runner.invoke(cli, [str(first), str(second)])

    assert result.exit_code == 1
    assert len(result.output.splitlines()) == 2
    assert all(line.startswith(str(first)) for line in result.output.splitlines())


def test_cli_rejects_missing_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, [str(tmp_path / "missing.md")])

    assert result.exit_code == 2
    assert "does not exist" in result.output


def test_cli_rejects_non_markdown_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "notes.txt", "# A\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 2
    assert "is not a Markdown file" in result.output


def test_cli_rejects_unknown_rule(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(tmp_path, "doc.md", "# A\n")

    result = cli_runner.invoke(cli, ["--disable", "nope", str(target)])

    assert result.exit_code == 2
    assert "Unknown rule" in result.output


def test_cli_reports_file_errors(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MDLINT_RULES_MAX_FILE_SIZE", "1")
    target = _write(tmp_path, "doc.md", "# A\n")

    result = cli_runner.invoke(cli, [str(target)])

    assert result.exit_code == 1
    assert "exceeds the maximum allowed size" in result.output


def test_cli_requires_a_file(cli_runner):
    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 2
