"""Tests for the list/search/show/resource CLI commands."""

from pathlib import Path

from skillful.__main__ import cli


def test_list_empty(skills_root: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["--root", str(skills_root), "list"])

    assert result.exit_code == 0
    assert "No skills found." in result.output


def test_list_populated(skills_root: Path, write_skill, cli_runner) -> None:
    write_skill(skills_root, "alpha")
    write_skill(skills_root, "beta")

    result = cli_runner.invoke(cli, ["--root", str(skills_root), "list"])

    assert result.exit_code == 0
    assert "alpha" in result.output
    assert "beta" in result.output


def test_list_uses_project_local_root_by_default(
    tmp_path: Path, write_skill, cli_runner
) -> None:
    project = tmp_path / "project"
    write_skill(project / ".opencode" / "skills", "project-only")
    write_skill(tmp_path / ".config" / "opencode" / "skills", "user-wide")

    result = cli_runner.invoke(cli, ["--project-dir", str(project), "list"])

    assert result.exit_code == 0
    assert "project-only" in result.output
    assert "user-wide" in result.output


def test_search_ranks_and_reports_feedback(skills_root: Path, write_skill, cli_runner) -> None:
    write_skill(skills_root, "git-commit", description="Write conventional commit messages")
    write_skill(skills_root, "docs", description="Git commit guide for documentation")

    result = cli_runner.invoke(cli, ["--root", str(skills_root), "search", "git-commit"])

    assert result.exit_code == 0
    assert "git_commit" in result.output
    assert "Found 1 match" in result.output


def test_search_without_query_lists_everything(
    skills_root: Path, write_skill, cli_runner
) -> None:
    write_skill(skills_root, "alpha")
    write_skill(skills_root, "beta")

    result = cli_runner.invoke(cli, ["--root", str(skills_root), "search"])

    assert result.exit_code == 0
    assert "Listing all 2 skills" in result.output


def test_search_with_diagnostics(skills_root: Path, write_skill, cli_runner) -> None:
    write_skill(skills_root, "alpha")
    write_skill(skills_root, "broken", description="short")

    result = cli_runner.invoke(
        cli, ["--root", str(skills_root), "search", "alpha", "--diagnostics"]
    )

    assert result.exit_code == 0
    assert "diagnostics" in result.output
    assert "rejected" in result.output


def test_search_policy_option(tmp_path: Path, write_skill, cli_runner) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    write_skill(first, "deploy", description="Deploy from the first root dir")
    write_skill(second, "deploy", description="Deploy from the second root dir")

    result = cli_runner.invoke(
        cli,
        ["--root", str(first), "--root", str(second), "--policy", "first-wins", "show", "deploy"],
    )

    assert result.exit_code == 0
    assert "first root" in result.output


def test_show_existing_skill(skills_root: Path, write_skill, cli_runner) -> None:
    path = write_skill(skills_root, "alpha", body="# Alpha steps\n\nRun it.\n")
    (path.parent / "scripts").mkdir()
    (path.parent / "scripts" / "go.sh").write_text("echo go", encoding="utf-8")

    result = cli_runner.invoke(cli, ["--root", str(skills_root), "show", "alpha"])

    assert result.exit_code == 0
    assert "Alpha steps" in result.output
    assert "scripts/go.sh" in result.output


def test_show_prints_bracketed_fields_literally(
    skills_root: Path, write_skill, cli_runner
) -> None:
    write_skill(
        skills_root,
        "licensed",
        extra={"license": "MIT [/oops]", "allowed-tools": ["bash[red]", "read"]},
    )

    result = cli_runner.invoke(cli, ["--root", str(skills_root), "show", "licensed"])

    assert result.exit_code == 0, result.output
    assert "MIT [/oops]" in result.output
    assert "bash[red], read" in result.output


def test_show_missing_skill_fails(skills_root: Path, write_skill, cli_runner) -> None:
    write_skill(skills_root, "alpha")

    result = cli_runner.invoke(cli, ["--root", str(skills_root), "show", "alpha", "nope"])

    assert result.exit_code == 1
    assert "not found" in result.output
    assert "nope" in result.output


def test_resource_prints_content(skills_root: Path, write_skill, cli_runner) -> None:
    path = write_skill(skills_root, "alpha")
    (path.parent / "references").mkdir()
    (path.parent / "references" / "notes.txt").write_text("remember this", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["--root", str(skills_root), "resource", "alpha", "reference", "notes.txt"]
    )

    assert result.exit_code == 0
    assert "remember this" in result.output


def test_resource_unknown_path_fails(skills_root: Path, write_skill, cli_runner) -> None:
    write_skill(skills_root, "alpha")

    result = cli_runner.invoke(
        cli, ["--root", str(skills_root), "resource", "alpha", "asset", "nope.png"]
    )

    assert result.exit_code != 0
    assert "no asset resource" in result.output


def test_invalid_config_is_reported(tmp_path: Path, cli_runner) -> None:
    config = tmp_path / ".config" / "skillful" / "config.json"
    config.parent.mkdir(parents=True)
    config.write_text('{"maxWorkers": 0}', encoding="utf-8")

    result = cli_runner.invoke(cli, ["list"])

    assert result.exit_code != 0
    assert "Invalid config schema" in result.output
