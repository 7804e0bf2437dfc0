from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console

from skillful.config import ConfigRepository, SkillfulConfig
from skillful.errors import SkillfulError
from skillful.logger import configure_logging
from skillful.provider import SkillProvider
from skillful.registry.builder import DuplicatePolicy
from skillful.skills.models import ResourceKind
from skillful.tui import SkillConsoleUI


POLICY_VALUES = [policy.value for policy in DuplicatePolicy]
RESOURCE_KIND_VALUES = [kind.value for kind in ResourceKind]


def _load_config(obj: Dict[str, Any]) -> tuple[ConfigRepository, SkillfulConfig]:
    repository = ConfigRepository(project_dir=obj.get("project_dir"))
    try:
        config = repository.load()
    except SkillfulError as exc:
        raise click.ClickException(str(exc))

    if obj.get("policy"):
        config = replace(config, duplicate_policy=DuplicatePolicy(obj["policy"]))
    if obj.get("debug"):
        config = replace(config, debug=True)
    return repository, config


def _provider_from_obj(obj: Dict[str, Any]) -> SkillProvider:
    repository, config = _load_config(obj)
    configure_logging(config.debug)

    roots = repository.resolve_paths(obj["roots"]) if obj.get("roots") else None
    provider = SkillProvider.from_config(config, roots=roots)
    try:
        provider.build()
    except SkillfulError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    return provider


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    "roots",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Skill root to scan; repeat in ascending priority. Replaces configured roots.",
)
@click.option(
    "--project-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Project directory for project-local skills (defaults to cwd).",
)
@click.option(
    "--policy",
    type=click.Choice(POLICY_VALUES, case_sensitive=False),
    default=None,
    help="Which definition keeps a duplicated identifier.",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    roots: tuple[Path, ...],
    project_dir: Optional[Path],
    policy: Optional[str],
    debug: bool,
) -> None:
    """Discover, index and search SKILL.md skills."""
    ctx.obj = {
        "roots": roots,
        "project_dir": project_dir,
        "policy": policy.lower() if policy else None,
        "debug": debug,
    }


@cli.command("list", help="List every indexed skill by name.")
@click.pass_obj
def list_skills(obj: Dict[str, Any]) -> None:
    ui = SkillConsoleUI(Console())
    provider = _provider_from_obj(obj)
    ui.render_listing(provider.list())


@cli.command(help="Search skills; each QUERY argument is parsed as one fragment.")
@click.argument("query", nargs=-1)
@click.option(
    "--diagnostics", "show_diagnostics", is_flag=True, help="Also show build diagnostics."
)
@click.pass_obj
def search(obj: Dict[str, Any], query: tuple[str, ...], show_diagnostics: bool) -> None:
    ui = SkillConsoleUI(Console())
    provider = _provider_from_obj(obj)
    result = provider.search(list(query) if query else "")
    ui.render_search(result, provider.diagnostics if show_diagnostics else None)


@cli.command(help="Show one or more skills with their resources and content.")
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_obj
def show(obj: Dict[str, Any], identifiers: tuple[str, ...]) -> None:
    ui = SkillConsoleUI(Console())
    provider = _provider_from_obj(obj)
    result = provider.load(identifiers)
    for skill in result.loaded:
        ui.render_skill(skill)
    if result.not_found:
        ui.render_not_found(result.not_found)
        raise click.exceptions.Exit(1)


@cli.command(help="Print a script, reference or asset bundled with a skill.")
@click.argument("identifier")
@click.argument("kind", type=click.Choice(RESOURCE_KIND_VALUES, case_sensitive=False))
@click.argument("path")
@click.pass_obj
def resource(obj: Dict[str, Any], identifier: str, kind: str, path: str) -> None:
    ui = SkillConsoleUI(Console())
    provider = _provider_from_obj(obj)
    try:
        resolved = provider.read_resource(identifier, kind.lower(), path)
    except SkillfulError as exc:
        raise click.ClickException(str(exc))
    ui.render_resource(resolved)


@cli.command(help="Show roots, build counts and every rejected file.")
@click.pass_obj
def doctor(obj: Dict[str, Any]) -> None:
    ui = SkillConsoleUI(Console())
    provider = _provider_from_obj(obj)
    diagnostics = provider.diagnostics
    ui.render_diagnostics(diagnostics, roots=provider.roots, state=provider.state)
    if diagnostics.has_problems():
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
