import sys
from pathlib import Path
from typing import Any, Optional

from click.testing import CliRunner
import pytest
import yaml


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from skillful.skills.models import SkillDefinition  # noqa: E402


DEFAULT_DESCRIPTION = "Helps with a well described recurring task"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def write_skill():
    def _write(
        root: Path,
        relative_dir: str,
        description: Optional[str] = DEFAULT_DESCRIPTION,
        body: str = "# Instructions\n\nDo the thing.\n",
        extra: Optional[dict[str, Any]] = None,
        raw: Optional[str] = None,
    ) -> Path:
        skill_dir = root / relative_dir
        skill_dir.mkdir(parents=True, exist_ok=True)
        path = skill_dir / "SKILL.md"
        if raw is None:
            frontmatter: dict[str, Any] = {}
            if description is not None:
                frontmatter["description"] = description
            frontmatter.update(extra or {})
            raw = (
                "---\n"
                + yaml.safe_dump(frontmatter, sort_keys=False)
                + "---\n\n"
                + body
            )
        path.write_text(raw, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_skill():
    def _make(
        name: str, description: str, identifier: Optional[str] = None
    ) -> SkillDefinition:
        root = Path("/skills")
        return SkillDefinition(
            identifier=identifier or name.replace("-", "_"),
            name=name,
            description=description,
            content="",
            path=root / name / "SKILL.md",
            root=root,
        )

    return _make


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
