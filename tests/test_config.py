import json
from pathlib import Path

import pytest

from skillful.config import ConfigRepository, config_home, default_skill_roots
from skillful.constants import DEFAULT_MAX_WORKERS
from skillful.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from skillful.registry.builder import DuplicatePolicy


def _write_config(tmp_path: Path, payload) -> Path:
    path = tmp_path / ".config" / "skillful" / "config.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return path


def test_config_home_uses_xdg(tmp_path: Path) -> None:
    assert config_home() == tmp_path / ".config"


def test_config_home_falls_back_to_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME")

    assert config_home() == tmp_path / ".config"


def test_default_roots_are_global_then_project(tmp_path: Path) -> None:
    project = tmp_path / "project"

    assert default_skill_roots(project) == [
        tmp_path / ".config" / "opencode" / "skills",
        project / ".opencode" / "skills",
    ]


def test_load_defaults_without_config_file(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()

    config = ConfigRepository(project_dir=project).load()

    assert config.debug is False
    assert config.duplicate_policy == DuplicatePolicy.LAST_WINS
    assert config.max_workers == DEFAULT_MAX_WORKERS
    assert config.base_paths == tuple(default_skill_roots(project.resolve()))


def test_load_reads_all_settings(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    _write_config(
        tmp_path,
        {
            "debug": True,
            "basePaths": ["~/shared-skills", "local-skills", "/abs/skills"],
            "duplicatePolicy": "first-wins",
            "maxWorkers": 2,
            "readyTimeout": 1.5,
        },
    )

    config = ConfigRepository(project_dir=project).load()

    assert config.debug is True
    assert config.base_paths == (
        tmp_path / "shared-skills",
        project.resolve() / "local-skills",
        Path("/abs/skills"),
    )
    assert config.duplicate_policy == DuplicatePolicy.FIRST_WINS
    assert config.max_workers == 2
    assert config.ready_timeout == 1.5


def test_single_base_path_string_is_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, {"basePaths": "/only/root"})

    config = ConfigRepository(project_dir=tmp_path).load()

    assert config.base_paths == (Path("/only/root"),)


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "{not json")

    with pytest.raises(InvalidJsonFormatError) as excinfo:
        ConfigRepository(project_dir=tmp_path).load()

    assert excinfo.value.path == path


def test_schema_violation_raises(tmp_path: Path) -> None:
    _write_config(tmp_path, {"duplicatePolicy": "random-wins"})

    with pytest.raises(InvalidConfigSchemaError) as excinfo:
        ConfigRepository(project_dir=tmp_path).load()

    assert "duplicatePolicy" in str(excinfo.value)


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, {"basepaths": ["typo"]})

    with pytest.raises(InvalidConfigSchemaError):
        ConfigRepository(project_dir=tmp_path).load()
