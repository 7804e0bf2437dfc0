from pathlib import Path

from skillful.skills.scanner import SkillScanner


def test_scan_finds_skill_files_recursively(skills_root: Path, write_skill) -> None:
    write_skill(skills_root, "alpha")
    write_skill(skills_root, "group/beta")
    (skills_root / "notes").mkdir()
    (skills_root / "notes" / "README.md").write_text("not a skill", encoding="utf-8")

    found = SkillScanner().scan(skills_root, priority=3)

    relative = [item.relative_path.as_posix() for item in found]
    assert relative == ["alpha/SKILL.md", "group/beta/SKILL.md"]
    assert all(item.priority == 3 for item in found)
    assert all(item.root == skills_root.resolve() for item in found)


def test_scan_missing_root_returns_empty(tmp_path: Path) -> None:
    assert SkillScanner().scan(tmp_path / "does-not-exist") == []


def test_scan_file_root_returns_empty(tmp_path: Path) -> None:
    file_root = tmp_path / "file.txt"
    file_root.write_text("x", encoding="utf-8")

    assert SkillScanner().scan(file_root) == []


def test_scan_ignores_similarly_named_files(skills_root: Path) -> None:
    skill_dir = skills_root / "gamma"
    skill_dir.mkdir()
    (skill_dir / "skill.md").write_text("lowercase", encoding="utf-8")
    (skill_dir / "SKILL.md.bak").write_text("backup", encoding="utf-8")

    assert SkillScanner().scan(skills_root) == []
