"""Derive skill identifiers and display names from paths."""

from __future__ import annotations

from pathlib import PurePath

from skillful.constants import SKILL_FILENAME


def skill_identifier(relative_path: PurePath | str) -> str:
    """Build the index key from a SKILL.md path relative to its root.

    Examples:
        brand-guidelines/SKILL.md           -> brand_guidelines
        document-skills/docx/SKILL.md       -> document_skills_docx
        Tools/Image-Processing/SKILL.md     -> Tools_Image_Processing
    """
    path = PurePath(relative_path)
    parts = path.parts
    if parts and parts[-1] == SKILL_FILENAME:
        parts = parts[:-1]
    segments = [part for part in parts if part and part not in ("/", ".")]
    return "_".join(segments).replace("-", "_")


def display_name(skill_file: PurePath) -> str:
    return skill_file.parent.name
