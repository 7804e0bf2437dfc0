"""Find SKILL.md files below a single root."""

from __future__ import annotations

import logging
from pathlib import Path

from skillful.constants import SKILL_FILENAME
from skillful.skills.filesystem import ISkillFileSystem, LocalSkillFileSystem
from skillful.skills.models import DiscoveredSkillPath

logger = logging.getLogger(__name__)


class SkillScanner:
    def __init__(self, filesystem: ISkillFileSystem | None = None) -> None:
        self._filesystem = filesystem or LocalSkillFileSystem()

    def scan(self, root: Path, priority: int = 0) -> list[DiscoveredSkillPath]:
        """Return every SKILL.md under ``root``.

        A missing or unreadable root is logged and yields an empty list so
        the caller can move on to the next root.
        """
        root = root.expanduser().resolve()
        if not root.exists():
            logger.info("Skill root does not exist, skipping: %s", root)
            return []
        if not root.is_dir():
            logger.warning("Skill root is not a directory, skipping: %s", root)
            return []

        try:
            paths = self._filesystem.find_files(root, SKILL_FILENAME)
        except OSError as exc:
            logger.warning("Skill root is unreadable, skipping: %s (%s)", root, exc)
            return []

        found = [
            DiscoveredSkillPath(root=root, path=path, priority=priority)
            for path in paths
        ]
        found.sort(key=DiscoveredSkillPath.sort_key)
        logger.debug("Found %d skill file(s) under %s", len(found), root)
        return found
