"""Filesystem collaborators used by the scanner, parser and resource resolver."""

from __future__ import annotations

import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path

from skillful.constants import FALLBACK_MIME_TYPE


_MIME_TYPES: dict[str, str] = {
    # scripts
    ".sh": "application/x-sh",
    ".bash": "application/x-sh",
    ".zsh": "application/x-sh",
    ".py": "text/x-python",
    ".js": "application/javascript",
    ".ts": "application/typescript",
    ".node": "application/javascript",
    # documents
    ".md": "text/markdown",
    ".txt": "text/plain",
    ".pdf": "application/pdf",
    # images
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    # data
    ".json": "application/json",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
    ".xml": "application/xml",
    ".csv": "text/csv",
    ".html": "text/html",
    ".css": "text/css",
}


def detect_mime_type(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in _MIME_TYPES:
        return _MIME_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or FALLBACK_MIME_TYPE


class ISkillFileSystem(ABC):
    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return file contents; raise OSError when missing or unreadable."""

    @abstractmethod
    def find_files(self, directory: Path, filename: str) -> list[Path]:
        """Return every file named ``filename`` below ``directory``.

        An absent directory yields an empty list.
        """

    @abstractmethod
    def list_files(self, directory: Path) -> list[Path]:
        """Return every regular file below ``directory`` (empty if absent)."""

    def detect_mime_type(self, path: Path) -> str:
        return detect_mime_type(path)


class LocalSkillFileSystem(ISkillFileSystem):
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def find_files(self, directory: Path, filename: str) -> list[Path]:
        if not directory.is_dir():
            return []
        return sorted(
            candidate
            for candidate in directory.rglob(filename)
            if candidate.is_file()
        )

    def list_files(self, directory: Path) -> list[Path]:
        if not directory.is_dir():
            return []
        return sorted(child for child in directory.rglob("*") if child.is_file())
