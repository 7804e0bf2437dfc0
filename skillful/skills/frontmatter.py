"""Split YAML frontmatter from markdown content."""

from __future__ import annotations

import re
from typing import Any

import yaml

_FRONTMATTER_RE = re.compile(
    r"^---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|$)", re.DOTALL
)


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Return ``(yaml_block, body)``.

    ``yaml_block`` is ``None`` when the text does not start with a ``---``
    delimited block; the body is then the whole text.
    """
    text = text.lstrip("\ufeff")
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return None, text
    return match.group(1) or "", text[match.end() :]


def parse_frontmatter(text: str) -> tuple[Any, str]:
    """Return ``(frontmatter, body)``; raises ``yaml.YAMLError`` on bad YAML.

    Frontmatter is ``None`` when absent, ``{}`` for a block with no content,
    and whatever ``safe_load`` produced otherwise, which is not necessarily
    a mapping.
    """
    block, body = split_frontmatter(text)
    if block is None:
        return None, body
    loaded = yaml.safe_load(block)
    return ({} if loaded is None else loaded), body
