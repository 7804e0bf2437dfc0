from skillful.skills.models import (
    DiscoveredSkillPath,
    ResourceKind,
    SkillDefinition,
    SkillResource,
)
from skillful.skills.parser import SkillParser
from skillful.skills.scanner import SkillScanner

__all__ = [
    "DiscoveredSkillPath",
    "ResourceKind",
    "SkillDefinition",
    "SkillParser",
    "SkillResource",
    "SkillScanner",
]
