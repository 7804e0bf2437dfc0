from skillful.registry.builder import DuplicatePolicy, RegistryBuilder, build_registry
from skillful.registry.diagnostics import RegistryDiagnostics
from skillful.registry.index import SkillIndex
from skillful.registry.readiness import ReadinessGate, ReadyState

__all__ = [
    "DuplicatePolicy",
    "ReadinessGate",
    "ReadyState",
    "RegistryBuilder",
    "RegistryDiagnostics",
    "SkillIndex",
    "build_registry",
]
