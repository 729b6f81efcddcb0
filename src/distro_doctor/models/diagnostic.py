"""Diagnostic event and run summary models."""

from dataclasses import dataclass
from typing import Literal

from distro_doctor.models.module import ModuleKey
from distro_doctor.models.requirement import RequirementStatus, ResolvedRequirement

Severity = Literal["info", "success", "warning", "error"]


@dataclass(frozen=True)
class DiagnosticEvent:
    """One finding produced during a doctor run."""

    severity: Severity
    message: str
    module_key: ModuleKey | None = None
    package: str | None = None


@dataclass
class RunSummary:
    """Warning and error counters for a single run."""

    warnings: int = 0
    errors: int = 0

    def reset(self) -> None:
        self.warnings = 0
        self.errors = 0

    @property
    def is_clean(self) -> bool:
        return self.warnings == 0 and self.errors == 0


@dataclass(frozen=True)
class ModuleResolution:
    """Everything the resolver found for one module, in discovery order."""

    module_key: ModuleKey
    requirements: tuple[ResolvedRequirement, ...] = ()
    events: tuple[DiagnosticEvent, ...] = ()

    @property
    def missing(self) -> list[str]:
        """Names of requirements classified as missing."""
        return [
            resolved.requirement.name
            for resolved in self.requirements
            if resolved.status == RequirementStatus.MISSING
        ]

    @property
    def outcomes(self) -> list[tuple[str, RequirementStatus]]:
        """(package name, status) pairs in declaration order."""
        return [(r.requirement.name, r.status) for r in self.requirements]
