"""Package requirement models."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from distro_doctor.models.module import ModuleDescriptor, ModuleKey

# A requirement predicate receives the owning module and answers yes/no.
RequirementPredicate = Callable[[ModuleDescriptor], bool]


class RequirementStatus(Enum):
    """Outcome of classifying one package requirement."""

    SATISFIED = "satisfied"
    SKIPPED_DISABLED = "skipped-disabled"
    SKIPPED_IGNORED = "skipped-ignored"
    MISSING = "missing"


@dataclass(frozen=True)
class PackageRequirement:
    """A package declared by a module's packages.py."""

    module_key: ModuleKey
    name: str
    disable: bool | RequirementPredicate = False
    ignore: bool | RequirementPredicate = False
    recipe: Mapping[str, Any] | None = None
    pin: str | None = None

    def is_disabled(self, module: ModuleDescriptor) -> bool:
        return _evaluate(self.disable, module)

    def is_ignored(self, module: ModuleDescriptor) -> bool:
        return _evaluate(self.ignore, module)


@dataclass(frozen=True)
class ResolvedRequirement:
    """A requirement together with its computed status."""

    requirement: PackageRequirement
    status: RequirementStatus


def _evaluate(value: bool | RequirementPredicate, module: ModuleDescriptor) -> bool:
    if callable(value):
        return bool(value(module))
    return bool(value)
