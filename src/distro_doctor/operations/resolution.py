"""Package requirement resolution for enabled modules."""

import logging

from distro_doctor.errors import ModuleError, RequirementLoadError
from distro_doctor.integrations.package_index.abc import PackageIndex
from distro_doctor.io.module_files import SelfCheckScope, load_requirements, run_self_check
from distro_doctor.models.diagnostic import DiagnosticEvent, ModuleResolution
from distro_doctor.models.module import ModuleDescriptor
from distro_doctor.models.requirement import (
    PackageRequirement,
    RequirementStatus,
    ResolvedRequirement,
)

logger = logging.getLogger(__name__)


def classify_requirement(
    requirement: PackageRequirement,
    module: ModuleDescriptor,
    package_index: PackageIndex,
) -> RequirementStatus:
    """Classify one requirement. The first matching rule wins.

    1. disabled -> SKIPPED_DISABLED
    2. ignored -> SKIPPED_IGNORED
    3. built into the editor -> SATISFIED
    4. installed -> SATISFIED
    5. otherwise -> MISSING

    The package index is not consulted for disabled or ignored requirements.
    """
    if requirement.is_disabled(module):
        return RequirementStatus.SKIPPED_DISABLED
    if requirement.is_ignored(module):
        return RequirementStatus.SKIPPED_IGNORED
    if package_index.is_builtin(requirement.name):
        return RequirementStatus.SATISFIED
    if package_index.is_installed(requirement.name):
        return RequirementStatus.SATISFIED
    return RequirementStatus.MISSING


class RequirementResolver:
    """Resolves package requirements and self-checks one module at a time.

    Each call to resolve_module is independent of every other call, so modules
    may be resolved concurrently.
    """

    def __init__(self, package_index: PackageIndex, *, verbose: bool = False) -> None:
        self._package_index = package_index
        self._verbose = verbose

    def resolve_module(self, module: ModuleDescriptor) -> ModuleResolution:
        """Resolve a single module.

        Failures in the module's own files are converted into error events;
        this method only raises for bugs in the doctor itself.
        """
        events = _metadata_events(module)
        resolved: list[ResolvedRequirement] = []

        try:
            resolved = self._resolve_requirements(module)
        except ModuleError as e:
            events.append(_module_error_event(e))
        else:
            events.extend(
                DiagnosticEvent(
                    severity="error",
                    message=f"{item.requirement.name} is not installed",
                    module_key=module.key,
                    package=item.requirement.name,
                )
                for item in resolved
                if item.status == RequirementStatus.MISSING
            )

        scope = SelfCheckScope(module, self._package_index, packages=tuple(resolved))
        try:
            run_self_check(module, scope, verbose=self._verbose)
        except ModuleError as e:
            events.extend(scope.events)
            events.append(_module_error_event(e))
        else:
            events.extend(scope.events)

        return ModuleResolution(
            module_key=module.key,
            requirements=tuple(resolved),
            events=tuple(events),
        )

    def _resolve_requirements(self, module: ModuleDescriptor) -> list[ResolvedRequirement]:
        resolved: list[ResolvedRequirement] = []
        for requirement in load_requirements(module, verbose=self._verbose):
            try:
                status = classify_requirement(requirement, module, self._package_index)
            except Exception as e:
                raise RequirementLoadError(
                    module.key,
                    f"predicate for package {requirement.name} raised {type(e).__name__}: {e}",
                ) from e
            logger.debug("%s: %s -> %s", module.key, requirement.name, status.value)
            resolved.append(ResolvedRequirement(requirement=requirement, status=status))
        return resolved


def _metadata_events(module: ModuleDescriptor) -> list[DiagnosticEvent]:
    events: list[DiagnosticEvent] = []
    if module.metadata.deprecated:
        events.append(
            DiagnosticEvent(
                severity="warning",
                message=f"{module.key} is deprecated: {module.metadata.deprecated}",
                module_key=module.key,
            )
        )
    for flag in module.unknown_flags():
        events.append(
            DiagnosticEvent(
                severity="warning",
                message=f"Unknown flag {flag} for {module.key}",
                module_key=module.key,
            )
        )
    return events


def _module_error_event(error: ModuleError) -> DiagnosticEvent:
    return DiagnosticEvent(
        severity="error",
        message=f"Error in {error.module_key}: {error.detail}",
        module_key=error.module_key,
    )
