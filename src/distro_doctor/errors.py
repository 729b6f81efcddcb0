"""Exception taxonomy for doctor runs.

ConfigurationError is fatal and aborts the run. RequirementLoadError and
SelfCheckError are raised at a single module's boundary and converted into
error events, so the remaining modules are still checked.
"""

from distro_doctor.models.module import ModuleKey


class DoctorError(Exception):
    """Base class for all doctor errors."""


class ConfigurationError(DoctorError):
    """The selection file, config file or a selected module is unusable."""


class ModuleError(DoctorError):
    """Failure confined to one module."""

    def __init__(self, module_key: ModuleKey, detail: str):
        self.module_key = module_key
        self.detail = detail
        super().__init__(f"{module_key}: {detail}")


class RequirementLoadError(ModuleError):
    """The module's packages.py could not be evaluated."""


class SelfCheckError(ModuleError):
    """The module's doctor.py raised while running."""
