"""Module registry loading."""

import logging

from distro_doctor.config import DoctorConfig
from distro_doctor.errors import ConfigurationError
from distro_doctor.io import load_module_metadata, load_module_selection
from distro_doctor.models.module import ModuleDescriptor, ModuleKey

logger = logging.getLogger(__name__)


def load_registry(config: DoctorConfig) -> dict[ModuleKey, ModuleDescriptor]:
    """Build the registry of enabled modules.

    Only modules listed in the selection file are included; the modules
    directory is never scanned for others. Iteration order follows the
    selection file.

    Args:
        config: Loaded doctor configuration

    Returns:
        Mapping of ModuleKey to ModuleDescriptor

    Raises:
        ConfigurationError: If the selection file is absent or malformed, or a
            selected module's directory does not exist. No partial registry is
            returned.
    """
    selected = load_module_selection(config.selection_path)
    logger.debug("Selection file enables %d module(s)", len(selected))

    registry: dict[ModuleKey, ModuleDescriptor] = {}
    for selection in selected:
        module_dir = config.modules_dir / selection.key.category_dir / selection.key.name
        if not module_dir.is_dir():
            raise ConfigurationError(
                f"Module {selection.key} is enabled but {module_dir} does not exist"
            )

        registry[selection.key] = ModuleDescriptor(
            key=selection.key,
            path=module_dir,
            flags=selection.flags,
            metadata=load_module_metadata(module_dir),
        )

    return registry
