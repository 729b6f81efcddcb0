"""Module manifest (module.yaml) I/O."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from distro_doctor.constants import MODULE_MANIFEST_FILE
from distro_doctor.errors import ConfigurationError
from distro_doctor.models.manifest import ModuleManifest
from distro_doctor.models.module import ModuleMetadata


def load_module_metadata(module_dir: Path) -> ModuleMetadata:
    """Load module.yaml from a module directory.

    Returns empty metadata if the module has no manifest.

    Raises:
        ConfigurationError: If module.yaml exists but cannot be read, parsed
            or validated
    """
    manifest_path = module_dir / MODULE_MANIFEST_FILE
    if not manifest_path.exists():
        return ModuleMetadata()

    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed module manifest {manifest_path}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigurationError(f"Cannot read module manifest {manifest_path}: {e}") from e

    if data is None:
        return ModuleMetadata()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Module manifest {manifest_path} must be a mapping")

    try:
        manifest = ModuleManifest.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid module manifest {manifest_path}: {e}") from e

    return ModuleMetadata(
        description=manifest.description,
        doc_path=module_dir / manifest.doc if manifest.doc else None,
        known_flags=manifest.known_flags,
        deprecated=manifest.deprecated,
    )
