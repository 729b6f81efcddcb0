"""I/O operations for distro-doctor."""

from distro_doctor.io.module_manifest import load_module_metadata
from distro_doctor.io.selection import SelectedModule, load_module_selection

__all__ = [
    "SelectedModule",
    "load_module_metadata",
    "load_module_selection",
]
