"""Real package index backed by the local package store on disk."""

from pathlib import Path

from distro_doctor.integrations.package_index.abc import PackageIndex


class RealPackageIndex(PackageIndex):
    """Production implementation.

    A package is installed when a directory of the same name exists under
    packages_dir. Built-in names come from configuration.
    """

    def __init__(self, packages_dir: Path, builtin_packages: frozenset[str]) -> None:
        self._packages_dir = packages_dir
        self._builtin_packages = builtin_packages

    def is_builtin(self, name: str) -> bool:
        return name in self._builtin_packages

    def is_installed(self, name: str) -> bool:
        return (self._packages_dir / name).is_dir()
