"""Installed-package index abstraction.

The resolver asks this index whether a package is built into the editor or
already installed. It never mutates the index.
"""

from abc import ABC, abstractmethod


class PackageIndex(ABC):
    """Abstract package lookups for dependency injection."""

    @abstractmethod
    def is_builtin(self, name: str) -> bool:
        """Return True if the package ships with the editor itself.

        Args:
            name: Package name
        """
        ...

    @abstractmethod
    def is_installed(self, name: str) -> bool:
        """Return True if the package is present in the local package store.

        Args:
            name: Package name
        """
        ...
