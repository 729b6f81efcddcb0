"""Fake PackageIndex implementation for testing.

FakePackageIndex answers lookups from sets given at construction and records
every query, so tests can assert on lookup order without touching disk.
"""

from distro_doctor.integrations.package_index.abc import PackageIndex


class FakePackageIndex(PackageIndex):
    """In-memory fake implementation.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        builtin: set[str] | None = None,
        installed: set[str] | None = None,
    ) -> None:
        """Create FakePackageIndex with the given built-in and installed packages."""
        self._builtin = frozenset(builtin or set())
        self._installed = frozenset(installed or set())
        self._lookups: list[str] = []

    @property
    def lookups(self) -> list[str]:
        """Get the package names queried, in query order.

        This property is for test assertions only.
        """
        return self._lookups

    def is_builtin(self, name: str) -> bool:
        self._lookups.append(name)
        return name in self._builtin

    def is_installed(self, name: str) -> bool:
        self._lookups.append(name)
        return name in self._installed
