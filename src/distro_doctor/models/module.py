"""Module identity and descriptor models."""

from dataclasses import dataclass, field
from pathlib import Path

CATEGORY_MARKER = ":"


def normalize_category(category: str) -> str:
    """Return category with exactly one leading colon (``lang`` -> ``:lang``)."""
    return CATEGORY_MARKER + category.lstrip(CATEGORY_MARKER)


@dataclass(frozen=True, order=True)
class ModuleKey:
    """Unique (category, name) identity of a module."""

    category: str  # Always starts with ":"
    name: str

    def __str__(self) -> str:
        return f"{self.category} {self.name}"

    @property
    def category_dir(self) -> str:
        """Category name as it appears on disk (without the colon)."""
        return self.category.lstrip(CATEGORY_MARKER)


@dataclass(frozen=True)
class ModuleMetadata:
    """Free-form metadata read from a module's module.yaml."""

    description: str | None = None
    doc_path: Path | None = None
    known_flags: frozenset[str] = frozenset()
    deprecated: str | None = None  # Replacement hint when set


@dataclass(frozen=True)
class ModuleDescriptor:
    """An enabled module: identity, enabled flags and metadata."""

    key: ModuleKey
    path: Path
    flags: frozenset[str] = frozenset()
    metadata: ModuleMetadata = field(default_factory=ModuleMetadata)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def unknown_flags(self) -> list[str]:
        """Enabled flags the module does not declare.

        Modules that declare no flags at all are not checked.
        """
        if not self.metadata.known_flags:
            return []
        return sorted(self.flags - self.metadata.known_flags)
