"""Doctor configuration data structures and loading.

Provides immutable configuration loaded from <root>/doctor.toml. The file is
optional; every key has a default.
"""

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from distro_doctor.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BUILTIN_PACKAGES,
    DEFAULT_MODULES_DIR,
    DEFAULT_PACKAGES_DIR,
    DEFAULT_SELECTION_FILE,
)
from distro_doctor.errors import ConfigurationError


@dataclass(frozen=True)
class DoctorConfig:
    """Immutable doctor configuration.

    Loaded once at CLI entry point and stored in DoctorContext.
    All paths are absolute.
    """

    root: Path
    selection_path: Path
    modules_dir: Path
    packages_dir: Path
    builtin_packages: frozenset[str]
    jobs: int

    @staticmethod
    def defaults(root: Path) -> "DoctorConfig":
        """Configuration used when no doctor.toml exists."""
        return DoctorConfig(
            root=root,
            selection_path=root / DEFAULT_SELECTION_FILE,
            modules_dir=root / DEFAULT_MODULES_DIR,
            packages_dir=root / DEFAULT_PACKAGES_DIR,
            builtin_packages=DEFAULT_BUILTIN_PACKAGES,
            jobs=1,
        )

    def with_jobs(self, jobs: int) -> "DoctorConfig":
        """Return new config with jobs overridden (maintaining immutability)."""
        if jobs < 1:
            raise ConfigurationError(f"jobs must be at least 1, got {jobs}")
        return replace(self, jobs=jobs)


def load_doctor_config(root: Path) -> DoctorConfig:
    """Load doctor.toml from the distribution root.

    Args:
        root: Distribution root directory

    Returns:
        DoctorConfig with file values applied over defaults

    Raises:
        ConfigurationError: If doctor.toml is malformed or has invalid values
    """
    root = root.expanduser().resolve()
    config = DoctorConfig.defaults(root)

    config_path = root / CONFIG_FILE_NAME
    if not config_path.exists():
        return config

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Malformed {config_path}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    selection_file = _string_value(data, "selection_file", config_path)
    modules_dir = _string_value(data, "modules_dir", config_path)
    packages_dir = _string_value(data, "packages_dir", config_path)

    extra_builtins = data.get("builtin_packages", [])
    if not isinstance(extra_builtins, list) or not all(
        isinstance(name, str) for name in extra_builtins
    ):
        raise ConfigurationError(f"'builtin_packages' must be a list of strings in {config_path}")

    jobs = data.get("jobs", 1)
    if not isinstance(jobs, int) or isinstance(jobs, bool) or jobs < 1:
        raise ConfigurationError(f"'jobs' must be a positive integer in {config_path}")

    return DoctorConfig(
        root=root,
        selection_path=_resolve(root, selection_file) if selection_file else config.selection_path,
        modules_dir=_resolve(root, modules_dir) if modules_dir else config.modules_dir,
        packages_dir=_resolve(root, packages_dir) if packages_dir else config.packages_dir,
        builtin_packages=config.builtin_packages | frozenset(extra_builtins),
        jobs=jobs,
    )


def _string_value(data: dict[str, object], key: str, config_path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"'{key}' must be a non-empty string in {config_path}")
    return value


def _resolve(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return root / path
