"""Tests for doctor.toml loading."""

from pathlib import Path

import pytest

from distro_doctor.config import DoctorConfig, load_doctor_config
from distro_doctor.constants import DEFAULT_BUILTIN_PACKAGES
from distro_doctor.errors import ConfigurationError


def test_defaults_without_config_file(tmp_path: Path) -> None:
    """Test that a root without doctor.toml uses defaults."""
    config = load_doctor_config(tmp_path)
    root = tmp_path.resolve()

    assert config.root == root
    assert config.selection_path == root / "init.toml"
    assert config.modules_dir == root / "modules"
    assert config.packages_dir == root / ".local" / "packages"
    assert config.builtin_packages == DEFAULT_BUILTIN_PACKAGES
    assert config.jobs == 1


def test_config_file_overrides(tmp_path: Path) -> None:
    """Test that file values replace defaults and resolve against the root."""
    (tmp_path / "doctor.toml").write_text(
        'selection_file = "my-init.toml"\n'
        'modules_dir = "catalog"\n'
        'packages_dir = "/opt/packages"\n'
        'builtin_packages = ["my-builtin"]\n'
        "jobs = 4\n",
        encoding="utf-8",
    )

    config = load_doctor_config(tmp_path)
    root = tmp_path.resolve()

    assert config.selection_path == root / "my-init.toml"
    assert config.modules_dir == root / "catalog"
    assert config.packages_dir == Path("/opt/packages")
    assert "my-builtin" in config.builtin_packages
    assert "org" in config.builtin_packages
    assert config.jobs == 4


def test_malformed_config_file(tmp_path: Path) -> None:
    """Test that TOML syntax errors are configuration errors."""
    (tmp_path / "doctor.toml").write_text("jobs = \n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Malformed"):
        load_doctor_config(tmp_path)


@pytest.mark.parametrize("value", ["0", "-2", '"four"', "true"])
def test_invalid_jobs(tmp_path: Path, value: str) -> None:
    """Test that jobs must be a positive integer."""
    (tmp_path / "doctor.toml").write_text(f"jobs = {value}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="'jobs'"):
        load_doctor_config(tmp_path)


def test_invalid_builtin_packages(tmp_path: Path) -> None:
    """Test that builtin_packages must be a list of strings."""
    (tmp_path / "doctor.toml").write_text("builtin_packages = [1, 2]\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="builtin_packages"):
        load_doctor_config(tmp_path)


def test_with_jobs_rejects_zero() -> None:
    """Test that the jobs override is validated."""
    config = DoctorConfig.defaults(Path("/fake/distro"))

    with pytest.raises(ConfigurationError):
        config.with_jobs(0)

    assert config.with_jobs(3).jobs == 3


def test_config_file_not_utf8(tmp_path: Path) -> None:
    """Test that undecodable bytes in doctor.toml are configuration errors."""
    (tmp_path / "doctor.toml").write_bytes(b'modules_dir = "\xff"\n')

    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_doctor_config(tmp_path)


def test_config_path_is_directory(tmp_path: Path) -> None:
    """Test that a directory named doctor.toml is a configuration error."""
    (tmp_path / "doctor.toml").mkdir()

    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_doctor_config(tmp_path)
