"""Tests for diagnostic models."""

from pathlib import Path

from distro_doctor.models.diagnostic import ModuleResolution, RunSummary
from distro_doctor.models.module import ModuleKey
from distro_doctor.models.requirement import (
    PackageRequirement,
    RequirementStatus,
    ResolvedRequirement,
)


def test_run_summary_reset() -> None:
    """Test that reset clears both counters."""
    summary = RunSummary(warnings=2, errors=3)

    summary.reset()

    assert summary.warnings == 0
    assert summary.errors == 0
    assert summary.is_clean is True


def test_run_summary_not_clean_with_warnings() -> None:
    """Test that any warning makes the summary unclean."""
    assert RunSummary(warnings=1).is_clean is False


def test_module_resolution_missing_and_outcomes() -> None:
    """Test missing names and outcome pairs keep declaration order."""
    key = ModuleKey(":lang", "python")
    resolution = ModuleResolution(
        module_key=key,
        requirements=(
            ResolvedRequirement(PackageRequirement(key, "black"), RequirementStatus.SATISFIED),
            ResolvedRequirement(PackageRequirement(key, "flake8"), RequirementStatus.MISSING),
            ResolvedRequirement(PackageRequirement(key, "pyimport"), RequirementStatus.MISSING),
        ),
    )

    assert resolution.missing == ["flake8", "pyimport"]
    assert resolution.outcomes == [
        ("black", RequirementStatus.SATISFIED),
        ("flake8", RequirementStatus.MISSING),
        ("pyimport", RequirementStatus.MISSING),
    ]


def test_requirement_predicates_receive_module() -> None:
    """Test that callable disable/ignore values are evaluated against the module."""
    from distro_doctor.models.module import ModuleDescriptor

    key = ModuleKey(":lang", "python")
    module = ModuleDescriptor(key=key, path=Path("/fake"), flags=frozenset({"+lsp"}))
    requirement = PackageRequirement(
        key,
        "anaconda-mode",
        disable=lambda m: m.has_flag("+lsp"),
        ignore=lambda m: False,
    )

    assert requirement.is_disabled(module) is True
    assert requirement.is_ignored(module) is False
