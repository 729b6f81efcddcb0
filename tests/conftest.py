"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from distro_doctor.reporting.reporter import DiagnosticReporter
from tests.test_utils.distro_setup import DistroBuilder


@pytest.fixture
def distro(tmp_path: Path) -> DistroBuilder:
    """Create an empty distribution rooted at tmp_path."""
    return DistroBuilder(tmp_path)


@pytest.fixture
def output_lines() -> list[str]:
    """Collects reporter output lines."""
    return []


@pytest.fixture
def reporter(output_lines: list[str]) -> DiagnosticReporter:
    """Create an uncolored reporter writing into output_lines."""
    return DiagnosticReporter(sink=output_lines.append, color=False)
