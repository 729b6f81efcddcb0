"""Tests for module identity and descriptor models."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from distro_doctor.models.module import (
    ModuleDescriptor,
    ModuleKey,
    ModuleMetadata,
    normalize_category,
)


def test_normalize_category_adds_colon() -> None:
    """Test that bare category names gain a leading colon."""
    assert normalize_category("lang") == ":lang"


def test_normalize_category_keeps_single_colon() -> None:
    """Test that an existing colon is not doubled."""
    assert normalize_category(":lang") == ":lang"
    assert normalize_category("::lang") == ":lang"


def test_module_key_str() -> None:
    """Test that module keys render as 'category name'."""
    assert str(ModuleKey(":lang", "python")) == ":lang python"


def test_module_key_category_dir() -> None:
    """Test that the on-disk category drops the colon."""
    assert ModuleKey(":lang", "python").category_dir == "lang"


def test_module_key_is_frozen() -> None:
    """Test that module keys are immutable."""
    key = ModuleKey(":lang", "python")

    with pytest.raises(FrozenInstanceError):
        key.name = "rust"  # type: ignore[misc]


def test_unknown_flags_reports_undeclared_flags() -> None:
    """Test that flags missing from the manifest are reported sorted."""
    module = ModuleDescriptor(
        key=ModuleKey(":lang", "python"),
        path=Path("/fake/modules/lang/python"),
        flags=frozenset({"+lsp", "+tree-sitter", "+pyright"}),
        metadata=ModuleMetadata(known_flags=frozenset({"+lsp"})),
    )

    assert module.unknown_flags() == ["+pyright", "+tree-sitter"]


def test_unknown_flags_skipped_when_manifest_declares_none() -> None:
    """Test that modules without declared flags accept any flag."""
    module = ModuleDescriptor(
        key=ModuleKey(":lang", "python"),
        path=Path("/fake/modules/lang/python"),
        flags=frozenset({"+anything"}),
    )

    assert module.unknown_flags() == []


def test_has_flag() -> None:
    """Test flag membership."""
    module = ModuleDescriptor(
        key=ModuleKey(":editor", "evil"),
        path=Path("/fake/modules/editor/evil"),
        flags=frozenset({"+everywhere"}),
    )

    assert module.has_flag("+everywhere") is True
    assert module.has_flag("+nowhere") is False
