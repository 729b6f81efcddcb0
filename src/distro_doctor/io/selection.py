"""Selection file (init.toml) I/O."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from distro_doctor.errors import ConfigurationError
from distro_doctor.models.module import ModuleKey, normalize_category
from distro_doctor.models.selection import ModuleSelectionEntry, is_valid_category


@dataclass(frozen=True)
class SelectedModule:
    """A (category, name) pair enabled by the user, with its flags."""

    key: ModuleKey
    flags: frozenset[str]


def load_module_selection(selection_path: Path) -> list[SelectedModule]:
    """Load the user's enabled modules from init.toml.

    Modules are returned in file order. A missing [modules] table means no
    modules are enabled.

    Raises:
        ConfigurationError: If the file is absent, is not valid TOML, does not
            match the expected shape, or enables the same module twice
    """
    if not selection_path.exists():
        raise ConfigurationError(f"Module selection file not found: {selection_path}")

    try:
        data = tomllib.loads(selection_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Malformed selection file {selection_path}: {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        raise ConfigurationError(f"Cannot read selection file {selection_path}: {e}") from e

    modules_table = data.get("modules", {})
    if not isinstance(modules_table, dict):
        raise ConfigurationError(f"[modules] must be a table in {selection_path}")

    selected: list[SelectedModule] = []
    seen: set[ModuleKey] = set()

    for raw_category, entries in modules_table.items():
        if not is_valid_category(raw_category):
            raise ConfigurationError(f"Invalid module category {raw_category!r} in {selection_path}")
        if not isinstance(entries, list):
            raise ConfigurationError(
                f"Category {raw_category!r} must list modules as an array in {selection_path}"
            )

        category = normalize_category(raw_category)
        for raw_entry in entries:
            entry = _parse_entry(raw_entry, category, selection_path)
            key = ModuleKey(category=category, name=entry.name)
            if key in seen:
                raise ConfigurationError(f"Module {key} enabled more than once in {selection_path}")
            seen.add(key)
            selected.append(SelectedModule(key=key, flags=frozenset(entry.flags)))

    return selected


def _parse_entry(raw_entry: object, category: str, selection_path: Path) -> ModuleSelectionEntry:
    if isinstance(raw_entry, str):
        raw_entry = {"name": raw_entry}

    try:
        return ModuleSelectionEntry.model_validate(raw_entry)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid module entry under {category} in {selection_path}: {e}"
        ) from e
