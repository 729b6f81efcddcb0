"""Selection file entry model."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

_IDENTIFIER_PATTERN = r"^[a-z0-9][a-z0-9+._-]*$"


class ModuleSelectionEntry(BaseModel):
    """One module listed under a category in init.toml.

    Accepts either a bare name (``"modeline"``) or a table
    (``{ name = "python", flags = ["+lsp"] }``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    flags: tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate module name is a lowercase identifier."""
        if not re.match(_IDENTIFIER_PATTERN, v):
            msg = f"Invalid module name: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate every flag is prefixed with + or -."""
        for flag in v:
            if len(flag) < 2 or flag[0] not in "+-":
                msg = f"Invalid module flag: {flag!r} (flags start with '+' or '-')"
                raise ValueError(msg)
        return v


def is_valid_category(category: str) -> bool:
    """Return True if category (with or without colon) is a usable identifier."""
    return re.match(_IDENTIFIER_PATTERN, category.lstrip(":")) is not None
