"""Module manifest (module.yaml) model."""

from pydantic import BaseModel, ConfigDict


class ModuleManifest(BaseModel):
    """Validated contents of a module's module.yaml.

    ``flags`` may be a list of flag names or a mapping of flag name to a
    short description.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str | None = None
    doc: str | None = None
    deprecated: str | None = None
    flags: list[str] | dict[str, str | None] | None = None

    @property
    def known_flags(self) -> frozenset[str]:
        if self.flags is None:
            return frozenset()
        return frozenset(self.flags)
