"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``FEATURING_SCOPE``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
