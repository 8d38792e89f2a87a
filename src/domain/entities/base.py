"""Base entity shared by every persisted record."""

from dataclasses import dataclass, fields
from typing import Any, Optional


IDENTITY_FIELDS = ("id", "version")


@dataclass(frozen=True, kw_only=True)
class Entity:
    """
    Immutable record with an identity assigned by a repository.

    Attributes:
        id: Identifier, None until the entity has been stored
        version: Recorded version, 0 until stored, bumped on every update
    """

    id: Optional[int] = None
    version: int = 0

    def field_values(self) -> dict[str, Any]:
        """Named scalar fields, excluding identity bookkeeping."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in IDENTITY_FIELDS
        }
