"""Nominal marker base classes for domain models.

`DomainModel` and `ValueObject` are Pydantic-based; `InternalDTO` is a plain
marker mixed into dataclass-based DTOs.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain models."""

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        for attr in ("id", "name", "backup_host"):
            if hasattr(self, attr):
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'
        return f"<{class_name}>"


class ValueObject(DomainModel, ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their values,
    not their identities.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True, frozen=True  # Value objects are immutable
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert this value object to a dictionary."""
        return self.model_dump()


class InternalDTO:
    """Nominal marker for internal dataclass DTOs."""
