"""Base model for collection store records.

Every record model inherits from :class:`CartBaseModel` which provides:

* frozen instances, so collections of records can be shared between
  snapshots without defensive copies;
* a ``raw`` dict that captures the original payload.  It is excluded from
  dumps and from equality, so two records with the same fields compare
  equal regardless of where they came from.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CartBaseModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)
    """Original store payload."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # Keep an explicitly passed raw= (e.g. when the caller rewrote fields).
        if "raw" in values:
            return values
        return {**values, "raw": dict(values)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartBaseModel):
            return NotImplemented
        return type(self) is type(other) and self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        # Same fields as __eq__; raw is left out.
        return hash((type(self), tuple(self.model_dump().items())))
