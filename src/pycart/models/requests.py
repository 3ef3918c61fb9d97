"""Pydantic request models for store writes.

These models validate outgoing bodies before anything is sent, so a
zero-quantity line can never reach the store.  Text fields are sent
exactly as the inventory holds them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )


class CreateCartItemRequest(_RequestModel):
    """Body of ``POST /cart``."""

    id: int
    content: str
    amount: int = Field(gt=0)


class UpdateCartItemRequest(_RequestModel):
    """Body of ``PATCH /cart/{id}``; only the amount is sent."""

    amount: int = Field(gt=0)
