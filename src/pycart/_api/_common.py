"""Shared response parsing for store endpoints."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from pycart.exceptions import CartResponseError

T = TypeVar("T")


def parse_record(model: type[T], payload: Any, *, endpoint: str) -> T:
    """Validate a single record returned by the store."""
    if not isinstance(payload, dict):
        raise CartResponseError(
            f"{endpoint} returned {type(payload).__name__}, expected an object",
            endpoint=endpoint,
        )
    try:
        return TypeAdapter(model).validate_python(payload)
    except ValidationError as exc:
        raise CartResponseError(f"{endpoint} returned an invalid record: {exc}", endpoint=endpoint) from exc


def parse_collection(model: type[T], payload: Any, *, endpoint: str) -> list[T]:
    """Validate a collection returned by the store."""
    if not isinstance(payload, list):
        raise CartResponseError(
            f"{endpoint} returned {type(payload).__name__}, expected an array",
            endpoint=endpoint,
        )
    try:
        return TypeAdapter(list[model]).validate_python(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise CartResponseError(f"{endpoint} returned an invalid collection: {exc}", endpoint=endpoint) from exc
