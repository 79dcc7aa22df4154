"""Common identifier types shared across models."""

from __future__ import annotations

import uuid
from typing import Annotated, Any

from pydantic.functional_validators import BeforeValidator


def normalize_record_id(value: Any) -> str:
    """Return the canonical string form of a UUID record identifier."""

    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("record id must not be empty")
        try:
            return str(uuid.UUID(text))
        except ValueError as exc:
            raise ValueError(f"invalid record id: {text!r}") from exc
    raise TypeError("record id must be str or UUID instance")


def new_record_id() -> str:
    return str(uuid.uuid4())


RecordId = Annotated[str, BeforeValidator(normalize_record_id)]

__all__ = ["RecordId", "new_record_id", "normalize_record_id"]
