"""Errors raised by the service layer."""

from __future__ import annotations

from typing import Any

from ..models.identifiers import normalize_record_id


class InvalidOperationError(ValueError):
    """Raised for semantically invalid requests against otherwise valid records."""


def require_record_id(value: Any, label: str = "id") -> str:
    """Normalize ``value`` as a record id or raise ``InvalidOperationError``."""

    try:
        return normalize_record_id(value)
    except (TypeError, ValueError) as exc:
        raise InvalidOperationError(f"malformed {label}") from exc


__all__ = ["InvalidOperationError", "require_record_id"]
