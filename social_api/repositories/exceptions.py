"""Failures surfaced by the record store."""

from __future__ import annotations

from typing import Optional


class RepositoryError(RuntimeError):
    """A store call failed; nothing written by earlier calls is rolled back.

    ``collection`` and ``action`` name the call that failed when known, so a
    partially applied multi-record operation can be traced to its last step.
    """

    def __init__(
        self,
        message: str,
        *,
        collection: Optional[str] = None,
        action: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.collection = collection
        self.action = action


class DuplicateKeyRepositoryError(RepositoryError):
    """An insert or update collided with a unique index (e.g. a second profile for a user)."""


class NotFoundRepositoryError(RepositoryError):
    """The referenced record does not exist."""


__all__ = [
    "DuplicateKeyRepositoryError",
    "NotFoundRepositoryError",
    "RepositoryError",
]
