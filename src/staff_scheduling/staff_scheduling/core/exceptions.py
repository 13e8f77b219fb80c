from __future__ import annotations

from typing import Any, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a staff member or record does not exist."""


class InvalidStateError(DomainError):
    """Raised when an action does not fit the current attendance state."""


class StoreError(DomainError):
    """Raised when the record store fails to persist or read data."""


class BatchError(DomainError):
    """Raised when a multi-record creation stops at its first failure.

    Records in ``created`` were already committed and are not rolled back.
    """

    def __init__(self, message: str, *, created: Sequence[Any], failed: Optional[Any], pending: int):
        super().__init__(message)
        self.created = list(created)
        self.failed = failed
        self.pending = int(pending)
