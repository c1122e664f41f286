"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class StoreUnavailableError(RepositoryError):
    """Raised when the backing store cannot be reached or is locked."""
