"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import NewType
from uuid import uuid4

BeerId = NewType("BeerId", str)
CustomerId = NewType("CustomerId", str)


def new_entity_id() -> str:
    """Return a fresh opaque document identifier."""

    return uuid4().hex


__all__ = [
    "BeerId",
    "CustomerId",
    "new_entity_id",
]
