"""SQLAlchemy ORM models for brewstore SQLite persistence.

Each row is a document: the full entity lives in ``payload`` while ``name``
is copied out so name lookups can use an index.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):  # type: ignore[misc]
    pass


class BeerRecord(Base):
    __tablename__ = "beers"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)


class CustomerRecord(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    payload: Mapped[dict] = mapped_column(JSON, nullable=False)


DocumentRecord = BeerRecord | CustomerRecord

__all__ = ["Base", "BeerRecord", "CustomerRecord", "DocumentRecord"]
