"""
SQLAlchemy Base Model.

Base class for all database models with common fields and utilities.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from webcalendar.backend.core.utils import utc_now


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class IntegerIdMixin:
    """Mixin that adds a surrogate integer primary key generated on insert."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class CreatedAtMixin:
    """Mixin that stamps created_at once, when the row is first inserted."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """
    Mixin that adds created_at and updated_at timestamps.

    updated_at has no insert default: it stays NULL until the first
    UPDATE of the row, and is restamped on every UPDATE after that.
    """

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        onupdate=utc_now,
        nullable=True,
    )
