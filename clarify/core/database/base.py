"""Declarative base shared by all ORM models."""

import threading
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

_clock_lock = threading.Lock()
_last_timestamp: datetime | None = None


def _utcnow() -> datetime:
    """Current UTC time, strictly increasing within the process.

    Rows created within the same clock tick still get distinct ``created_at``
    values, so reading them back in creation order is exact.
    """
    global _last_timestamp
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_timestamp is not None and now <= _last_timestamp:
            now = _last_timestamp + timedelta(microseconds=1)
        _last_timestamp = now
        return now


class Base(DeclarativeBase):
    """Base model with a UUID primary key and timestamps."""

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )
