"""
roster_admin.db.models

Persistence schema for the local employee store.

Responsibilities:
- Define the `employees` table.
- Keep a surrogate integer key so listing preserves insertion order.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from roster_admin.db.base import Base
from roster_admin.directory.models import Employee


def _utcnow() -> datetime:
    # Stored naive, in UTC.
    return datetime.now(UTC).replace(tzinfo=None)


def _new_public_id() -> str:
    return str(uuid.uuid4())


class EmployeeRow(Base):
    __tablename__ = "employees"

    # Insertion order; never exposed to clients.
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(64), unique=True, index=True, nullable=False, default=_new_public_id
    )

    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(256), nullable=False)
    position: Mapped[str] = mapped_column(String(256), nullable=False)
    department: Mapped[str] = mapped_column(String(256), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    def to_employee(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            email=self.email,
            position=self.position,
            department=self.department,
        )


# --- Module Notes -----------------------------------------------------------
# Public ids are uuid4 strings assigned here, never by the caller.
