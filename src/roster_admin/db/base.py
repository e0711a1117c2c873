"""
roster_admin.db.base

SQLAlchemy declarative base for the local employee store.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
