"""
roster_admin.db.repositories.employees

Repository for `EmployeeRow` entities.

Responsibilities:
- CRUD over the employees table in insertion order.
- Return `None`/`False` for missing rows; the directory layer decides what that means.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from roster_admin.db.models import EmployeeRow
from roster_admin.directory.models import NewEmployee


class EmployeeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list(self) -> list[EmployeeRow]:
        stmt = select(EmployeeRow).order_by(EmployeeRow.seq)
        return list((await self._session.execute(stmt)).scalars().all())

    async def count(self) -> int:
        stmt = select(func.count()).select_from(EmployeeRow)
        return int((await self._session.execute(stmt)).scalar_one())

    async def get(self, employee_id: str) -> EmployeeRow | None:
        stmt = select(EmployeeRow).where(EmployeeRow.id == employee_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def create(self, data: NewEmployee) -> EmployeeRow:
        # Ids are always assigned here, even if the payload carries one.
        row = EmployeeRow(**data.model_dump(exclude={"id"}))
        self._session.add(row)
        await self._session.flush()
        return row

    async def update(self, employee_id: str, changes: dict[str, str]) -> EmployeeRow | None:
        row = await self.get(employee_id)
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, field, value)
        await self._session.flush()
        return row

    async def delete(self, employee_id: str) -> bool:
        row = await self.get(employee_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        return True
