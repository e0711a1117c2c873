"""
roster_admin.db.init_db

Schema bootstrap and default roster seeding.

Responsibilities:
- Create tables if they don't exist.
- Seed the default roster into an empty store.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roster_admin.db.base import Base
from roster_admin.db.repositories.employees import EmployeeRepo
from roster_admin.directory.models import NewEmployee
from roster_admin.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_ROSTER: tuple[NewEmployee, ...] = (
    NewEmployee(
        name="Alice Johnson",
        email="alice.johnson@example.com",
        position="Software Engineer",
        department="Engineering",
    ),
    NewEmployee(
        name="Bob Smith",
        email="bob.smith@example.com",
        position="Product Manager",
        department="Product",
    ),
    NewEmployee(
        name="Charlie Brown",
        email="charlie.brown@example.com",
        position="UX Designer",
        department="Design",
    ),
    NewEmployee(
        name="Diana Prince",
        email="diana.prince@example.com",
        position="Data Scientist",
        department="Analytics",
    ),
    NewEmployee(
        name="Ethan Hunt",
        email="ethan.hunt@example.com",
        position="DevOps Engineer",
        department="Operations",
    ),
)


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_default_roster(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """
    Insert `DEFAULT_ROSTER` when the store holds no employees.
    Returns the number of rows inserted (0 for a non-empty store).
    """

    async with session_factory() as session:
        repo = EmployeeRepo(session)
        if await repo.count() > 0:
            return 0
        for data in DEFAULT_ROSTER:
            await repo.create(data)
        await session.commit()
    log.info("roster_seeded", count=len(DEFAULT_ROSTER))
    return len(DEFAULT_ROSTER)


# --- Module Notes -----------------------------------------------------------
# There are no migrations; the local store is a development/mock backend.
