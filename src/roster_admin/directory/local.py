"""
roster_admin.directory.local

Local persistent employee directory (SQLite via async SQLAlchemy).

Responsibilities:
- Satisfy the `EmployeeDirectory` contract without any network.
- Issue and validate session tokens (JWT) on behalf of the store.
- Simulate backend latency when configured.
- Seed the default roster into an empty store.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from roster_admin.auth.credentials import CredentialVerifier, FixedCredentialVerifier
from roster_admin.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate, issue_token
from roster_admin.db.init_db import init_db, seed_default_roster
from roster_admin.db.repositories.employees import EmployeeRepo
from roster_admin.db.session import create_engine, create_sessionmaker
from roster_admin.directory.base import require_token
from roster_admin.directory.errors import (
    InvalidCredentials,
    NotFound,
    TransportError,
    Unauthenticated,
)
from roster_admin.directory.models import Employee, NewEmployee
from roster_admin.observability.logging import get_logger
from roster_admin.settings import Settings

log = get_logger(__name__)


class LocalEmployeeDirectory:
    """
    Every operation opens its own session and commits before returning, so
    separate directory instances sharing one database see each other's writes.
    """

    def __init__(
        self,
        *,
        engine: AsyncEngine,
        jwt_cfg: JwtConfig,
        verifier: CredentialVerifier | None = None,
        latency: float = 0.0,
        seed: bool = True,
    ) -> None:
        self._engine = engine
        self._sessions: async_sessionmaker[AsyncSession] = create_sessionmaker(engine)
        self._jwt_cfg = jwt_cfg
        self._verifier = verifier or FixedCredentialVerifier()
        self._latency = latency
        self._seed = seed
        # One shared connection (in-memory SQLite) means one shared transaction;
        # operations must then take turns.
        self._lock = asyncio.Lock() if isinstance(engine.pool, StaticPool) else None

    @classmethod
    def from_settings(cls, settings: Settings) -> LocalEmployeeDirectory:
        return cls(
            engine=create_engine(settings.database_url),
            jwt_cfg=JwtConfig.from_settings(settings),
            verifier=FixedCredentialVerifier(
                username=settings.admin_username, password=settings.admin_password
            ),
            latency=settings.simulated_latency_ms / 1000,
            seed=settings.seed_on_init,
        )

    async def initialize(self) -> None:
        try:
            await init_db(self._engine)
            if self._seed:
                await seed_default_roster(self._sessions)
        except SQLAlchemyError as e:
            raise TransportError(f"Could not open the employee store: {e}") from e

    async def aclose(self) -> None:
        await self._engine.dispose()

    async def ping(self) -> None:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise TransportError(f"Employee store unavailable: {e}") from e

    async def authenticate(self, username: str, password: str) -> str:
        await self._simulate_latency()
        if not self._verifier.verify(username, password):
            log.info("login_rejected", username=username)
            raise InvalidCredentials()
        return issue_token(cfg=self._jwt_cfg, subject=username)

    async def list(self, token: str | None) -> list[Employee]:
        self._check_token(token)
        await self._simulate_latency()
        try:
            async with self._session() as session:
                rows = await EmployeeRepo(session).list()
                return [row.to_employee() for row in rows]
        except SQLAlchemyError as e:
            raise TransportError(f"Failed to load employees: {e}") from e

    async def create(self, token: str | None, data: NewEmployee) -> Employee:
        self._check_token(token)
        await self._simulate_latency()
        try:
            async with self._session() as session:
                row = await EmployeeRepo(session).create(data)
                await session.commit()
                created = row.to_employee()
        except SQLAlchemyError as e:
            raise TransportError(f"Failed to add employee: {e}") from e
        log.info("employee_created", employee_id=created.id)
        return created

    async def update(
        self, token: str | None, employee_id: str, data: NewEmployee | Employee
    ) -> Employee:
        self._check_token(token)
        await self._simulate_latency()
        # Field-level merge; the record id is never taken from the payload.
        changes = data.model_dump(exclude={"id"}, exclude_unset=True)
        try:
            async with self._session() as session:
                row = await EmployeeRepo(session).update(employee_id, changes)
                if row is None:
                    raise NotFound()
                await session.commit()
                updated = row.to_employee()
        except SQLAlchemyError as e:
            raise TransportError(f"Failed to update employee: {e}") from e
        log.info("employee_updated", employee_id=employee_id)
        return updated

    async def delete(self, token: str | None, employee_id: str) -> None:
        self._check_token(token)
        await self._simulate_latency()
        try:
            async with self._session() as session:
                if not await EmployeeRepo(session).delete(employee_id):
                    raise NotFound()
                await session.commit()
        except SQLAlchemyError as e:
            raise TransportError(f"Failed to delete employee: {e}") from e
        log.info("employee_deleted", employee_id=employee_id)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        if self._lock is None:
            async with self._sessions() as session:
                yield session
            return
        async with self._lock, self._sessions() as session:
            yield session

    def _check_token(self, token: str | None) -> None:
        try:
            decode_and_validate(cfg=self._jwt_cfg, token=require_token(token))
        except JwtValidationError as e:
            raise Unauthenticated(f"Session expired or invalid: {e}") from e

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)


# --- Module Notes -----------------------------------------------------------
# The dev server (`roster_admin.devserver`) exposes this class over HTTP, which is
# how `HttpEmployeeDirectory` is exercised end-to-end in tests.
