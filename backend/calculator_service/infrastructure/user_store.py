"""User Store — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - Every SQLAlchemyError is logged with detail and re-raised as StoreError
    - update_by_id returns 0 when the record is absent OR the submitted values equal
      the stored ones (modified-count semantics, kept deliberately)
    - delete_by_id returns the number of rows removed (0 or 1)

Design Decisions:
    - Error mapping here instead of in each route: routes stay free of try/except
    - Read-compare-write for update: gives a true modified count on every backend
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from calculator_service.core.domain_types import UserId
from calculator_service.core.errors import StoreError
from calculator_service.infrastructure.database import get_db
from calculator_service.models.user import User

logger = logging.getLogger(__name__)

_FIELDS = ("name", "email", "age")


class SqlUserRepository:
    """UserRepository backed by an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _store_call(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                f"Store {operation} failed: {e}",
                extra={"store_operation": operation},
            )
            raise StoreError(operation, type(e).__name__) from e

    async def insert(self, record: dict) -> UserId:
        async with self._store_call("insert"):
            user = User(**{k: record.get(k) for k in _FIELDS})
            self._session.add(user)
            await self._session.commit()
            await self._session.refresh(user)
        return UserId(user.id)

    async def find_by_id(self, user_id: UserId) -> dict | None:
        async with self._store_call("find"):
            result = await self._session.execute(
                select(User).where(User.id == user_id),
            )
            user = result.scalar_one_or_none()
        return user.to_record() if user else None

    async def update_by_id(self, user_id: UserId, fields: dict) -> int:
        async with self._store_call("update"):
            result = await self._session.execute(
                select(User).where(User.id == user_id),
            )
            user = result.scalar_one_or_none()
            if user is None:
                return 0
            changed = False
            for key in _FIELDS:
                value = fields.get(key)
                if getattr(user, key) != value:
                    setattr(user, key, value)
                    changed = True
            if not changed:
                return 0
            await self._session.commit()
        return 1

    async def delete_by_id(self, user_id: UserId) -> int:
        async with self._store_call("delete"):
            result = await self._session.execute(
                delete(User).where(User.id == user_id),
            )
            await self._session.commit()
        return result.rowcount


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlUserRepository:
    """FastAPI dependency — one repository per request session."""
    return SqlUserRepository(db)
