"""Shared plumbing for the data-access services."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, TypeVar

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_admin.errors import DataStoreError, RecordNotFoundError
from payroll_admin.models import Base

Clock = Callable[[], datetime]
ModelT = TypeVar("ModelT", bound=Base)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def present(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields so column defaults apply."""
    return {key: value for key, value in values.items() if value is not None}


class BaseService:
    """Base class holding the session and clock for one request."""

    def __init__(self, session: AsyncSession, clock: Clock = utcnow):
        self.session = session
        self.clock = clock

    @asynccontextmanager
    async def translate_errors(self) -> AsyncIterator[None]:
        """Roll back and re-raise SQLAlchemy failures as DataStoreError."""
        try:
            yield
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise DataStoreError.from_exception(exc) from exc

    async def fetch_all(self, query: Select[Any]) -> list[Any]:
        async with self.translate_errors():
            result = await self.session.scalars(query)
            return list(result.all())

    async def fetch_one_or_none(self, query: Select[Any]) -> Any | None:
        async with self.translate_errors():
            result = await self.session.scalars(query)
            return result.one_or_none()

    async def insert(self, record: ModelT) -> ModelT:
        """Insert a record and return it with generated fields loaded."""
        async with self.translate_errors():
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        return record

    async def update_by_id(
        self,
        model: type[ModelT],
        record_id: int,
        values: dict[str, Any],
    ) -> ModelT:
        """Write values to one row as given, None included, and stamp updated_at.

        Raises RecordNotFoundError if no row has that id.
        """
        async with self.translate_errors():
            record = await self.session.get(model, record_id)
            if record is None:
                raise RecordNotFoundError(model.__tablename__, record_id)
            for key, value in values.items():
                setattr(record, key, value)
            record.updated_at = self.clock()
            await self.session.commit()
            await self.session.refresh(record)
        return record
