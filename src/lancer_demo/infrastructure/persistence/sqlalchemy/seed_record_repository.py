"""SQLAlchemy implementation of SeedRecordRepository."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lancer.infrastructure.persistence.sqlalchemy import TABLE_MODELS, Database
from lancer_demo.exceptions import PersistenceError
from lancer_demo.repositories import SeedRecordRepository, SeedUnitOfWork

logger = logging.getLogger(__name__)


def _model_for(table: str):
    try:
        return TABLE_MODELS[table]
    except KeyError:
        msg = f"Unknown table: {table}"
        raise ValueError(msg) from None


class SeedRecordRepositorySQLAlchemy(SeedRecordRepository):
    """Batch insert/delete against the marketplace tables."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_many(
        self,
        table: str,
        records: Sequence[dict[str, Any]],
    ) -> list[str]:
        if not records:
            return []

        model = _model_for(table)
        stmt = insert(model).returning(model.id, sort_by_parameter_order=True)
        try:
            result = await self._session.scalars(stmt, list(records))
            ids = list(result.all())
        except SQLAlchemyError as e:
            raise PersistenceError(table, len(records)) from e

        logger.debug("[LIVE] Inserted %d rows into %s", len(ids), table)
        return ids

    async def delete_by_ids(self, table: str, ids: Sequence[str]) -> int:
        if not ids:
            return 0

        model = _model_for(table)
        stmt = (
            delete(model)
            .where(model.id.in_(list(ids)))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(table, len(ids), operation="delete") from e

        logger.debug("[LIVE] Deleted %d rows from %s", result.rowcount, table)
        return result.rowcount


class SeedUnitOfWorkSQLAlchemy(SeedUnitOfWork):
    """One session and one transaction per ``transaction()`` block."""

    def __init__(self, database: Database) -> None:
        self._database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[SeedRecordRepository, None]:
        async with self._database.session() as session, session.begin():
            yield SeedRecordRepositorySQLAlchemy(session)
