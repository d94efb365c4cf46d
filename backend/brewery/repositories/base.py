"""
Brewery Backend — Generic Async Repository
============================================

What:  CRUD access to one ORM model: find_all, find_by_id, save, delete_by_id, count.
Why:   Services depend on this narrow interface only; the relational engine
       behind it can change without touching business logic.
How:   Constructed with a session factory. Every call runs in its own
       `session_scope()`, so each operation is a single committed unit of
       work and entities come back detached but fully loaded.

Streaming:
    find_all() is an async generator over `AsyncSession.stream_scalars()`.
    Rows are yielded as the driver produces them and the session stays open
    until the consumer finishes (or abandons) the iteration.

Upsert:
    save() uses `session.merge()`: an entity without an id is inserted, an
    entity with an id overwrites the stored row. Timestamps are filled in by
    the model defaults and refreshed from the database before returning.

Error Handling:
    SQLAlchemyError is logged with full context and re-raised as
    DatabaseError (500, generic message to the client).
"""

import logging
from typing import AsyncIterator, Generic, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from brewery.database import Base, session_scope
from brewery.exceptions import DatabaseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyRepository(Generic[ModelT]):
    """Base repository; subclasses set `model`."""

    model: Type[ModelT]

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @property
    def resource(self) -> str:
        return self.model.__tablename__

    async def find_all(self) -> AsyncIterator[ModelT]:
        """Yield every row in primary-key order."""
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.stream_scalars(
                    select(self.model).order_by(self.model.id)
                )
                async for entity in result:
                    yield entity
        except SQLAlchemyError as e:
            raise self._database_error("find_all", e) from e

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        try:
            async with session_scope(self._session_factory) as session:
                return await session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise self._database_error("find_by_id", e, entity_id=entity_id) from e

    async def save(self, entity: ModelT) -> ModelT:
        """Insert or update `entity`; returns the persisted instance."""
        try:
            async with session_scope(self._session_factory) as session:
                persisted = await session.merge(entity)
                await session.flush()
                # Pick up server-side values (id, timestamps) before the session closes
                await session.refresh(persisted)
                return persisted
        except SQLAlchemyError as e:
            raise self._database_error("save", e, entity_id=entity.id) from e

    async def delete_by_id(self, entity_id: int) -> bool:
        """Returns True when a row was removed."""
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(
                    delete(self.model).where(self.model.id == entity_id)
                )
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise self._database_error("delete_by_id", e, entity_id=entity_id) from e

    async def count(self) -> int:
        try:
            async with session_scope(self._session_factory) as session:
                total = await session.scalar(
                    select(func.count()).select_from(self.model)
                )
                return total or 0
        except SQLAlchemyError as e:
            raise self._database_error("count", e) from e

    def _database_error(
        self,
        operation: str,
        error: SQLAlchemyError,
        entity_id: Optional[int] = None,
    ) -> DatabaseError:
        context = {
            "resource": self.resource,
            "operation": operation,
            "error_type": type(error).__name__,
        }
        if entity_id is not None:
            context["entity_id"] = entity_id
        logger.error(
            "Database error during %s.%s: %s", self.resource, operation, str(error),
            exc_info=True,
        )
        return DatabaseError(
            message=f"Could not complete the {self.resource} operation. Please try again.",
            context=context,
        )
