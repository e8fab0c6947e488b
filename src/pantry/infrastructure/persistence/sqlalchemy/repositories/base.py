"""Statement execution shared by the SQLAlchemy repositories."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any, ClassVar

from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.expression import Executable

from pantry.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)


class SQLAlchemyRepositoryBase:
    """Runs single statements against a shared engine.

    Every call borrows one pooled connection for one statement, commits,
    and hands the connection back. Driver failures are translated into the
    domain's repository errors; nothing is retried.
    """

    entity_name: ClassVar[str]
    not_found_error: ClassVar[Callable[[object], EntityNotFoundError]]

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def _fetch_one(self, stmt: Executable, entity_id: object) -> RowMapping:
        with self._translate_errors(entity_id):
            async with self._engine.connect() as conn:
                result = await conn.execute(stmt)
                row = result.mappings().one_or_none()

        if row is None:
            raise self.not_found_error(entity_id)
        return row

    async def _fetch_all(
        self,
        stmt: Executable,
        owner_id: object,
    ) -> Sequence[RowMapping]:
        with self._translate_errors(owner_id):
            async with self._engine.connect() as conn:
                result = await conn.execute(stmt)
                return result.mappings().all()

    async def _write(
        self,
        stmt: Executable,
        entity_id: object,
        require_match: bool = True,
    ) -> int:
        """Execute a write in its own transaction and return affected rows.

        With ``require_match`` a write that touched no row raises the
        entity's not-found error.
        """
        with self._translate_errors(entity_id):
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
                affected = result.rowcount

        if require_match and affected == 0:
            raise self.not_found_error(entity_id)
        return affected

    @contextmanager
    def _translate_errors(self, entity_id: object) -> Iterator[None]:
        details: dict[str, Any] = {"entity": self.entity_name, "id": str(entity_id)}
        try:
            yield
        except IntegrityError as e:
            logger.warning(
                "Constraint violation on %s %s: %s",
                self.entity_name,
                entity_id,
                e.orig,
            )
            msg = f"Conflicting {self.entity_name}: {entity_id}"
            raise ConflictError(msg, details=details) from e
        except (SQLAlchemyError, OSError) as e:
            logger.warning(
                "Storage failure on %s %s: %s", self.entity_name, entity_id, e
            )
            raise StorageUnavailableError(details=details) from e
