"""Generic async read-only repository over an injected session."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.engine import Result
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from procurement_search.core.exceptions import StoreUnavailableError
from procurement_search.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """Read-only repository. Records and buyers are never written by the API.

    Connectivity failures surface as StoreUnavailableError; nothing here
    retries.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _execute(self, statement: Any, params: dict[str, Any] | None = None) -> Result:
        try:
            return await self._session.execute(statement, params)
        except (OperationalError, InterfaceError) as exc:
            logger.error("%s query failed: %s", self.model.__tablename__, exc)
            raise StoreUnavailableError() from exc

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_ids(self, entity_ids: Collection[str]) -> list[ModelT]:
        """Fetch every row whose id is in `entity_ids` with a single query."""
        if not entity_ids:
            return []
        result = await self._execute(
            select(self.model).where(self.model.id.in_(list(entity_ids)))
        )
        return list(result.scalars().all())

    async def list_all(self, *order_by: Any) -> list[ModelT]:
        q = select(self.model)
        if order_by:
            q = q.order_by(*order_by)
        result = await self._execute(q)
        return list(result.scalars().all())
