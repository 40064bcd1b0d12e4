"""Record search service — filtered, over-fetched page retrieval.

Rule: No FastAPI here. The router hands over a validated request body and
gets a response model back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from procurement_search.core.config import settings
from procurement_search.core.pagination import PageWindow
from procurement_search.repositories.buyer import BuyerRepository
from procurement_search.repositories.record import ProcurementRecordRepository, RecordRow
from procurement_search.schemas.record import RecordSearchRequest, RecordSearchResponse
from procurement_search.services.filter_compiler import SearchFilter, build_page_query
from procurement_search.services.serializer import RecordSerializer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordPage:
    records: list[RecordRow]
    end_of_results: bool


class RecordSearchService:
    def __init__(self, session: AsyncSession, max_page_size: int | None = None):
        self._records = ProcurementRecordRepository(session)
        self._serializer = RecordSerializer(BuyerRepository(session))
        self._max_page_size = max_page_size or settings.max_page_size

    async def fetch_page(self, search: SearchFilter, offset: int, limit: int) -> RecordPage:
        """Return at most `limit` records at `offset` and whether they are the last ones.

        One extra row is requested; if it comes back there is at least one
        more page.
        """
        window = PageWindow.checked(offset, limit, self._max_page_size)
        rows = await self._records.search(
            build_page_query(search, window.offset, window.fetch_size)
        )
        records, end_of_results = window.split(rows)
        logger.debug(
            "Record page offset=%d limit=%d text=%s buyers=%d -> %d rows (end=%s)",
            window.offset, window.limit, bool(search.search_term),
            len(search.buyer_ids), len(records), end_of_results,
        )
        return RecordPage(records=records, end_of_results=end_of_results)

    async def search(self, request: RecordSearchRequest) -> RecordSearchResponse:
        page = await self.fetch_page(
            SearchFilter.build(request.text_search, request.buyer_ids),
            request.offset,
            request.limit,
        )
        return RecordSearchResponse(
            records=await self._serializer.serialize(page.records),
            end_of_results=page.end_of_results,
        )
