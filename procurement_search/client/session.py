"""Client-side "load more" pagination over the record search API.

Results accumulate page by page. Changing the filters starts over: the
accumulated records, offset and end flag are reset together and the
generation counter is bumped. A page that was requested under an older
generation (or for an offset that has since moved) is dropped when it
arrives instead of being appended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from procurement_search.client.api import RecordsApiClient
from procurement_search.client.buyer_index import BuyerNameIndex, build_index, resolve
from procurement_search.core.config import settings
from procurement_search.schemas.record import ProcurementRecordOut, RecordSearchRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchFilters:
    text_search: str = ""
    buyer_names: tuple[str, ...] = ()


class RecordSearchSession:
    def __init__(self, api: RecordsApiClient, page_size: int | None = None):
        self._api = api
        self.page_size = page_size or settings.default_page_size
        self.buyer_index: BuyerNameIndex = {}

        self.filters = SearchFilters()
        self.records: list[ProcurementRecordOut] = []
        self.offset = 0
        self.end_of_results = False
        self.generation = 0

    async def load_buyers(self) -> BuyerNameIndex:
        """Fetch the buyer list and (re)build the name index."""
        response = await self._api.get_buyers()
        self.buyer_index = build_index(response.buyers)
        logger.debug(
            "Buyer index built: %d buyers under %d names",
            len(response.buyers), len(self.buyer_index),
        )
        return self.buyer_index

    def change_filters(self, filters: SearchFilters) -> int:
        """Switch to new filters and reset pagination. Returns the new generation."""
        self.filters = filters
        self.records = []
        self.offset = 0
        self.end_of_results = False
        self.generation += 1
        return self.generation

    async def load_more(self) -> bool:
        """Fetch the next page and append it. Returns False if nothing was appended."""
        if self.end_of_results:
            return False

        generation, offset, filters = self.generation, self.offset, self.filters

        buyer_ids = None
        if filters.buyer_names:
            resolved = resolve(self.buyer_index, filters.buyer_names)
            if not resolved:
                # None of the selected buyers exist any more, so nothing matches
                self.end_of_results = True
                return False
            buyer_ids = sorted(resolved)

        response = await self._api.search_records(
            RecordSearchRequest(
                text_search=filters.text_search or None,
                buyer_ids=buyer_ids,
                offset=offset,
                limit=self.page_size,
            )
        )

        if generation != self.generation or offset != self.offset:
            logger.debug(
                "Dropping stale page (generation %d, offset %d); now at generation %d, offset %d",
                generation, offset, self.generation, self.offset,
            )
            return False

        self.records.extend(response.records)
        self.offset += len(response.records)
        self.end_of_results = response.end_of_results
        return True

    async def apply_filters(self, filters: SearchFilters) -> bool:
        self.change_filters(filters)
        return await self.load_more()
