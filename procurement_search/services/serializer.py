"""Record → response DTO conversion with batched buyer prefetch."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from procurement_search.core.exceptions import MissingBuyerError
from procurement_search.domain.buyer import Buyer
from procurement_search.repositories.buyer import BuyerRepository
from procurement_search.repositories.record import RecordRow
from procurement_search.schemas.buyer import BuyerOut
from procurement_search.schemas.record import ProcurementRecordOut, StageInfoOut, ValueOut

logger = logging.getLogger(__name__)


def serialize_record(record: RecordRow, buyers_by_id: Mapping[str, Buyer]) -> ProcurementRecordOut:
    """Build the API shape for one record.

    Assumes every referenced buyer was prefetched into `buyers_by_id`.
    """
    buyer = buyers_by_id.get(record.buyer_id)
    if buyer is None:
        raise MissingBuyerError(record.buyer_id, record.id)

    return ProcurementRecordOut(
        id=record.id,
        title=record.title,
        description=record.description,
        publish_date=record.publish_date,
        buyer=BuyerOut(id=buyer.id, name=buyer.name),
        value=ValueOut(
            amount=float(record.value) if record.value is not None else None,
            currency=record.currency,
        ),
        stage_info=StageInfoOut(
            stage=record.stage,
            close_date=record.close_date,
            award_date=record.award_date,
        ),
    )


class RecordSerializer:
    def __init__(self, buyers: BuyerRepository):
        self._buyers = buyers

    async def serialize(self, records: Sequence[RecordRow]) -> list[ProcurementRecordOut]:
        """Convert a page of records, fetching all their buyers in one query."""
        buyer_ids = list(dict.fromkeys(r.buyer_id for r in records))
        if not buyer_ids:
            return []

        buyers_by_id = {b.id: b for b in await self._buyers.get_by_ids(buyer_ids)}
        try:
            return [serialize_record(r, buyers_by_id) for r in records]
        except MissingBuyerError as exc:
            logger.error(
                "Referential integrity violation: %s (page of %d records aborted)",
                exc.message, len(records),
            )
            raise
