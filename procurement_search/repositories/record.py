"""Procurement record repository.

Search runs the plain SQL produced by the filter compiler. Each raw row is
mapped to a validated :class:`RecordRow` here, so the rest of the code never
touches row objects and a schema drift fails on the first bad row.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ValidationError

from procurement_search.core.exceptions import MalformedRowError
from procurement_search.domain.procurement_record import ProcurementRecord
from procurement_search.repositories.base import BaseRepository
from procurement_search.services.filter_compiler import RECORD_COLUMNS, CompiledQuery


class RecordRow(BaseModel):
    """A procurement record as read from the store."""

    id: str
    title: str
    description: str
    publish_date: date
    buyer_id: str
    value: Decimal | None = None
    currency: str | None = None
    stage: str
    close_date: date | None = None
    award_date: date | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> RecordRow:
        missing = [col for col in RECORD_COLUMNS if col not in row]
        if missing:
            raise MalformedRowError(
                ProcurementRecord.__tablename__, f"missing column(s) {', '.join(missing)}"
            )
        try:
            return cls.model_validate(dict(row))
        except ValidationError as exc:
            raise MalformedRowError(
                ProcurementRecord.__tablename__,
                f"record {row.get('id')!r}: {exc.error_count()} invalid field(s)",
            ) from exc


class ProcurementRecordRepository(BaseRepository[ProcurementRecord]):
    model = ProcurementRecord

    async def search(self, query: CompiledQuery) -> list[RecordRow]:
        result = await self._execute(query.statement(), query.params)
        return [RecordRow.from_mapping(row) for row in result.mappings()]
