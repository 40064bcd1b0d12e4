"""Tests for record serialization and the batched buyer prefetch."""

from datetime import date
from decimal import Decimal

import pytest

from procurement_search.core.exceptions import MissingBuyerError
from procurement_search.domain import Buyer
from procurement_search.repositories.record import RecordRow
from procurement_search.services.serializer import RecordSerializer


class RecordingBuyers:
    """Buyer repository double that remembers every batch it was asked for."""

    def __init__(self, buyers):
        self._buyers = {b.id: b for b in buyers}
        self.calls = []

    async def get_by_ids(self, ids):
        self.calls.append(list(ids))
        return [self._buyers[i] for i in ids if i in self._buyers]


def row(record_id, buyer_id, **overrides):
    fields = dict(
        id=record_id,
        title=f"Notice {record_id}",
        description="",
        publish_date=date(2024, 1, 10),
        buyer_id=buyer_id,
        value=Decimal("100"),
        currency="USD/hour",
        stage="TENDER",
        close_date=date(2024, 2, 1),
    )
    fields.update(overrides)
    return RecordRow(**fields)


async def test_buyers_fetched_once_per_page():
    buyers = RecordingBuyers([Buyer(id="b1", name="Acme"), Buyer(id="b2", name="Acme")])
    serializer = RecordSerializer(buyers)

    dtos = await serializer.serialize([row("r1", "b1"), row("r2", "b2"), row("r3", "b1")])

    assert buyers.calls == [["b1", "b2"]]
    assert [(d.id, d.buyer.id, d.buyer.name) for d in dtos] == [
        ("r1", "b1", "Acme"),
        ("r2", "b2", "Acme"),
        ("r3", "b1", "Acme"),
    ]


async def test_empty_page_skips_buyer_lookup():
    buyers = RecordingBuyers([])
    assert await RecordSerializer(buyers).serialize([]) == []
    assert buyers.calls == []


async def test_missing_buyer_aborts_the_page():
    buyers = RecordingBuyers([Buyer(id="b1", name="Acme")])

    with pytest.raises(MissingBuyerError) as excinfo:
        await RecordSerializer(buyers).serialize([row("r1", "b1"), row("r2", "ghost")])

    assert excinfo.value.buyer_id == "ghost"
    assert excinfo.value.record_id == "r2"
    assert excinfo.value.status_code == 500


async def test_value_and_stage_pass_through_verbatim():
    buyers = RecordingBuyers([Buyer(id="b1", name="Acme")])
    [dto] = await RecordSerializer(buyers).serialize(
        [row("r1", "b1", stage="TenderIntent", value=None, currency=None, close_date=None)]
    )

    assert dto.stage_info.stage == "TenderIntent"
    assert dto.stage_info.close_date is None
    assert dto.value.amount is None
    assert dto.value.currency is None


async def test_dto_uses_camel_case_on_the_wire():
    buyers = RecordingBuyers([Buyer(id="b1", name="Acme")])
    [dto] = await RecordSerializer(buyers).serialize([row("r1", "b1")])

    wire = dto.model_dump(mode="json", by_alias=True, exclude_none=True)
    assert wire == {
        "id": "r1",
        "title": "Notice r1",
        "description": "",
        "publishDate": "2024-01-10",
        "buyer": {"id": "b1", "name": "Acme"},
        "value": {"amount": 100.0, "currency": "USD/hour"},
        "stageInfo": {"stage": "TENDER", "closeDate": "2024-02-01"},
    }
