"""Record search Pydantic schemas (request body and denormalized response DTOs)."""


from datetime import date

from pydantic import Field

from procurement_search.schemas.buyer import BuyerOut
from procurement_search.schemas.common import CamelModel

# Largest offset a 64-bit SQL integer can hold
MAX_OFFSET = 2**63 - 1

class RecordSearchRequest(CamelModel):
    """Body of `POST /records-search`.

    Strict and closed: wrong types and unknown keys are rejected with 422
    instead of being coerced. `limit` is range-checked by the search service
    so that it surfaces as a 400.
    """

    text_search: str | None = None
    buyer_ids: list[str] | None = None
    offset: int = Field(ge=0, le=MAX_OFFSET)
    limit: int

    model_config = {"extra": "forbid", "strict": True}

class ValueOut(CamelModel):
    amount: float | None = None
    currency: str | None = None  # ISO code, optionally rate-suffixed: "GBP/day"

class StageInfoOut(CamelModel):
    stage: str
    close_date: date | None = None
    award_date: date | None = None

class ProcurementRecordOut(CamelModel):
    id: str
    title: str
    description: str
    publish_date: date
    buyer: BuyerOut
    value: ValueOut
    stage_info: StageInfoOut

class RecordSearchResponse(CamelModel):
    records: list[ProcurementRecordOut]
    end_of_results: bool = Field(
        description="True when there are no more records past this page.",
    )
