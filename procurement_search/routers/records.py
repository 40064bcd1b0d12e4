"""Record search router — thin HTTP layer.

Business logic lives in :mod:`procurement_search.services.records`. Errors
raised there are AppException subclasses and are rendered by the global
handlers.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from procurement_search.db.base import get_db
from procurement_search.schemas.common import ErrorResponse
from procurement_search.schemas.record import RecordSearchRequest, RecordSearchResponse
from procurement_search.services.records import RecordSearchService

router = APIRouter(prefix="/records-search", tags=["Records"])


@router.post(
    "",
    response_model=RecordSearchResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Limit outside [1, max page size]"},
        500: {"model": ErrorResponse, "description": "Record references an unknown buyer"},
        503: {"model": ErrorResponse, "description": "Store unavailable"},
    },
)
async def search_records(
    body: RecordSearchRequest,
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    """Return one page of matching records and whether it is the last one.

    `endOfResults` is true when there are no more records to fetch after
    this page.
    """
    max_page_size = request.app.state.settings.max_page_size
    return await RecordSearchService(session, max_page_size).search(body)
