"""Buyer listing router."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from procurement_search.db.base import get_db
from procurement_search.schemas.buyer import BuyersListResponse
from procurement_search.services.buyers import BuyerService

router = APIRouter(prefix="/buyers", tags=["Buyers"])


@router.get("", response_model=BuyersListResponse)
async def list_buyers(session: AsyncSession = Depends(get_db)):
    return await BuyerService(session).list_buyers()
