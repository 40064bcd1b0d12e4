"""Buyer listing service."""


from sqlalchemy.ext.asyncio import AsyncSession

from procurement_search.repositories.buyer import BuyerRepository
from procurement_search.schemas.buyer import BuyerOut, BuyersListResponse

class BuyerService:
    def __init__(self, session: AsyncSession):
        self._repo = BuyerRepository(session)

    async def list_buyers(self) -> BuyersListResponse:
        buyers = await self._repo.list_buyers()
        return BuyersListResponse(buyers=[BuyerOut.model_validate(b) for b in buyers])
