"""Buyer repository."""


from procurement_search.domain.buyer import Buyer
from procurement_search.repositories.base import BaseRepository


class BuyerRepository(BaseRepository[Buyer]):
    model = Buyer

    async def list_buyers(self) -> list[Buyer]:
        """All buyers, ordered by name then id so equal names stay stable."""
        return await self.list_all(Buyer.name, Buyer.id)
