"""Buyer Pydantic schemas."""


from procurement_search.schemas.common import CamelModel

class BuyerOut(CamelModel):
    id: str
    name: str

class BuyersListResponse(CamelModel):
    buyers: list[BuyerOut]
