from sqlalchemy.ext.asyncio import AsyncSession
from marketplace.models.supply_request import ProductSupplyRequest


class SupplyRequestRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, request: ProductSupplyRequest) -> ProductSupplyRequest:
        self.session.add(request)
        await self.session.flush()
        return request
