from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from marketplace.models.store import Store


class StoreRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[Store]:
        result = await self.session.execute(select(Store).order_by(Store.id))
        return result.scalars().all()

    async def get_by_id(self, store_id: int) -> Optional[Store]:
        result = await self.session.execute(select(Store).filter_by(id=store_id))
        return result.scalars().first()

    async def get_managed(self, store_id: int, manager_id: int) -> Optional[Store]:
        """Магазин с указанным ID, если им управляет данный менеджер"""
        result = await self.session.execute(
            select(Store).filter_by(id=store_id, manager_id=manager_id)
        )
        return result.scalars().first()
