from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from marketplace.models.product_update import ProductUpdate


class ProductUpdateRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, update: ProductUpdate) -> ProductUpdate:
        self.session.add(update)
        await self.session.flush()
        return update

    async def get_recent(
        self, limit: int, manager_id: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Последние записи журнала изменений; manager_id=None - все записи"""
        query = select(
            ProductUpdate.update_number,
            ProductUpdate.manager_id,
            ProductUpdate.store_id,
            ProductUpdate.product_name,
            ProductUpdate.updated_on,
        )
        if manager_id is not None:
            query = query.where(ProductUpdate.manager_id == manager_id)
        query = query.order_by(ProductUpdate.update_number.desc()).limit(limit)

        result = await self.session.execute(query)
        return [dict(row) for row in result.mappings().all()]
