from typing import Any, Dict, List, Optional
from sqlalchemy import func, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from marketplace.models.order import Order
from marketplace.models.store import Store
from marketplace.models.user import User

ORDER_COLUMNS = (
    Order.order_number,
    Order.customer_id,
    Order.store_id,
    Order.product_name,
    Order.units_ordered,
    Order.order_time,
)


class OrderRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, order: Order) -> Order:
        self.session.add(order)
        await self.session.flush()
        return order

    async def _fetch(self, query) -> List[Dict[str, Any]]:
        result = await self.session.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def get_recent_all(self, limit: int) -> List[Dict[str, Any]]:
        return await self._fetch(
            select(*ORDER_COLUMNS).order_by(Order.order_number.desc()).limit(limit)
        )

    async def get_recent_by_customer(
        self, customer_id: int, limit: int
    ) -> List[Dict[str, Any]]:
        return await self._fetch(
            select(*ORDER_COLUMNS)
            .where(Order.customer_id == customer_id)
            .order_by(Order.order_number.desc())
            .limit(limit)
        )

    async def get_recent_by_manager(
        self, manager_id: int, limit: int
    ) -> List[Dict[str, Any]]:
        """Последние заказы в магазинах менеджера вместе с именем покупателя"""
        return await self._fetch(
            select(
                Order.order_number,
                User.name.label("customer_name"),
                Order.store_id,
                Order.product_name,
                Order.order_time,
            )
            .join(User, Order.customer_id == User.id)
            .join(Store, Order.store_id == Store.id)
            .where(Store.manager_id == manager_id)
            .order_by(Order.order_time.desc(), Order.order_number.desc())
            .limit(limit)
        )

    async def get_popular_products(
        self, limit: int, manager_id: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Самые популярные товары по количеству заказов (не единиц).

        Args:
            limit: Количество строк
            manager_id: Ограничить магазинами менеджера; None - все магазины
        """
        order_count = func.count(Order.units_ordered).label("order_count")
        query = select(Order.product_name, order_count)
        if manager_id is not None:
            query = query.where(
                Order.store_id.in_(select(Store.id).where(Store.manager_id == manager_id))
            )
        query = (
            query.group_by(Order.product_name)
            .order_by(desc("order_count"), Order.product_name)
            .limit(limit)
        )
        return await self._fetch(query)

    async def get_popular_customers(
        self, limit: int, manager_id: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        order_count = func.count().label("order_count")
        query = (
            select(User.name.label("customer_name"), order_count)
            .join(Order, User.id == Order.customer_id)
            .join(Store, Order.store_id == Store.id)
        )
        if manager_id is not None:
            query = query.where(Store.manager_id == manager_id)
        query = (
            query.group_by(User.name)
            .order_by(desc("order_count"), User.name)
            .limit(limit)
        )
        return await self._fetch(query)
