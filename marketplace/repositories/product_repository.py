from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from marketplace.models.product import Product


class ProductRepository:
    """Доступ к товарам магазинов.

    Методы изменения не делают commit: границы транзакции задает сервис.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, store_id: int, product_name: str) -> Optional[Product]:
        result = await self.session.execute(
            select(Product).filter_by(store_id=store_id, product_name=product_name)
        )
        return result.scalars().first()

    async def get_available(
        self, store_id: int, product_name: str, units: int
    ) -> Optional[Product]:
        """Товар, если в наличии не меньше units единиц"""
        result = await self.session.execute(
            select(Product).where(
                Product.store_id == store_id,
                Product.product_name == product_name,
                Product.number_of_units >= units,
            )
        )
        return result.scalars().first()

    async def list_by_store(self, store_id: int) -> List[Product]:
        result = await self.session.execute(
            select(Product)
            .filter_by(store_id=store_id)
            .order_by(Product.product_name)
        )
        return result.scalars().all()

    async def decrement_units(self, store_id: int, product_name: str, units: int) -> int:
        """
        Списывает units единиц, только если их хватает.

        Returns:
            int: Количество измененных строк (0 или 1)
        """
        result = await self.session.execute(
            update(Product)
            .where(
                Product.store_id == store_id,
                Product.product_name == product_name,
                Product.number_of_units >= units,
            )
            .values(number_of_units=Product.number_of_units - units)
        )
        return result.rowcount

    async def increment_units(self, store_id: int, product_name: str, units: int) -> int:
        result = await self.session.execute(
            update(Product)
            .where(
                Product.store_id == store_id,
                Product.product_name == product_name,
            )
            .values(number_of_units=Product.number_of_units + units)
        )
        return result.rowcount

    async def set_price(self, store_id: int, product_name: str, price: float) -> int:
        result = await self.session.execute(
            update(Product)
            .where(
                Product.store_id == store_id,
                Product.product_name == product_name,
            )
            .values(price_per_unit=price)
        )
        return result.rowcount

    async def set_units(self, store_id: int, product_name: str, units: int) -> int:
        result = await self.session.execute(
            update(Product)
            .where(
                Product.store_id == store_id,
                Product.product_name == product_name,
            )
            .values(number_of_units=units)
        )
        return result.rowcount
