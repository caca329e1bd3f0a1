import datetime
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models.product import Product
from marketplace.models.product_update import ProductUpdate
from marketplace.models.supply_request import ProductSupplyRequest
from marketplace.models.user import User, Role
from marketplace.repositories.product_repository import ProductRepository
from marketplace.repositories.product_update_repository import ProductUpdateRepository
from marketplace.repositories.supply_request_repository import SupplyRequestRepository
from marketplace.services.sequence_service import SequenceService

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


class ProductService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = ProductRepository(session)
        self.update_repo = ProductUpdateRepository(session)
        self.supply_repo = SupplyRequestRepository(session)
        self.sequence = SequenceService(session)

    async def get_product(self, store_id: int, product_name: str) -> Optional[Product]:
        return await self.repo.get(store_id, product_name)

    async def list_products(self, store_id: int) -> List[Dict[str, Any]]:
        products = await self.repo.list_by_store(store_id)
        return [
            {
                "product_name": p.product_name,
                "number_of_units": p.number_of_units,
                "price_per_unit": p.price_per_unit,
            }
            for p in products
        ]

    async def update_product(
        self,
        manager: User,
        store_id: int,
        product_name: str,
        new_price: Optional[float] = None,
        new_units: Optional[int] = None,
    ) -> Optional[ProductUpdate]:
        """
        Меняет цену и/или остаток товара и пишет одну запись в журнал.

        Изменения и запись журнала выполняются в одной транзакции.
        Запись в журнал одна на вызов, независимо от числа измененных полей.

        Args:
            manager: Пользователь, выполняющий изменение
            store_id: ID магазина
            product_name: Название товара
            new_price: Новая цена или None, если цену не меняем
            new_units: Новый остаток или None, если остаток не меняем

        Returns:
            Optional[ProductUpdate]: Запись журнала или None, если ничего не менялось
        """
        if new_price is None and new_units is None:
            return None

        try:
            changed = 0
            if new_price is not None:
                changed += await self.repo.set_price(store_id, product_name, new_price)
            if new_units is not None:
                changed += await self.repo.set_units(store_id, product_name, new_units)
            if changed < 1:
                await self.session.rollback()
                return None

            update_number = await self.sequence.next_id(ProductUpdate.__tablename__)
            update = await self.update_repo.add(
                ProductUpdate(
                    update_number=update_number,
                    manager_id=manager.id,
                    store_id=store_id,
                    product_name=product_name,
                    updated_on=datetime.datetime.now(),
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Товар %s в магазине %s изменен пользователем %s (цена=%s, остаток=%s)",
            product_name,
            store_id,
            manager.name,
            new_price,
            new_units,
        )
        return update

    async def request_supply(
        self,
        manager: User,
        store_id: int,
        product_name: str,
        warehouse_id: int,
        units: int,
    ) -> Optional[ProductSupplyRequest]:
        """
        Пополняет остаток товара со склада и регистрирует заявку.

        Returns:
            Optional[ProductSupplyRequest]: Заявка или None, если товара нет в магазине
        """
        try:
            if await self.repo.increment_units(store_id, product_name, units) < 1:
                await self.session.rollback()
                return None

            request_number = await self.sequence.next_id(
                ProductSupplyRequest.__tablename__
            )
            request = await self.supply_repo.add(
                ProductSupplyRequest(
                    request_number=request_number,
                    manager_id=manager.id,
                    warehouse_id=warehouse_id,
                    store_id=store_id,
                    product_name=product_name,
                    units_requested=units,
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Заявка %s: %s ед. товара %s со склада %s в магазин %s",
            request.request_number,
            units,
            product_name,
            warehouse_id,
            store_id,
        )
        return request

    async def recent_updates(self, user: User) -> List[Dict[str, Any]]:
        """Администратор видит все изменения, менеджер - только свои"""
        manager_id = None if user.role is Role.ADMIN else user.id
        return await self.update_repo.get_recent(RECENT_LIMIT, manager_id=manager_id)
