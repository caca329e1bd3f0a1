import datetime
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.states import OrderState
from marketplace.models.order import Order
from marketplace.models.user import User, Role
from marketplace.repositories.order_repository import OrderRepository
from marketplace.repositories.product_repository import ProductRepository
from marketplace.repositories.store_repository import StoreRepository
from marketplace.services.sequence_service import SequenceService
from marketplace.utils.geo import distance, is_too_far, MAX_DISTANCE

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5
POPULAR_LIMIT = 5

STORE_NOT_FOUND_TEXT = "Store not found."
TOO_FAR_TEXT = (
    f"That store is too far from you! (Must be within {MAX_DISTANCE} miles "
    "from your location.)"
)
UNAVAILABLE_TEXT = "Product doesn't exist or you ordered too many."
ORDERED_TEXT = "Product ordered!"


@dataclass
class OrderOutcome:
    state: OrderState
    message: str
    order: Optional[Order] = None

    @property
    def placed(self) -> bool:
        return self.state is OrderState.DONE


class OrderService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = OrderRepository(session)
        self.products = ProductRepository(session)
        self.stores = StoreRepository(session)
        self.sequence = SequenceService(session)

    def _log_state(self, customer: User, state: OrderState) -> None:
        logger.debug("Заказ покупателя %s: %s", customer.name, state.value)

    def _reject(self, message: str) -> OrderOutcome:
        logger.info("Заказ отклонен: %s", message)
        return OrderOutcome(OrderState.REJECTED, message)

    async def place_order(
        self, customer: User, store_id: int, product_name: str, units: int
    ) -> OrderOutcome:
        """
        Оформляет заказ покупателя.

        Проверяет расстояние до магазина и наличие товара, затем в одной
        транзакции создает заказ и списывает остаток. Списание повторно
        проверяет наличие; если его перехватил другой клиент, транзакция
        откатывается и заказ отклоняется.

        Args:
            customer: Покупатель
            store_id: ID магазина
            product_name: Название товара
            units: Количество единиц (> 0)

        Returns:
            OrderOutcome: Итоговое состояние и сообщение для пользователя
        """
        self._log_state(customer, OrderState.VALIDATING_DISTANCE)
        store = await self.stores.get_by_id(store_id)
        if not store:
            return self._reject(STORE_NOT_FOUND_TEXT)

        value = distance(
            customer.latitude, customer.longitude, store.latitude, store.longitude
        )
        if is_too_far(value):
            return self._reject(TOO_FAR_TEXT)

        self._log_state(customer, OrderState.VALIDATING_AVAILABILITY)
        if not await self.products.get_available(store_id, product_name, units):
            return self._reject(UNAVAILABLE_TEXT)

        self._log_state(customer, OrderState.COMMITTING)
        try:
            order_number = await self.sequence.next_id(Order.__tablename__)
            order = await self.repo.add(
                Order(
                    order_number=order_number,
                    customer_id=customer.id,
                    store_id=store_id,
                    product_name=product_name,
                    units_ordered=units,
                    order_time=datetime.datetime.now(),
                )
            )
            if await self.products.decrement_units(store_id, product_name, units) < 1:
                await self.session.rollback()
                return self._reject(UNAVAILABLE_TEXT)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Заказ %s: %s ед. товара %s в магазине %s для %s",
            order.order_number,
            units,
            product_name,
            store_id,
            customer.name,
        )
        return OrderOutcome(OrderState.DONE, ORDERED_TEXT, order)

    async def recent_orders(self, user: User) -> List[Dict[str, Any]]:
        """
        Последние заказы в зависимости от роли:
        - менеджер: заказы в его магазинах с именем покупателя
        - администратор: все заказы
        - покупатель: только свои заказы
        """
        role = user.role
        if role is Role.MANAGER:
            return await self.repo.get_recent_by_manager(user.id, RECENT_LIMIT)
        if role is Role.ADMIN:
            return await self.repo.get_recent_all(RECENT_LIMIT)
        return await self.repo.get_recent_by_customer(user.id, RECENT_LIMIT)

    async def popular_products(self, user: User) -> List[Dict[str, Any]]:
        manager_id = None if user.role is Role.ADMIN else user.id
        return await self.repo.get_popular_products(POPULAR_LIMIT, manager_id=manager_id)

    async def popular_customers(self, user: User) -> List[Dict[str, Any]]:
        manager_id = None if user.role is Role.ADMIN else user.id
        return await self.repo.get_popular_customers(
            POPULAR_LIMIT, manager_id=manager_id
        )
