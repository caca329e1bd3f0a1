from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List, Optional
from marketplace.repositories.store_repository import StoreRepository
from marketplace.models.store import Store
from marketplace.models.user import User
from marketplace.utils.geo import distance, within_range
import logging

logger = logging.getLogger(__name__)


class StoreService:
    def __init__(self, session: AsyncSession):
        self.repo = StoreRepository(session)

    async def get_by_id(self, store_id: int) -> Optional[Store]:
        return await self.repo.get_by_id(store_id)

    async def list_nearby(self, user: User) -> List[Dict[str, Any]]:
        """
        Магазины в пределах порогового расстояния от пользователя.

        Returns:
            List[Dict[str, Any]]: store_id, latitude, longitude, distance
        """
        nearby = []
        for store in await self.repo.get_all():
            value = distance(user.latitude, user.longitude, store.latitude, store.longitude)
            if within_range(value):
                nearby.append(
                    {
                        "store_id": store.id,
                        "latitude": store.latitude,
                        "longitude": store.longitude,
                        "distance": round(value, 2),
                    }
                )
        logger.info("Найдено магазинов рядом с %s: %s", user.name, len(nearby))
        return nearby
