from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from marketplace.core.session import Principal
from marketplace.repositories.user_repository import UserRepository
from marketplace.models.user import User, Role
import logging

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: AsyncSession):
        self.repo = UserRepository(session)
        self.session = session

    async def register(
        self, name: str, password: str, latitude: float, longitude: float
    ) -> User:
        """
        Регистрирует нового покупателя.

        Роль при создании всегда customer; повышение роли выполняется
        администрированием базы напрямую.

        Raises:
            ValueError: Если пользователь с таким именем уже существует
        """
        if await self.repo.get_by_name(name):
            raise ValueError(f"User {name} already exists")

        user = await self.repo.create(name, password, latitude, longitude, Role.CUSTOMER)
        logger.info("Зарегистрирован пользователь %s (id=%s)", user.name, user.id)
        return user

    async def login(self, name: str, password: str) -> Optional[Principal]:
        """Проверяет учетные данные; при неудаче ничего не меняет"""
        user = await self.repo.get_by_credentials(name, password)
        if not user:
            logger.info("Неудачная попытка входа для %s", name)
            return None

        logger.info("Пользователь авторизован: %s (%s)", user.name, user.type)
        return Principal(name=name, password=password)

    async def get_current_user(self, principal: Principal) -> Optional[User]:
        return await self.repo.get_by_credentials(principal.name, principal.password)

    async def current_user_id(self, principal: Principal) -> int:
        """ID текущего пользователя или -1, если запись не найдена"""
        try:
            user = await self.get_current_user(principal)
        except SQLAlchemyError as e:
            logger.error(f"Ошибка при поиске пользователя: {e}")
            return -1
        return user.id if user else -1

    async def current_user_role(self, principal: Principal) -> Optional[Role]:
        try:
            user = await self.get_current_user(principal)
        except SQLAlchemyError as e:
            logger.error(f"Ошибка при поиске пользователя: {e}")
            return None
        return user.role if user else None

    async def current_user_type(self, principal: Principal) -> Optional[str]:
        """Значение колонки type как есть, без разбора в Role"""
        try:
            user = await self.get_current_user(principal)
        except SQLAlchemyError as e:
            logger.error(f"Ошибка при поиске пользователя: {e}")
            return None
        return user.type if user else None
