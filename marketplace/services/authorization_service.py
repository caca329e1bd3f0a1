import enum
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.session import Principal
from marketplace.models.user import User, Role
from marketplace.repositories.store_repository import StoreRepository
from marketplace.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

NOT_A_MANAGER_TEXT = "User is not a manager. Access denied."
NOT_STORE_MANAGER_TEXT = "You are not a verified manager for this store."
UNKNOWN_USER_TEXT = "Your account could not be found. Please log in again."


class DecisionKind(str, enum.Enum):
    ALLOWED = "allowed"
    DENIED = "denied"
    INFRASTRUCTURE_ERROR = "infrastructure_error"


@dataclass(frozen=True)
class AccessDecision:
    """Результат проверки прав: разрешено, запрещено или сбой базы"""

    kind: DecisionKind
    user: Optional[User] = None
    reason: str = ""
    error: Optional[Exception] = None

    @classmethod
    def allow(cls, user: User) -> "AccessDecision":
        return cls(DecisionKind.ALLOWED, user=user)

    @classmethod
    def deny(cls, reason: str, user: Optional[User] = None) -> "AccessDecision":
        return cls(DecisionKind.DENIED, user=user, reason=reason)

    @classmethod
    def failure(cls, error: Exception) -> "AccessDecision":
        return cls(DecisionKind.INFRASTRUCTURE_ERROR, reason=str(error), error=error)

    @property
    def allowed(self) -> bool:
        return self.kind is DecisionKind.ALLOWED

    @property
    def is_error(self) -> bool:
        return self.kind is DecisionKind.INFRASTRUCTURE_ERROR

    def __bool__(self) -> bool:
        return self.allowed


class AuthorizationService:
    """
    Проверки прав текущего пользователя.

    Каждая проверка заново читает users/stores, ничего не кэшируется.
    Булевы методы трактуют ошибку базы как отсутствие прав; методы check_*
    возвращают AccessDecision и отделяют отказ от сбоя.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.stores = StoreRepository(session)

    async def _current_user(self, principal: Optional[Principal]) -> Optional[User]:
        if principal is None:
            return None
        return await self.users.get_by_credentials(principal.name, principal.password)

    async def _role(self, principal: Optional[Principal]) -> Optional[Role]:
        user = await self._current_user(principal)
        return user.role if user else None

    async def has_elevated_access(self, principal: Optional[Principal]) -> bool:
        try:
            role = await self._role(principal)
        except SQLAlchemyError as e:
            logger.error("Ошибка при проверке прав: %s", e)
            return False
        return bool(role and role.is_elevated)

    async def is_admin(self, principal: Optional[Principal]) -> bool:
        try:
            return await self._role(principal) is Role.ADMIN
        except SQLAlchemyError as e:
            logger.error("Ошибка при проверке прав: %s", e)
            return False

    async def is_manager(self, principal: Optional[Principal]) -> bool:
        try:
            return await self._role(principal) is Role.MANAGER
        except SQLAlchemyError as e:
            logger.error("Ошибка при проверке прав: %s", e)
            return False

    async def owns_store(self, principal: Optional[Principal], store_id: int) -> bool:
        """Магазином управляет текущий пользователь (для admin не подразумевается)"""
        try:
            user = await self._current_user(principal)
            if not user:
                return False
            return await self.stores.get_managed(store_id, user.id) is not None
        except SQLAlchemyError as e:
            logger.error("Ошибка при проверке владельца магазина %s: %s", store_id, e)
            return False

    async def check_elevated(self, principal: Optional[Principal]) -> AccessDecision:
        """Входная проверка: роль manager или admin, без учета магазина"""
        try:
            user = await self._current_user(principal)
        except SQLAlchemyError as e:
            logger.error("Ошибка при проверке прав: %s", e)
            return AccessDecision.failure(e)

        if not user:
            return AccessDecision.deny(UNKNOWN_USER_TEXT)
        if not (user.role and user.role.is_elevated):
            return AccessDecision.deny(NOT_A_MANAGER_TEXT, user=user)
        return AccessDecision.allow(user)

    async def check_store_access(
        self, principal: Optional[Principal], store_id: int
    ) -> AccessDecision:
        """Составная политика для изменений в магазине: admin ИЛИ управляет магазином"""
        try:
            user = await self._current_user(principal)
            if not user:
                return AccessDecision.deny(UNKNOWN_USER_TEXT)
            if user.role is Role.ADMIN:
                return AccessDecision.allow(user)
            if await self.stores.get_managed(store_id, user.id) is not None:
                return AccessDecision.allow(user)
        except SQLAlchemyError as e:
            logger.error("Ошибка при проверке владельца магазина %s: %s", store_id, e)
            return AccessDecision.failure(e)

        return AccessDecision.deny(NOT_STORE_MANAGER_TEXT, user=user)
