from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from marketplace.models.user import User, Role


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_credentials(self, name: str, password: str) -> Optional[User]:
        """
        Получает пользователя по имени и паролю.

        Имя не уникально в схеме; при совпадении берется запись
        с наименьшим ID.

        Args:
            name: Имя пользователя
            password: Пароль

        Returns:
            Optional[User]: Объект пользователя или None, если не найден
        """
        result = await self.session.execute(
            select(User)
            .filter_by(name=name, password=password)
            .order_by(User.id)
            .limit(1)
        )
        return result.scalars().first()

    async def get_by_name(self, name: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).filter_by(name=name).order_by(User.id).limit(1)
        )
        return result.scalars().first()

    async def create(
        self,
        name: str,
        password: str,
        latitude: float,
        longitude: float,
        role: Role = Role.CUSTOMER,
    ) -> User:
        user = User(
            name=name,
            password=password,
            latitude=latitude,
            longitude=longitude,
            type=role.value,
        )
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user
