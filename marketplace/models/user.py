import enum
from typing import Optional
from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class Role(str, enum.Enum):
    CUSTOMER = "customer"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANKS[self]

    def at_least(self, other: "Role") -> bool:
        """Полный порядок ролей: admin ⊇ manager ⊇ customer"""
        return self.rank >= other.rank

    @property
    def is_elevated(self) -> bool:
        return self.at_least(Role.MANAGER)

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Разбирает значение колонки type; регистр и пробелы не важны"""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_ROLE_RANKS = {Role.CUSTOMER: 0, Role.MANAGER: 1, Role.ADMIN: 2}


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # не уникально на уровне схемы, уникальность проверяется при регистрации
    name = Column(String, nullable=False, index=True)
    password = Column(String, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    type = Column(String, nullable=False, default=Role.CUSTOMER.value)

    stores = relationship("Store", back_populates="manager")
    orders = relationship("Order", back_populates="customer")

    @property
    def role(self) -> Optional[Role]:
        return Role.parse(self.type)
