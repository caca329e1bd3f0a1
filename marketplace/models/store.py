from sqlalchemy import Column, Integer, Float, ForeignKey
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    manager = relationship("User", back_populates="stores")
    products = relationship("Product", back_populates="store")
