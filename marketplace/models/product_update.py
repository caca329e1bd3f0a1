from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class ProductUpdate(Base):
    __tablename__ = "product_updates"

    update_number = Column(Integer, primary_key=True, autoincrement=False)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    product_name = Column(String, nullable=False)
    updated_on = Column(DateTime, nullable=False)

    manager = relationship("User")
    store = relationship("Store")
