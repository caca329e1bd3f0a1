from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class Order(Base):
    __tablename__ = "orders"

    order_number = Column(Integer, primary_key=True, autoincrement=False)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    product_name = Column(String, nullable=False)
    units_ordered = Column(Integer, nullable=False)
    order_time = Column(DateTime, nullable=False)

    customer = relationship("User", back_populates="orders")
    store = relationship("Store")
