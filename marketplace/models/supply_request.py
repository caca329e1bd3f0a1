from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class ProductSupplyRequest(Base):
    __tablename__ = "product_supply_requests"

    request_number = Column(Integer, primary_key=True, autoincrement=False)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    warehouse_id = Column(Integer, nullable=False)
    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False)
    product_name = Column(String, nullable=False)
    units_requested = Column(Integer, nullable=False)

    manager = relationship("User")
    store = relationship("Store")
