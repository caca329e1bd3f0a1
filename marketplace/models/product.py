from sqlalchemy import Column, Integer, String, Float, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from marketplace.core.database import Base


class Product(Base):
    __tablename__ = "products"

    store_id = Column(Integer, ForeignKey("stores.id"), primary_key=True)
    product_name = Column(String, primary_key=True)
    number_of_units = Column(Integer, nullable=False, default=0)
    price_per_unit = Column(Float, nullable=False, default=0.0)

    store = relationship("Store", back_populates="products")

    __table_args__ = (
        CheckConstraint("number_of_units >= 0", name="ck_products_units_non_negative"),
    )
