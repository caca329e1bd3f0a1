"""
Модели данных торговой площадки.
"""

from .user import User, Role
from .store import Store
from .product import Product
from .order import Order
from .product_update import ProductUpdate
from .supply_request import ProductSupplyRequest

__all__ = [
    "User",
    "Role",
    "Store",
    "Product",
    "Order",
    "ProductUpdate",
    "ProductSupplyRequest",
]
