"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- User: A customer placing orders
- Product: A catalogue item with price and stock
- ProductMetadata: Descriptive product data (category, sku, tags)
- ProductStatus: Informational product lifecycle status
- Order: A price-frozen order for one product
"""

from src.core.entities.user import User
from src.core.entities.product import Product, ProductMetadata, ProductStatus
from src.core.entities.order import Order

__all__ = [
    "User",
    "Product",
    "ProductMetadata",
    "ProductStatus",
    "Order",
]
