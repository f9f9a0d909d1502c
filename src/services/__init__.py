"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from infrastructure/.

Exports:
- OrderService: Order creation workflow with atomic stock reservation
- UserService: User management with email uniqueness
- ProductService: Catalogue management and stock adjustments
"""

from src.services.orders import OrderService
from src.services.products import ProductService
from src.services.users import UserService

__all__ = [
    "OrderService",
    "ProductService",
    "UserService",
]
