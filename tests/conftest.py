"""
Fixtures pytest partagees pour les tests OrderDesk.

Ce module contient les fixtures communes utilisees dans les tests:
- Repositories en memoire (utilisateurs, produits, commandes)
- Services construits sur ces repositories
- Entites pre-enregistrees (un utilisateur, un produit en stock)
"""

import pytest
import pytest_asyncio

from src.core.entities.product import ProductMetadata
from src.services.orders import OrderService
from src.services.products import ProductService
from src.services.users import UserService
from tests.fixtures.in_memory_repositories import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def order_repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def user_service(user_repo) -> UserService:
    return UserService(user_repo=user_repo)


@pytest.fixture
def product_service(product_repo) -> ProductService:
    return ProductService(product_repo=product_repo)


@pytest.fixture
def order_service(order_repo, user_repo, product_repo) -> OrderService:
    """OrderService branche sur les trois repositories en memoire."""
    return OrderService(
        order_repo=order_repo, user_repo=user_repo, product_repo=product_repo
    )


@pytest.fixture
def keyboard_metadata() -> ProductMetadata:
    return ProductMetadata(
        category="peripheriques",
        sku="KB-001",
        description="Clavier mecanique",
        tags=("usb", "azerty"),
    )


@pytest_asyncio.fixture
async def alice(user_service):
    """Utilisateur actif pre-enregistre."""
    return await user_service.create_user("Alice", "alice@example.com")


@pytest_asyncio.fixture
async def keyboard(product_service, keyboard_metadata):
    """Produit a 10.0 avec 5 unites en stock."""
    return await product_service.create_product(
        "Clavier", price=10.0, stock=5, metadata=keyboard_metadata
    )
