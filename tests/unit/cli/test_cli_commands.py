"""
Tests unitaires pour les commandes CLI (user, product, order).

Le Container est patche dans helpers.py, la ou le decorateur
@with_container() l'instancie ; la base de donnees n'est jamais ouverte.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.core.entities.order import Order
from src.core.entities.product import Product, ProductMetadata, ProductStatus
from src.core.entities.user import User
from src.core.errors import BusinessRuleError, NotFoundError
from src.core.value_objects.identifiers import OrderId, ProductId, UserId
from src.main import app

USER_ID = "65f1c0ffee0000000000abcd"
PRODUCT_ID = "65f1c0ffee0000000000beef"
ORDER_ID = "65f1c0ffee0000000000cafe"
NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_container():
    """Mock le Container et l'initialisation de la base."""
    with patch("src.adapters.cli.helpers.Container") as mock_cls, patch(
        "src.adapters.cli.helpers.init_db", new_callable=AsyncMock
    ):
        container_instance = MagicMock()
        container_instance.engine.return_value.dispose = AsyncMock()
        mock_cls.return_value = container_instance
        yield container_instance


@pytest.fixture
def product() -> Product:
    return Product(
        id=ProductId(PRODUCT_ID),
        name="Clavier",
        price=10.0,
        stock=5,
        status=ProductStatus.ACTIVE,
        metadata=ProductMetadata(category="peripheriques", sku="KB-001"),
        created_at=NOW,
    )


# ============================================================================
# Tests
# ============================================================================


class TestUserCommands:
    """Commandes user create / list."""

    def test_create(self, mock_container):
        service = mock_container.user_service.return_value
        service.create_user = AsyncMock(
            return_value=User(id=UserId(USER_ID), name="Alice", email="alice@example.com")
        )

        result = runner.invoke(app, ["user", "create", "Alice", "alice@example.com"])

        assert result.exit_code == 0
        assert USER_ID in result.output
        service.create_user.assert_awaited_once_with("Alice", "alice@example.com")

    def test_list_empty(self, mock_container):
        service = mock_container.user_service.return_value
        service.list_users = AsyncMock(return_value=[])
        service.count_users = AsyncMock(return_value=0)

        result = runner.invoke(app, ["user", "list"])

        assert result.exit_code == 0
        assert "Aucun utilisateur" in result.output

    def test_engine_is_disposed(self, mock_container):
        service = mock_container.user_service.return_value
        service.list_users = AsyncMock(return_value=[])
        service.count_users = AsyncMock(return_value=0)

        runner.invoke(app, ["user", "list"])

        mock_container.engine.return_value.dispose.assert_awaited_once()


class TestProductCommands:
    """Commandes product create / list / stock."""

    def test_create_with_tags(self, mock_container, product):
        service = mock_container.product_service.return_value
        service.create_product = AsyncMock(return_value=product)

        result = runner.invoke(
            app,
            [
                "product", "create", "Clavier",
                "--price", "10", "--sku", "KB-001", "-c", "peripheriques",
                "--stock", "5", "-t", "usb", "-t", "azerty", "--status", "active",
            ],
        )

        assert result.exit_code == 0
        args = service.create_product.await_args.args
        assert args[0] == "Clavier"
        assert args[3].tags == ("usb", "azerty")
        assert args[4] is ProductStatus.ACTIVE

    def test_list(self, mock_container, product):
        service = mock_container.product_service.return_value
        service.list_products = AsyncMock(return_value=[product])
        service.count_products = AsyncMock(return_value=1)

        result = runner.invoke(app, ["product", "list"])

        assert result.exit_code == 0
        assert "KB-001" in result.output

    def test_stock_below_zero_exits_with_error(self, mock_container):
        service = mock_container.product_service.return_value
        service.adjust_stock = AsyncMock(
            side_effect=BusinessRuleError(
                "Stock cannot go negative: delta -9, available 5",
                {"delta": -9, "available": 5},
            )
        )

        result = runner.invoke(app, ["product", "stock", PRODUCT_ID, "--", "-9"])

        assert result.exit_code == 1
        assert "Stock cannot go negative" in result.output


class TestOrderCommands:
    """Commandes order create / list."""

    def test_create(self, mock_container):
        service = mock_container.order_service.return_value
        service.create_order = AsyncMock(
            return_value=Order(
                id=OrderId(ORDER_ID),
                user_id=UserId(USER_ID),
                product_id=ProductId(PRODUCT_ID),
                quantity=2,
                total_price=20.0,
                created_at=NOW,
            )
        )

        result = runner.invoke(app, ["order", "create", USER_ID, PRODUCT_ID, "-q", "2"])

        assert result.exit_code == 0
        assert ORDER_ID in result.output
        assert "20.00" in result.output
        service.create_order.assert_awaited_once_with(
            UserId(USER_ID), ProductId(PRODUCT_ID), 2
        )

    def test_create_unknown_user(self, mock_container):
        service = mock_container.order_service.return_value
        service.create_order = AsyncMock(side_effect=NotFoundError("User", USER_ID))

        result = runner.invoke(app, ["order", "create", USER_ID, PRODUCT_ID])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_list_by_user(self, mock_container):
        service = mock_container.order_service.return_value
        service.list_orders_by_user = AsyncMock(return_value=[])

        result = runner.invoke(app, ["order", "list", "--user", USER_ID])

        assert result.exit_code == 0
        service.list_orders_by_user.assert_awaited_once()
        assert service.list_orders_by_user.await_args.args[0] == UserId(USER_ID)


class TestMainCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "OrderDesk v0.1.0" in result.output
