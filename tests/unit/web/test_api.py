"""
Tests de l'API HTTP (FastAPI) sur des repositories en memoire.

Tests couvrant:
- Creation et consultation des utilisateurs, produits et commandes
- Traduction des erreurs du domaine (statut + corps kind/cause/data)
- Validation des entrees a la frontiere (422 FastAPI)
- Pagination et suppression logique
"""

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.container import Container
from src.web.app import create_app
from tests.fixtures.in_memory_repositories import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)

UNKNOWN_ID = "65f1c0ffee0000000000dead"


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def container():
    """Container dont les repositories SQL sont remplaces par des fakes."""
    container = Container()
    container.user_repository.override(providers.Object(InMemoryUserRepository()))
    container.product_repository.override(providers.Object(InMemoryProductRepository()))
    container.order_repository.override(providers.Object(InMemoryOrderRepository()))
    yield container
    container.reset_override()


@pytest.fixture
def client(container):
    app = create_app(container, init_database=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user(client) -> dict:
    response = client.post("/users", json={"name": "Alice", "email": "alice@example.com"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client) -> dict:
    """Produit a 10.0 avec 5 unites en stock."""
    response = client.post(
        "/products",
        json={
            "name": "Clavier",
            "price": 10.0,
            "stock": 5,
            "metadata": {"category": "peripheriques", "sku": "KB-001", "tags": ["usb"]},
        },
    )
    assert response.status_code == 201
    return response.json()


# ============================================================================
# Tests
# ============================================================================


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestUsersApi:
    """Routes /users."""

    def test_create_user(self, user):
        assert len(user["id"]) == 24
        assert user["email"] == "alice@example.com"

    def test_duplicate_email_is_409(self, client, user):
        response = client.post("/users", json={"name": "Autre", "email": "ALICE@example.com"})

        assert response.status_code == 409
        body = response.json()
        assert body["kind"] == "already_exists"
        assert body["data"]["email"] == "alice@example.com"

    def test_invalid_email_is_rejected(self, client):
        response = client.post("/users", json={"name": "Alice", "email": "pas-un-email"})
        assert response.status_code == 422

    def test_get_unknown_user_is_404(self, client):
        response = client.get(f"/users/{UNKNOWN_ID}")

        assert response.status_code == 404
        assert response.json() == {
            "kind": "not_found",
            "cause": f"User {UNKNOWN_ID} not found",
            "data": {"entity": "User", "id": UNKNOWN_ID},
        }

    def test_update_user(self, client, user):
        response = client.patch(f"/users/{user['id']}", json={"name": "Alice Martin"})

        assert response.status_code == 200
        assert response.json()["name"] == "Alice Martin"

    def test_delete_user_then_404(self, client, user):
        assert client.delete(f"/users/{user['id']}").status_code == 204
        assert client.delete(f"/users/{user['id']}").status_code == 404

    def test_list_users_with_total(self, client, user):
        client.post("/users", json={"name": "Bob", "email": "bob@example.com"})

        response = client.get("/users", params={"limit": 1})

        body = response.json()
        assert body["total"] == 2
        assert body["limit"] == 1
        assert len(body["items"]) == 1

    def test_negative_page_is_rejected(self, client):
        assert client.get("/users", params={"page": -1}).status_code == 422


class TestProductsApi:
    """Routes /products."""

    def test_create_product(self, product):
        assert product["stock"] == 5
        assert product["status"] == "draft"
        assert product["metadata"]["tags"] == ["usb"]

    def test_negative_price_is_rejected(self, client):
        response = client.post(
            "/products",
            json={
                "name": "Clavier",
                "price": -1,
                "stock": 5,
                "metadata": {"category": "c", "sku": "s"},
            },
        )
        assert response.status_code == 422

    def test_adjust_stock(self, client, product):
        response = client.patch(f"/products/{product['id']}/stock", json={"delta": 3})

        assert response.status_code == 200
        assert response.json()["stock"] == 8

    def test_adjust_stock_below_zero_is_422(self, client, product):
        response = client.patch(f"/products/{product['id']}/stock", json={"delta": -6})

        assert response.status_code == 422
        assert response.json()["kind"] == "business_rule"

    def test_update_metadata(self, client, product):
        response = client.patch(
            f"/products/{product['id']}/metadata",
            json={"category": "claviers", "sku": "KB-002", "description": "AZERTY"},
        )

        assert response.status_code == 200
        assert response.json()["metadata"]["sku"] == "KB-002"

    def test_deleted_product_is_404(self, client, product):
        assert client.delete(f"/products/{product['id']}").status_code == 204
        assert client.get(f"/products/{product['id']}").status_code == 404


class TestOrdersApi:
    """Routes /orders et /users/{id}/orders."""

    def test_create_order(self, client, user, product):
        response = client.post(
            "/orders",
            json={"user_id": user["id"], "product_id": product["id"], "quantity": 2},
        )

        assert response.status_code == 201
        order = response.json()
        assert order["total_price"] == 20.0
        assert order["user_id"] == user["id"]
        assert client.get(f"/products/{product['id']}").json()["stock"] == 3

    def test_insufficient_stock_is_422(self, client, user, product):
        response = client.post(
            "/orders",
            json={"user_id": user["id"], "product_id": product["id"], "quantity": 6},
        )

        assert response.status_code == 422
        assert response.json() == {
            "kind": "business_rule",
            "cause": "Insufficient stock: requested 6, available 5",
            "data": {"requested": 6, "available": 5},
        }
        assert client.get(f"/products/{product['id']}").json()["stock"] == 5

    def test_unknown_product_is_404(self, client, user):
        response = client.post(
            "/orders",
            json={"user_id": user["id"], "product_id": UNKNOWN_ID, "quantity": 1},
        )
        assert response.status_code == 404

    def test_zero_quantity_is_rejected(self, client, user, product):
        response = client.post(
            "/orders",
            json={"user_id": user["id"], "product_id": product["id"], "quantity": 0},
        )
        assert response.status_code == 422

    def test_user_orders(self, client, user, product):
        client.post(
            "/orders",
            json={"user_id": user["id"], "product_id": product["id"], "quantity": 1},
        )

        response = client.get(f"/users/{user['id']}/orders")

        assert response.status_code == 200
        body = response.json()
        assert len(body["items"]) == 1
        assert body["total"] is None

    def test_delete_order(self, client, user, product):
        order = client.post(
            "/orders",
            json={"user_id": user["id"], "product_id": product["id"], "quantity": 1},
        ).json()

        assert client.delete(f"/orders/{order['id']}").status_code == 204
        assert client.get(f"/orders/{order['id']}").status_code == 404
        assert client.get("/orders").json()["total"] == 0
