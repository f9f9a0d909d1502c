"""
Tests pour UserService - creation, unicite de l'email et suppression logique.
"""

from unittest.mock import AsyncMock

import pytest

from src.core.errors import (
    AlreadyExistsError,
    DatabaseError,
    NotFoundError,
    RequiredError,
)
from src.core.value_objects.identifiers import UserId
from src.core.value_objects.pagination import Pagination
from src.services.users import normalize_email

UNKNOWN_ID = "65f1c0ffee0000000000dead"


class TestNormalizeEmail:
    def test_strips_and_lowercases(self):
        assert normalize_email("  Alice@Example.COM ") == "alice@example.com"


class TestCreateUser:
    """Tests de create_user."""

    @pytest.mark.asyncio
    async def test_create(self, user_service):
        user = await user_service.create_user(" Alice ", "Alice@Example.com")

        assert user.id is not None
        assert user.name == "Alice"
        assert user.email == "alice@example.com"
        assert user.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, user_service, alice):
        """Un email deja utilise (a la casse pres) est refuse."""
        with pytest.raises(AlreadyExistsError) as exc_info:
            await user_service.create_user("Alice bis", "ALICE@example.com")

        assert exc_info.value.http_status == 409
        assert exc_info.value.data["email"] == "alice@example.com"

    @pytest.mark.asyncio
    async def test_email_reusable_after_delete(self, user_service, alice):
        """L'unicite ne porte que sur les utilisateurs actifs."""
        await user_service.delete_user(alice.id)

        user = await user_service.create_user("Alice", "alice@example.com")
        assert user.id != alice.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, email, field", [("", "a@b.c", "name"), ("A", "  ", "email")])
    async def test_required_fields(self, user_service, name, email, field):
        with pytest.raises(RequiredError) as exc_info:
            await user_service.create_user(name, email)
        assert exc_info.value.field == field


class TestUserLifecycle:
    """Consultation, mise a jour et suppression."""

    @pytest.mark.asyncio
    async def test_get(self, user_service, alice):
        user = await user_service.get_user(alice.id)
        assert user.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_get_unknown(self, user_service):
        with pytest.raises(NotFoundError):
            await user_service.get_user(UserId(UNKNOWN_ID))

    @pytest.mark.asyncio
    async def test_update_name(self, user_service, alice):
        user = await user_service.update_user(alice.id, name="Alice Martin")

        assert user.name == "Alice Martin"
        assert (await user_service.get_user(alice.id)).name == "Alice Martin"

    @pytest.mark.asyncio
    async def test_update_email_conflict(self, user_service, alice):
        bob = await user_service.create_user("Bob", "bob@example.com")

        with pytest.raises(AlreadyExistsError):
            await user_service.update_user(bob.id, email="alice@example.com")

    @pytest.mark.asyncio
    async def test_update_same_email_is_allowed(self, user_service, alice):
        user = await user_service.update_user(alice.id, email="ALICE@example.com")
        assert user.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_delete_twice(self, user_service, alice):
        """La seconde suppression ne trouve plus d'utilisateur actif."""
        await user_service.delete_user(alice.id)

        with pytest.raises(NotFoundError):
            await user_service.delete_user(alice.id)
        with pytest.raises(NotFoundError):
            await user_service.get_user(alice.id)

    @pytest.mark.asyncio
    async def test_list_and_count_ignore_deleted(self, user_service, alice):
        bob = await user_service.create_user("Bob", "bob@example.com")
        await user_service.delete_user(alice.id)

        users = await user_service.list_users(Pagination())
        assert [u.id for u in users] == [bob.id]
        assert await user_service.count_users() == 1


class TestStorageFailures:
    """Un echec inattendu du repository devient une DatabaseError."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, call",
        [
            ("find_by_email", lambda s: s.create_user("Alice", "alice@example.com")),
            ("find_by_id", lambda s: s.get_user(UserId(UNKNOWN_ID))),
            ("find_all", lambda s: s.list_users(Pagination())),
            ("delete", lambda s: s.delete_user(UserId(UNKNOWN_ID))),
            ("count", lambda s: s.count_users()),
        ],
    )
    async def test_wrapped(self, user_service, user_repo, method, call):
        setattr(user_repo, method, AsyncMock(side_effect=RuntimeError("socket closed")))

        with pytest.raises(DatabaseError) as exc_info:
            await call(user_service)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_update_failure(self, user_service, user_repo, alice):
        user_repo.update = AsyncMock(side_effect=RuntimeError("socket closed"))

        with pytest.raises(DatabaseError):
            await user_service.update_user(alice.id, name="Alice Martin")
