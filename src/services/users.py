"""
Service de gestion des utilisateurs.

Creation avec unicite de l'email (pre-verification + contrainte d'unicite
du stockage), consultation, mise a jour et suppression logique.
"""

from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from src.core.entities.user import User
from src.core.errors import (
    AlreadyExistsError,
    NotFoundError,
    RequiredError,
    as_database_error,
)
from src.core.ports.repositories import IUserRepository
from src.core.value_objects.identifiers import UserId
from src.core.value_objects.pagination import Pagination


def normalize_email(email: str) -> str:
    """Normalise un email (espaces retires, minuscules)."""
    return email.strip().lower()


class UserService:
    """Cas d'utilisation sur les utilisateurs."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    async def create_user(self, name: str, email: str) -> User:
        """
        Cree un utilisateur apres verification de l'unicite de son email.

        Raises:
            RequiredError: Si le nom ou l'email est vide
            AlreadyExistsError: Si un utilisateur actif utilise deja cet email
        """
        name = name.strip()
        email = normalize_email(email)
        if not name:
            raise RequiredError("name")
        if not email:
            raise RequiredError("email")

        await self._ensure_email_available(email)

        now = datetime.now(timezone.utc)
        user = User(name=name, email=email, created_at=now, updated_at=now)
        with as_database_error("create user"):
            user.id = await self._user_repo.create(user)
        logger.info("Utilisateur cree", user_id=str(user.id))
        return user

    async def get_user(self, user_id: UserId) -> User:
        """Recupere un utilisateur actif ou leve NotFoundError."""
        with as_database_error("find user"):
            user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def list_users(self, pagination: Pagination) -> list[User]:
        """Liste les utilisateurs actifs."""
        with as_database_error("list users"):
            return await self._user_repo.find_all(pagination)

    async def update_user(
        self,
        user_id: UserId,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """
        Met a jour le nom et/ou l'email d'un utilisateur.

        Un changement d'email reverifie l'unicite.
        """
        user = await self.get_user(user_id)

        if name is not None:
            name = name.strip()
            if not name:
                raise RequiredError("name")
            user.name = name

        if email is not None:
            email = normalize_email(email)
            if not email:
                raise RequiredError("email")
            if email != user.email:
                await self._ensure_email_available(email)
            user.email = email

        user.updated_at = datetime.now(timezone.utc)
        with as_database_error("update user"):
            updated = await self._user_repo.update(user_id, user)
        if not updated:
            raise NotFoundError("User", str(user_id))
        return user

    async def delete_user(self, user_id: UserId) -> None:
        """
        Supprime logiquement un utilisateur.

        Les commandes existantes de l'utilisateur ne sont pas affectees.
        """
        with as_database_error("delete user"):
            deleted = await self._user_repo.delete(user_id)
        if not deleted:
            raise NotFoundError("User", str(user_id))
        logger.info("Utilisateur supprime", user_id=str(user_id))

    async def count_users(self) -> int:
        with as_database_error("count users"):
            return await self._user_repo.count()

    async def _ensure_email_available(self, email: str) -> None:
        with as_database_error("find user by email"):
            existing = await self._user_repo.find_by_email(email)
        if existing is not None:
            raise AlreadyExistsError("User", {"email": email})
