"""
Implementation SQLModel du repository User.

Implemente l'interface IUserRepository pour la persistance des utilisateurs
via une session SQLAlchemy asynchrone.
"""

from typing import Optional

from sqlalchemy import func, update
from sqlmodel import select

from src.core.entities.user import User
from src.core.errors import InternalError
from src.core.ports.repositories import IUserRepository
from src.core.value_objects.identifiers import UserId
from src.core.value_objects.pagination import Pagination
from src.infrastructure.persistence.models import UserModel
from src.infrastructure.persistence.repositories.base import SQLModelRepository
from src.infrastructure.persistence.soft_delete import (
    active,
    from_storage,
    to_storage,
    utcnow,
)


class SQLModelUserRepository(SQLModelRepository, IUserRepository):
    """
    Repository SQLModel pour les utilisateurs.

    Implemente IUserRepository avec conversion bidirectionnelle
    entre l'entite User (domaine) et UserModel (persistance).
    """

    entity_name = "User"

    def _to_entity(self, model: UserModel) -> User:
        """Convertit un modele DB en entite domaine."""
        return User(
            id=UserId(model.id),
            name=model.name,
            email=model.email,
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
            deleted_at=from_storage(model.deleted_at),
        )

    def _to_model(self, entity: User) -> UserModel:
        """Convertit une entite domaine en modele DB (l'ID est genere)."""
        now = utcnow()
        return UserModel(
            name=entity.name,
            email=entity.email,
            created_at=to_storage(entity.created_at or now),
            updated_at=to_storage(entity.updated_at or now),
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Recupere un utilisateur actif par son ID."""
        statement = active(
            select(UserModel).where(UserModel.id == self._raw_id(user_id)), UserModel
        )
        async with self._session() as session:
            model = (await session.execute(statement)).scalars().first()
        return self._to_entity(model) if model else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Recupere un utilisateur actif par son email."""
        statement = active(select(UserModel).where(UserModel.email == email), UserModel)
        async with self._session() as session:
            model = (await session.execute(statement)).scalars().first()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> UserId:
        """Insere un utilisateur et retourne l'ID genere."""
        model = self._to_model(user)
        async with self._session(conflict_details={"email": user.email}) as session:
            session.add(model)
            await session.commit()
        if not model.id:
            raise InternalError("Failed to get inserted User id")
        return UserId(model.id)

    async def update(self, user_id: UserId, user: User) -> bool:
        """Met a jour nom et email d'un utilisateur actif."""
        statement = (
            active(update(UserModel).where(UserModel.id == self._raw_id(user_id)), UserModel)
            .values(
                name=user.name,
                email=user.email,
                updated_at=to_storage(user.updated_at or utcnow()),
            )
            .execution_options(synchronize_session=False)
        )
        async with self._session(conflict_details={"email": user.email}) as session:
            result = await session.execute(statement)
            await session.commit()
        return result.rowcount > 0

    async def delete(self, user_id: UserId) -> bool:
        """Pose deleted_at si l'utilisateur est encore actif."""
        now = to_storage(utcnow())
        statement = (
            active(update(UserModel).where(UserModel.id == self._raw_id(user_id)), UserModel)
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        async with self._session() as session:
            result = await session.execute(statement)
            await session.commit()
        return result.rowcount > 0

    async def find_all(self, pagination: Pagination) -> list[User]:
        """Liste les utilisateurs actifs, les plus recents d'abord."""
        statement = (
            active(select(UserModel), UserModel)
            .order_by(UserModel.created_at.desc())
            .offset(pagination.skip)
            .limit(pagination.limit)
        )
        async with self._session() as session:
            models = (await session.execute(statement)).scalars().all()
        return [self._to_entity(model) for model in models]

    async def count(self) -> int:
        """Compte les utilisateurs actifs."""
        statement = active(select(func.count()).select_from(UserModel), UserModel)
        async with self._session() as session:
            return (await session.execute(statement)).scalar_one()
