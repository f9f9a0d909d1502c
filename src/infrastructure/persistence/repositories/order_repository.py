"""
Implementation SQLModel du repository Order.

Implemente l'interface IOrderRepository pour la persistance des commandes.
Les commandes ne sont jamais modifiees apres insertion, sauf leur propre
suppression logique.
"""

from typing import Optional

from sqlalchemy import func, update
from sqlmodel import select

from src.core.entities.order import Order
from src.core.errors import InternalError
from src.core.ports.repositories import IOrderRepository
from src.core.value_objects.identifiers import OrderId, ProductId, UserId
from src.core.value_objects.pagination import Pagination
from src.infrastructure.persistence.models import OrderModel
from src.infrastructure.persistence.repositories.base import SQLModelRepository
from src.infrastructure.persistence.soft_delete import (
    active,
    from_storage,
    to_storage,
    utcnow,
)


class SQLModelOrderRepository(SQLModelRepository, IOrderRepository):
    """
    Repository SQLModel pour les commandes.

    Implemente IOrderRepository avec conversion bidirectionnelle
    entre l'entite Order (domaine) et OrderModel (persistance).
    """

    entity_name = "Order"

    def _to_entity(self, model: OrderModel) -> Order:
        """Convertit un modele DB en entite domaine."""
        return Order(
            id=OrderId(model.id),
            user_id=UserId(model.user_id),
            product_id=ProductId(model.product_id),
            quantity=model.quantity,
            total_price=model.total_price,
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
            deleted_at=from_storage(model.deleted_at),
        )

    def _to_model(self, entity: Order) -> OrderModel:
        """Convertit une entite domaine en modele DB (l'ID est genere)."""
        now = utcnow()
        return OrderModel(
            user_id=str(entity.user_id),
            product_id=str(entity.product_id),
            quantity=entity.quantity,
            total_price=entity.total_price,
            created_at=to_storage(entity.created_at or now),
            updated_at=to_storage(entity.updated_at or now),
        )

    async def create(self, order: Order) -> OrderId:
        """Insere une commande et retourne l'ID genere."""
        model = self._to_model(order)
        async with self._session() as session:
            session.add(model)
            await session.commit()
        if not model.id:
            raise InternalError("Failed to get inserted Order id")
        return OrderId(model.id)

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Recupere une commande active par son ID."""
        statement = active(
            select(OrderModel).where(OrderModel.id == self._raw_id(order_id)), OrderModel
        )
        async with self._session() as session:
            model = (await session.execute(statement)).scalars().first()
        return self._to_entity(model) if model else None

    async def find_all(self, pagination: Pagination) -> list[Order]:
        """Liste les commandes actives, les plus recentes d'abord."""
        statement = active(select(OrderModel), OrderModel)
        return await self._fetch_page(statement, pagination)

    async def find_by_user_id(
        self, user_id: UserId, pagination: Pagination
    ) -> list[Order]:
        """Liste les commandes actives d'un utilisateur, les plus recentes d'abord."""
        statement = active(
            select(OrderModel).where(OrderModel.user_id == self._raw_id(user_id)),
            OrderModel,
        )
        return await self._fetch_page(statement, pagination)

    async def delete(self, order_id: OrderId) -> bool:
        """Pose deleted_at si la commande est encore active."""
        now = to_storage(utcnow())
        statement = (
            active(
                update(OrderModel).where(OrderModel.id == self._raw_id(order_id)),
                OrderModel,
            )
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        async with self._session() as session:
            result = await session.execute(statement)
            await session.commit()
        return result.rowcount > 0

    async def count(self) -> int:
        """Compte les commandes actives."""
        statement = active(select(func.count()).select_from(OrderModel), OrderModel)
        async with self._session() as session:
            return (await session.execute(statement)).scalar_one()

    async def _fetch_page(self, statement, pagination: Pagination) -> list[Order]:
        statement = (
            statement.order_by(OrderModel.created_at.desc())
            .offset(pagination.skip)
            .limit(pagination.limit)
        )
        async with self._session() as session:
            models = (await session.execute(statement)).scalars().all()
        return [self._to_entity(model) for model in models]
