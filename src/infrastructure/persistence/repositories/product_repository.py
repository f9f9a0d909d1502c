"""
Implementation SQLModel du repository Product.

Implemente l'interface IProductRepository. La reservation de stock est une
unique instruction UPDATE conditionnelle :

    UPDATE products SET stock = stock + :delta
    WHERE id = :id AND deleted_at IS NULL AND stock + :delta >= 0

Le nombre de lignes modifiees indique si la reservation a eu lieu.
"""

import json
from typing import Optional

from sqlalchemy import func, update
from sqlmodel import select

from src.core.entities.product import Product, ProductMetadata, ProductStatus
from src.core.errors import InternalError
from src.core.ports.repositories import IProductRepository
from src.core.value_objects.identifiers import ProductId
from src.core.value_objects.pagination import Pagination
from src.infrastructure.persistence.models import ProductModel
from src.infrastructure.persistence.repositories.base import SQLModelRepository
from src.infrastructure.persistence.soft_delete import (
    active,
    from_storage,
    to_storage,
    utcnow,
)


def _tags_json(metadata: ProductMetadata) -> Optional[str]:
    return json.dumps(list(metadata.tags)) if metadata.tags else None


class SQLModelProductRepository(SQLModelRepository, IProductRepository):
    """
    Repository SQLModel pour les produits.

    Implemente IProductRepository avec conversion bidirectionnelle
    entre l'entite Product (domaine) et ProductModel (persistance).
    """

    entity_name = "Product"

    def _to_entity(self, model: ProductModel) -> Product:
        """Convertit un modele DB en entite domaine."""
        return Product(
            id=ProductId(model.id),
            name=model.name,
            price=model.price,
            stock=model.stock,
            status=ProductStatus(model.status),
            metadata=ProductMetadata(
                description=model.description,
                category=model.category,
                tags=tuple(model.tags),
                sku=model.sku,
            ),
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
            deleted_at=from_storage(model.deleted_at),
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Convertit une entite domaine en modele DB (l'ID est genere)."""
        now = utcnow()
        return ProductModel(
            name=entity.name,
            price=entity.price,
            stock=entity.stock,
            status=entity.status.value,
            description=entity.metadata.description,
            category=entity.metadata.category,
            tags_json=_tags_json(entity.metadata),
            sku=entity.metadata.sku,
            created_at=to_storage(entity.created_at or now),
            updated_at=to_storage(entity.updated_at or now),
        )

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Recupere un produit actif par son ID."""
        statement = active(
            select(ProductModel).where(ProductModel.id == self._raw_id(product_id)),
            ProductModel,
        )
        async with self._session() as session:
            model = (await session.execute(statement)).scalars().first()
        return self._to_entity(model) if model else None

    async def find_all(self, pagination: Pagination) -> list[Product]:
        """Liste les produits actifs, les plus recents d'abord."""
        statement = (
            active(select(ProductModel), ProductModel)
            .order_by(ProductModel.created_at.desc())
            .offset(pagination.skip)
            .limit(pagination.limit)
        )
        async with self._session() as session:
            models = (await session.execute(statement)).scalars().all()
        return [self._to_entity(model) for model in models]

    async def create(self, product: Product) -> ProductId:
        """Insere un produit et retourne l'ID genere."""
        model = self._to_model(product)
        async with self._session(conflict_details={"sku": product.metadata.sku}) as session:
            session.add(model)
            await session.commit()
        if not model.id:
            raise InternalError("Failed to get inserted Product id")
        return ProductId(model.id)

    async def update_metadata(
        self, product_id: ProductId, metadata: ProductMetadata
    ) -> bool:
        """Remplace les metadonnees d'un produit actif."""
        statement = (
            active(
                update(ProductModel).where(ProductModel.id == self._raw_id(product_id)),
                ProductModel,
            )
            .values(
                description=metadata.description,
                category=metadata.category,
                tags_json=_tags_json(metadata),
                sku=metadata.sku,
                updated_at=to_storage(utcnow()),
            )
            .execution_options(synchronize_session=False)
        )
        async with self._session(conflict_details={"sku": metadata.sku}) as session:
            result = await session.execute(statement)
            await session.commit()
        return result.rowcount > 0

    async def update_stock(self, product_id: ProductId, delta: int) -> bool:
        """Increment atomique et conditionnel du stock (aucune lecture prealable)."""
        statement = (
            active(
                update(ProductModel).where(
                    ProductModel.id == self._raw_id(product_id),
                    ProductModel.stock + delta >= 0,
                ),
                ProductModel,
            )
            .values(stock=ProductModel.stock + delta, updated_at=to_storage(utcnow()))
            .execution_options(synchronize_session=False)
        )
        async with self._session() as session:
            result = await session.execute(statement)
            await session.commit()
        return result.rowcount > 0

    async def delete(self, product_id: ProductId) -> bool:
        """Pose deleted_at si le produit est encore actif."""
        now = to_storage(utcnow())
        statement = (
            active(
                update(ProductModel).where(ProductModel.id == self._raw_id(product_id)),
                ProductModel,
            )
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        async with self._session() as session:
            result = await session.execute(statement)
            await session.commit()
        return result.rowcount > 0

    async def count(self) -> int:
        """Compte les produits actifs."""
        statement = active(select(func.count()).select_from(ProductModel), ProductModel)
        async with self._session() as session:
            return (await session.execute(statement)).scalar_one()
