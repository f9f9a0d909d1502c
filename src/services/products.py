"""
Service de gestion du catalogue produits.

Creation, mise a jour des metadonnees, ajustement du stock et suppression
logique. L'ajustement du stock utilise la meme mise a jour atomique que la
reservation faite a la creation d'une commande.
"""

from datetime import datetime, timezone

from loguru import logger

from src.core.entities.product import Product, ProductMetadata, ProductStatus
from src.core.errors import (
    BusinessRuleError,
    InvalidError,
    NotFoundError,
    RequiredError,
    as_database_error,
)
from src.core.ports.repositories import IProductRepository
from src.core.value_objects.identifiers import ProductId
from src.core.value_objects.pagination import Pagination


class ProductService:
    """Cas d'utilisation sur les produits."""

    def __init__(self, product_repo: IProductRepository) -> None:
        self._product_repo = product_repo

    async def create_product(
        self,
        name: str,
        price: float,
        stock: int,
        metadata: ProductMetadata,
        status: ProductStatus = ProductStatus.DRAFT,
    ) -> Product:
        """
        Cree un produit.

        Raises:
            RequiredError: Si le nom, la categorie ou le SKU est vide
            InvalidError: Si le prix ou le stock est negatif
            AlreadyExistsError: Si un produit actif utilise deja ce SKU
        """
        name = name.strip()
        if not name:
            raise RequiredError("name")
        if not metadata.sku.strip():
            raise RequiredError("metadata.sku")
        if not metadata.category.strip():
            raise RequiredError("metadata.category")
        if price < 0:
            raise InvalidError("price", "must be greater than or equal to 0")
        if stock < 0:
            raise InvalidError("stock", "must be greater than or equal to 0")

        now = datetime.now(timezone.utc)
        product = Product(
            name=name,
            price=price,
            stock=stock,
            status=status,
            metadata=metadata,
            created_at=now,
            updated_at=now,
        )
        with as_database_error("create product"):
            product.id = await self._product_repo.create(product)
        logger.info("Produit cree", product_id=str(product.id), sku=metadata.sku)
        return product

    async def get_product(self, product_id: ProductId) -> Product:
        """Recupere un produit actif ou leve NotFoundError."""
        with as_database_error("find product"):
            product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", str(product_id))
        return product

    async def list_products(self, pagination: Pagination) -> list[Product]:
        with as_database_error("list products"):
            return await self._product_repo.find_all(pagination)

    async def update_metadata(
        self, product_id: ProductId, metadata: ProductMetadata
    ) -> Product:
        """Remplace les metadonnees d'un produit et retourne le produit a jour."""
        with as_database_error("update product metadata"):
            updated = await self._product_repo.update_metadata(product_id, metadata)
        if not updated:
            raise NotFoundError("Product", str(product_id))
        return await self.get_product(product_id)

    async def adjust_stock(self, product_id: ProductId, delta: int) -> Product:
        """
        Ajoute delta au stock (reassort si positif, retrait si negatif).

        Raises:
            NotFoundError: Si le produit est inexistant ou supprime
            BusinessRuleError: Si le stock deviendrait negatif
        """
        with as_database_error("adjust stock"):
            adjusted = await self._product_repo.update_stock(product_id, delta)
        if adjusted:
            logger.info("Stock ajuste", product_id=str(product_id), delta=delta)
            return await self.get_product(product_id)

        # Aucun enregistrement modifie : produit absent ou stock insuffisant
        product = await self.get_product(product_id)
        raise BusinessRuleError(
            f"Stock cannot go negative: delta {delta}, available {product.stock}",
            {"delta": delta, "available": product.stock},
        )

    async def delete_product(self, product_id: ProductId) -> None:
        """
        Supprime logiquement un produit.

        Les commandes existantes referencant ce produit ne sont pas affectees.
        """
        with as_database_error("delete product"):
            deleted = await self._product_repo.delete(product_id)
        if not deleted:
            raise NotFoundError("Product", str(product_id))
        logger.info("Produit supprime", product_id=str(product_id))

    async def count_products(self) -> int:
        with as_database_error("count products"):
            return await self._product_repo.count()
