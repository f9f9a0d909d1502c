"""
Entite produit et ses objets associes.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from src.core.value_objects.identifiers import ProductId


class ProductStatus(Enum):
    """Statut informatif d'un produit (non applique par la reservation de stock)."""

    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"
    OUT_OF_STOCK = "outofstock"


@dataclass(frozen=True)
class ProductMetadata:
    """Metadonnees descriptives d'un produit."""

    category: str
    sku: str
    description: Optional[str] = None
    tags: tuple[str, ...] = ()


@dataclass
class Product:
    """
    Un article du catalogue avec son prix et son stock.

    Le stock ne descend jamais sous zero : toute decrementation passe par
    la mise a jour atomique conditionnelle du repository.

    Attributs :
        id : Identifiant genere par le stockage
        name : Nom du produit
        price : Prix unitaire (>= 0)
        stock : Quantite disponible (>= 0)
        status : Statut informatif
        metadata : Description, categorie, tags et SKU
        created_at, updated_at, deleted_at : Horodatages du cycle de vie
    """

    name: str
    price: float
    stock: int
    metadata: ProductMetadata
    status: ProductStatus = ProductStatus.DRAFT
    id: Optional[ProductId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Vrai si le produit a ete supprime logiquement."""
        return self.deleted_at is not None
