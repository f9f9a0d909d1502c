"""
Modeles SQLModel pour la base de donnees OrderDesk.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- users: Utilisateurs (email unique parmi les non supprimes)
- products: Produits avec prix, stock et metadonnees (SKU unique parmi les non supprimes)
- orders: Commandes avec prix total fige

Les identifiants sont generes a l'insertion sous forme de 24 caracteres
hexadecimaux. Les champs JSON (*_json) stockent des listes serialisees.
"""

import json
import secrets
from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, text
from sqlmodel import Field, Index, SQLModel

_ACTIVE_ONLY = text("deleted_at IS NULL")


def _utc_column() -> DateTime:
    """Type de colonne horodatage avec fuseau (timestamptz sous PostgreSQL)."""
    return DateTime(timezone=True)


def new_object_id() -> str:
    """Genere un identifiant de 24 caracteres hexadecimaux."""
    return secrets.token_hex(12)


class UserModel(SQLModel, table=True):
    """
    Modele representant un utilisateur.

    L'index unique partiel garantit l'unicite de l'email parmi les
    utilisateurs non supprimes.
    """

    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_active",
            "email",
            unique=True,
            sqlite_where=_ACTIVE_ONLY,
            postgresql_where=_ACTIVE_ONLY,
        ),
        Index("ix_users_deleted_created", "deleted_at", "created_at"),
    )

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    name: str
    email: str = Field(index=True)
    created_at: datetime = Field(sa_type=_utc_column())
    updated_at: datetime = Field(sa_type=_utc_column())
    deleted_at: Optional[datetime] = Field(default=None, sa_type=_utc_column())


class ProductModel(SQLModel, table=True):
    """
    Modele representant un produit.

    Les metadonnees (description, categorie, tags, SKU) sont aplaties en
    colonnes. La contrainte CHECK double la garantie de non-negativite
    du stock.
    """

    __tablename__ = "products"
    __table_args__ = (
        Index(
            "uq_products_sku_active",
            "sku",
            unique=True,
            sqlite_where=_ACTIVE_ONLY,
            postgresql_where=_ACTIVE_ONLY,
        ),
        Index("ix_products_deleted_created", "deleted_at", "created_at"),
        Index("ix_products_deleted_price", "deleted_at", "price"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    name: str
    price: float
    stock: int
    status: str = Field(default="draft")
    description: Optional[str] = None
    category: str
    tags_json: Optional[str] = None  # JSON: ["promo", "ete"]
    sku: str = Field(index=True)
    created_at: datetime = Field(sa_type=_utc_column())
    updated_at: datetime = Field(sa_type=_utc_column())
    deleted_at: Optional[datetime] = Field(default=None, sa_type=_utc_column())

    @property
    def tags(self) -> list[str]:
        """Retourne les tags deserialises."""
        if self.tags_json:
            return json.loads(self.tags_json)
        return []


class OrderModel(SQLModel, table=True):
    """
    Modele representant une commande.

    Pas de suppression en cascade : supprimer un utilisateur ou un produit
    ne touche pas aux commandes existantes.
    """

    __tablename__ = "orders"
    __table_args__ = (
        Index("ix_orders_deleted_created", "deleted_at", "created_at"),
        Index("ix_orders_user_deleted_created", "user_id", "deleted_at", "created_at"),
    )

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    user_id: str = Field(foreign_key="users.id", max_length=24)
    product_id: str = Field(foreign_key="products.id", index=True, max_length=24)
    quantity: int
    total_price: float
    created_at: datetime = Field(sa_type=_utc_column())
    updated_at: datetime = Field(sa_type=_utc_column())
    deleted_at: Optional[datetime] = Field(default=None, sa_type=_utc_column())
