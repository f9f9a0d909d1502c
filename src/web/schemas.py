"""
Schemas pydantic de l'API HTTP.

Les schemas de requete valident les entrees a la frontiere (quantite > 0,
prix >= 0...). Les schemas de reponse exposent les identifiants sous forme de
chaines nues et les horodatages en ISO-8601 UTC.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from src.core.entities.order import Order
from src.core.entities.product import Product, ProductMetadata, ProductStatus
from src.core.entities.user import User

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

ItemT = TypeVar("ItemT")


# ============================================================================
# Requetes
# ============================================================================


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(pattern=_EMAIL_PATTERN, max_length=320)


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, pattern=_EMAIL_PATTERN, max_length=320)


class ProductMetadataSchema(BaseModel):
    """Metadonnees produit (entree et sortie)."""

    description: Optional[str] = None
    category: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    sku: str = Field(min_length=1)

    def to_domain(self) -> ProductMetadata:
        return ProductMetadata(
            description=self.description,
            category=self.category,
            tags=tuple(self.tags),
            sku=self.sku,
        )

    @classmethod
    def from_domain(cls, metadata: ProductMetadata) -> "ProductMetadataSchema":
        return cls(
            description=metadata.description,
            category=metadata.category,
            tags=list(metadata.tags),
            sku=metadata.sku,
        )


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0)
    stock: int = Field(ge=0)
    status: ProductStatus = ProductStatus.DRAFT
    metadata: ProductMetadataSchema


class StockAdjustment(BaseModel):
    """Variation de stock : positive pour un reassort, negative pour un retrait."""

    delta: int


class OrderCreate(BaseModel):
    user_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)


# ============================================================================
# Reponses
# ============================================================================


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserOut":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class ProductOut(BaseModel):
    id: str
    name: str
    price: float
    stock: int
    status: ProductStatus
    metadata: ProductMetadataSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductOut":
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            stock=product.stock,
            status=product.status,
            metadata=ProductMetadataSchema.from_domain(product.metadata),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class OrderOut(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    total_price: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderOut":
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            product_id=str(order.product_id),
            quantity=order.quantity,
            total_price=order.total_price,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class Page(BaseModel, Generic[ItemT]):
    """Page de resultats, avec le total des enregistrements actifs quand il est connu."""

    items: list[ItemT]
    page: int
    limit: int
    total: Optional[int] = None
