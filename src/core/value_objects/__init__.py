"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- DomainId : Identifiant type par un marqueur (UserId, ProductId, OrderId)
- Pagination : Parametres page/limit bornes pour les listings
"""

from src.core.value_objects.identifiers import (
    DomainId,
    OrderId,
    OrderTag,
    ProductId,
    ProductTag,
    UserId,
    UserTag,
    is_object_id,
)
from src.core.value_objects.pagination import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    Pagination,
)

__all__ = [
    "DomainId",
    "UserId",
    "ProductId",
    "OrderId",
    "UserTag",
    "ProductTag",
    "OrderTag",
    "is_object_id",
    "Pagination",
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
]
