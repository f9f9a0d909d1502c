"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel et une
session SQLAlchemy asynchrone.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit un session factory partage via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
- Applique la convention de suppression logique (deleted_at)
"""

from src.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)
from src.infrastructure.persistence.repositories.product_repository import (
    SQLModelProductRepository,
)
from src.infrastructure.persistence.repositories.order_repository import (
    SQLModelOrderRepository,
)

__all__ = [
    "SQLModelUserRepository",
    "SQLModelProductRepository",
    "SQLModelOrderRepository",
]
