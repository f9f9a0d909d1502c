"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des donnees
- IUserRepository : Stockage des utilisateurs
- IProductRepository : Stockage des produits (dont la reservation de stock atomique)
- IOrderRepository : Stockage des commandes
"""

from src.core.ports.repositories import (
    IOrderRepository,
    IProductRepository,
    IUserRepository,
)

__all__ = [
    "IUserRepository",
    "IProductRepository",
    "IOrderRepository",
]
