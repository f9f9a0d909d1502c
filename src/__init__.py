"""
OrderDesk - Backend de gestion de commandes.

Ce package fournit la gestion des utilisateurs, des produits et des commandes,
avec une reservation de stock atomique lors de la creation d'une commande.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Persistance SQLModel (adaptateurs des ports repository)
- web/ et adapters/cli/ : Interfaces HTTP (FastAPI) et ligne de commande (Typer)
"""

__version__ = "0.1.0"
