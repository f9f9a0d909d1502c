"""
Module de persistance SQL asynchrone pour OrderDesk.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Engine asynchrone, session factory, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- soft_delete.py : Filtre de suppression logique et conversions UTC
- repositories/ : Implementations des ports repository

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite+aiosqlite:///orderdesk.db")
    await init_db(engine)
"""

from src.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from src.infrastructure.persistence.models import OrderModel, ProductModel, UserModel

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "UserModel",
    "ProductModel",
    "OrderModel",
]
