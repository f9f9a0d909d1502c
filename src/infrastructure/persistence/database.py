"""
Configuration de la base de donnees asynchrone pour OrderDesk.

Ce module fournit :
- Engine SQLAlchemy asynchrone (aiosqlite par defaut, toute URL async acceptee)
- Session factory partagee par tous les repositories
- Fonction d'initialisation des tables

La base de donnees est configuree via ORDERDESK_DATABASE_URL
(defaut: sqlite+aiosqlite:///orderdesk.db).
"""

from pathlib import Path

from loguru import logger
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

_SQLITE_PREFIX = "sqlite+aiosqlite:///"


def create_db_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Cree l'engine asynchrone.

    Pour une URL SQLite fichier, le repertoire parent est cree si necessaire.

    Args:
        database_url: URL SQLAlchemy asynchrone
        echo: Journalise les requetes SQL emises
    """
    if database_url.startswith(_SQLITE_PREFIX) and ":memory:" not in database_url:
        db_path = Path(database_url[len(_SQLITE_PREFIX):])
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory asynchrone.

    Chaque operation de repository ouvre sa propre session : aucune session
    n'est conservee entre deux requetes.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, puis cree les tables et index manquants.
    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from src.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.debug("Tables initialisees", url=str(engine.url))
