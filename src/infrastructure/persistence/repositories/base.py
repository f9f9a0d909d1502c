"""
Socle commun des repositories SQLModel asynchrones.

Fournit l'ouverture d'une session par operation et la traduction des
exceptions SQLAlchemy en erreurs du domaine :
- IntegrityError -> AlreadyExistsError (contrainte d'unicite)
- toute autre SQLAlchemyError -> DatabaseError
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.core.errors import AlreadyExistsError, DatabaseError, InvalidError
from src.core.value_objects.identifiers import DomainId, is_object_id


class SQLModelRepository:
    """
    Classe de base des repositories.

    Le session factory est partage (pool de connexions de l'engine) ;
    chaque operation ouvre et ferme sa propre session.
    """

    entity_name: str = "Entity"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialise le repository avec un session factory asynchrone.

        Args :
            session_factory : Factory de sessions partagee
        """
        self._session_factory = session_factory

    def _raw_id(self, entity_id: DomainId) -> str:
        """Extrait la valeur brute d'un ID en verifiant son format natif."""
        raw = str(entity_id)
        if not is_object_id(raw):
            raise InvalidError("id", f"malformed {self.entity_name} id: {raw}")
        return raw

    @asynccontextmanager
    async def _session(
        self, conflict_details: Optional[dict[str, Any]] = None
    ) -> AsyncIterator[AsyncSession]:
        """
        Ouvre une session et traduit les erreurs du stockage.

        Args :
            conflict_details : Contexte joint a AlreadyExistsError en cas
                               de violation d'unicite
        """
        async with self._session_factory() as session:
            try:
                yield session
            except IntegrityError as e:
                logger.debug(f"Violation de contrainte sur {self.entity_name}: {e.orig}")
                raise AlreadyExistsError(
                    self.entity_name, conflict_details or {"constraint": str(e.orig)}
                ) from e
            except SQLAlchemyError as e:
                logger.error(f"Erreur base de donnees sur {self.entity_name}: {e}")
                raise DatabaseError(str(e)) from e
