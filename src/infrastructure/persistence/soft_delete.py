"""
Convention de suppression logique et horodatage UTC.

Un enregistrement est supprime quand deleted_at est renseigne. Toute requete
de lecture, de listing, de comptage ou de mise a jour passe par active()
pour ignorer ces enregistrements ; il n'existe pas de table separee pour les
elements supprimes.

Les horodatages du domaine sont des datetime UTC avec fuseau. Ils sont
lies aux requetes avec leur fuseau UTC (colonnes DateTime(timezone=True)).
SQLite ne conserve pas le fuseau : les valeurs lues sans fuseau sont
reetiquetees UTC.
"""

from datetime import datetime, timezone
from typing import Optional, TypeVar

StatementT = TypeVar("StatementT")


def active(statement: StatementT, model) -> StatementT:
    """Ajoute le filtre 'deleted_at IS NULL' a un select ou un update."""
    return statement.where(model.deleted_at.is_(None))


def utcnow() -> datetime:
    """Instant courant en UTC (avec fuseau)."""
    return datetime.now(timezone.utc)


def to_storage(value: Optional[datetime]) -> Optional[datetime]:
    """Convertit un datetime du domaine en UTC avec fuseau pour le stockage.

    Une valeur sans fuseau est consideree comme deja exprimee en UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def from_storage(value: Optional[datetime]) -> Optional[datetime]:
    """Reetiquette en UTC un datetime lu depuis le stockage."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
