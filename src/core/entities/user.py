"""
Entite utilisateur.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.core.value_objects.identifiers import UserId


@dataclass
class User:
    """
    Un client pouvant passer des commandes.

    L'email est unique parmi les utilisateurs non supprimes. L'absence de
    deleted_at signifie que l'utilisateur est actif.

    Attributs :
        id : Identifiant genere par le stockage a l'insertion (None avant)
        name : Nom affiche
        email : Adresse email normalisee (minuscules)
        created_at : Date de creation
        updated_at : Date de derniere modification
        deleted_at : Date de suppression logique (None si actif)
    """

    name: str
    email: str
    id: Optional[UserId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Vrai si l'utilisateur a ete supprime logiquement."""
        return self.deleted_at is not None
