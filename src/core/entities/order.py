"""
Entite commande.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.core.value_objects.identifiers import OrderId, ProductId, UserId


@dataclass
class Order:
    """
    Commande d'un utilisateur pour un seul produit.

    total_price est calcule une seule fois a la creation (prix unitaire x
    quantite) et n'est jamais recalcule : la commande est un instantane de prix.

    Attributs :
        user_id : Utilisateur ayant passe la commande
        product_id : Produit commande
        quantity : Quantite commandee (> 0)
        total_price : Prix total fige a la creation
        id : Identifiant genere par le stockage
        created_at, updated_at, deleted_at : Horodatages du cycle de vie
    """

    user_id: UserId
    product_id: ProductId
    quantity: int
    total_price: float
    id: Optional[OrderId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Vrai si la commande a ete supprimee logiquement."""
        return self.deleted_at is not None
