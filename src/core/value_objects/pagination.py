"""
Objet valeur de pagination partage par les operations de listing.
"""

from dataclasses import dataclass

from src.core.errors import InvalidError

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


@dataclass(frozen=True)
class Pagination:
    """
    Parametres de pagination bornes.

    Attributs:
        page: Numero de page, a partir de 0 (une valeur negative est rejetee)
        limit: Taille de page, ramenee dans l'intervalle 1..100 a la construction
    """

    page: int = 0
    limit: int = DEFAULT_PAGE_LIMIT

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidError("page", "must be greater than or equal to 0")
        object.__setattr__(self, "limit", min(max(self.limit, 1), MAX_PAGE_LIMIT))

    @property
    def skip(self) -> int:
        """Nombre d'enregistrements a sauter."""
        return self.page * self.limit
