"""
Identifiants types du domaine.

DomainId est un identifiant opaque base sur une chaine, parametre par un
type marqueur (UserTag, ProductTag, OrderTag) sans representation a l'execution.
Un verificateur de types refuse ainsi de passer un ProductId la ou un UserId
est attendu, alors que les deux enveloppent une simple chaine.

Usage:
    user_id = UserId("65f1c0ffee0000000000abcd")
    str(user_id)  # "65f1c0ffee0000000000abcd"
"""

import re
from typing import Any, Generic, TypeVar

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


class UserTag:
    """Marqueur des identifiants utilisateur."""


class ProductTag:
    """Marqueur des identifiants produit."""


class OrderTag:
    """Marqueur des identifiants commande."""


TagT = TypeVar("TagT")


class DomainId(Generic[TagT]):
    """
    Identifiant immutable enveloppant la valeur brute du stockage.

    La construction n'effectue aucune validation et ne peut pas echouer :
    la validation du format est de la responsabilite de l'appelant.
    L'egalite et le hash portent sur la chaine sous-jacente, et la forme
    affichee est identique a la chaine brute (aller-retour direct en JSON).
    """

    __slots__ = ("_value",)

    def __init__(self, raw: str) -> None:
        object.__setattr__(self, "_value", str(raw))

    @property
    def value(self) -> str:
        """Valeur brute de l'identifiant."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (DomainId, (self._value,))

    def __copy__(self) -> "DomainId[TagT]":
        return self

    def __deepcopy__(self, memo: dict) -> "DomainId[TagT]":
        return self

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"DomainId({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DomainId):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


UserId = DomainId[UserTag]
ProductId = DomainId[ProductTag]
OrderId = DomainId[OrderTag]


def is_object_id(raw: str) -> bool:
    """Verifie qu'une chaine a la forme native du stockage (24 caracteres hexa)."""
    return _OBJECT_ID_RE.fullmatch(raw) is not None
