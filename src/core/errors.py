"""
Taxonomie des erreurs du domaine.

Chaque operation du domaine qui peut echouer leve exactement une sous-classe
de DomainError. Le type d'erreur (ErrorKind) determine de facon stable le
statut HTTP renvoye par la couche web, et le contexte structure (data) est
transporte a cote du message pour que les clients n'aient pas a le parser.

Correspondance des statuts :
- NOT_FOUND -> 404, ALREADY_EXISTS -> 409
- INVALID / REQUIRED -> 400
- UNAUTHORIZED -> 401, FORBIDDEN -> 403
- BUSINESS_RULE -> 422
- EXTERNAL_SERVICE -> 502, DATABASE -> 503
- INTERNAL -> 500
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Categories fermees d'erreurs du domaine."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID = "invalid"
    REQUIRED = "required"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    BUSINESS_RULE = "business_rule"
    EXTERNAL_SERVICE = "external_service"
    DATABASE = "database"
    INTERNAL = "internal"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ALREADY_EXISTS: 409,
    ErrorKind.INVALID: 400,
    ErrorKind.REQUIRED: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.BUSINESS_RULE: 422,
    ErrorKind.EXTERNAL_SERVICE: 502,
    ErrorKind.DATABASE: 503,
    ErrorKind.INTERNAL: 500,
}


class DomainError(Exception):
    """
    Erreur de base du domaine.

    Attributes:
        kind: Categorie de l'erreur (fixee par chaque sous-classe)
        message: Message lisible par un humain
        data: Contexte structure optionnel (entite, champ, quantites...)
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, data: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)

    @property
    def http_status(self) -> int:
        """Statut HTTP correspondant au type d'erreur."""
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict[str, Any]:
        """Representation serialisable (kind, cause, data)."""
        return {"kind": self.kind.value, "cause": self.message, "data": self.data}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, data={self.data!r})"


class NotFoundError(DomainError):
    """Une recherche par identifiant n'a trouve aucun enregistrement actif."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = str(entity_id)
        super().__init__(
            f"{entity} {self.entity_id} not found",
            {"entity": entity, "id": self.entity_id},
        )


class AlreadyExistsError(DomainError):
    """Violation d'unicite (email en double, SKU en double...)."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, entity: str, details: dict[str, Any]) -> None:
        self.entity = entity
        self.details = details
        rendered = ", ".join(f"{key}={value}" for key, value in details.items())
        super().__init__(
            f"{entity} already exists ({rendered})",
            {"entity": entity, **details},
        )


class InvalidError(DomainError):
    """Valeur d'entree rejetee par la logique du domaine."""

    kind = ErrorKind.INVALID

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}", {"field": field, "reason": reason})


class RequiredError(DomainError):
    """Champ obligatoire absent ou vide."""

    kind = ErrorKind.REQUIRED

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required", {"field": field})


class UnauthorizedError(DomainError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, reason: str) -> None:
        super().__init__(reason)


class ForbiddenError(DomainError):
    kind = ErrorKind.FORBIDDEN

    def __init__(self, reason: str) -> None:
        super().__init__(reason)


class BusinessRuleError(DomainError):
    """Violation d'un invariant metier (stock insuffisant, course perdue...)."""

    kind = ErrorKind.BUSINESS_RULE


class ExternalServiceError(DomainError):
    """Echec d'une dependance hors du controle du domaine."""

    kind = ErrorKind.EXTERNAL_SERVICE

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        super().__init__(f"{service}: {message}", {"service": service})


class DatabaseError(DomainError):
    """Echec de la couche de stockage, opaque pour le domaine."""

    kind = ErrorKind.DATABASE


class InternalError(DomainError):
    """Etat inattendu violant un invariant interne."""

    kind = ErrorKind.INTERNAL


@contextmanager
def as_database_error(operation: str) -> Iterator[None]:
    """
    Traduit les echecs d'un appel repository en DatabaseError.

    Les DomainError deja typees sont propagees telles quelles ; toute autre
    exception est enveloppee (et chainee) dans une DatabaseError.

    Usage:
        with as_database_error("find user"):
            user = await self._user_repo.find_by_id(user_id)
    """
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        raise DatabaseError(f"{operation} failed: {e}") from e
