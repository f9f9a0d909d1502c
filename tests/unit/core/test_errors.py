"""
Tests de la taxonomie des erreurs du domaine.
"""

import pytest

from src.core.errors import (
    AlreadyExistsError,
    BusinessRuleError,
    DatabaseError,
    DomainError,
    ErrorKind,
    ExternalServiceError,
    ForbiddenError,
    HTTP_STATUS_BY_KIND,
    InternalError,
    InvalidError,
    NotFoundError,
    RequiredError,
    UnauthorizedError,
    as_database_error,
)


class TestHttpStatus:
    """Correspondance stable entre type d'erreur et statut HTTP."""

    @pytest.mark.parametrize(
        "error, status",
        [
            (NotFoundError("User", "x"), 404),
            (AlreadyExistsError("User", {"email": "a@b.c"}), 409),
            (InvalidError("quantity", "must be positive"), 400),
            (RequiredError("name"), 400),
            (UnauthorizedError("no token"), 401),
            (ForbiddenError("not yours"), 403),
            (BusinessRuleError("Insufficient stock"), 422),
            (ExternalServiceError("payments", "timeout"), 502),
            (DatabaseError("connection lost"), 503),
            (InternalError("no id"), 500),
        ],
    )
    def test_status_by_kind(self, error, status):
        assert error.http_status == status

    def test_every_kind_has_a_status(self):
        assert set(HTTP_STATUS_BY_KIND) == set(ErrorKind)


class TestMessages:
    """Messages et contexte structure."""

    def test_not_found(self):
        error = NotFoundError("Product", "abc")
        assert error.message == "Product abc not found"
        assert error.data == {"entity": "Product", "id": "abc"}

    def test_already_exists(self):
        error = AlreadyExistsError("User", {"email": "a@b.c"})
        assert error.message == "User already exists (email=a@b.c)"
        assert error.data == {"entity": "User", "email": "a@b.c"}

    def test_business_rule_keeps_data(self):
        error = BusinessRuleError("Insufficient stock", {"requested": 6, "available": 5})
        assert error.to_dict() == {
            "kind": "business_rule",
            "cause": "Insufficient stock",
            "data": {"requested": 6, "available": 5},
        }

    def test_data_is_optional(self):
        assert DatabaseError("boom").to_dict()["data"] is None

    def test_str_is_message(self):
        assert str(RequiredError("email")) == "email is required"


class TestAsDatabaseError:
    """Traduction des echecs de repository."""

    def test_wraps_unknown_exception(self):
        with pytest.raises(DatabaseError) as exc_info:
            with as_database_error("find user"):
                raise ConnectionError("socket closed")
        assert "find user failed" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_domain_errors_pass_through(self):
        with pytest.raises(NotFoundError):
            with as_database_error("find user"):
                raise NotFoundError("User", "x")

    def test_is_domain_error(self):
        assert issubclass(DatabaseError, DomainError)
