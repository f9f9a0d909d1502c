"""
Tests de l'identifiant type DomainId.

Tests couvrant:
- Construction sans validation et forme affichee identique a la valeur brute
- Egalite et hash par valeur
- Immutabilite et copies
"""

import copy
import pickle

import pytest

from src.core.value_objects.identifiers import (
    DomainId,
    OrderId,
    ProductId,
    UserId,
    is_object_id,
)

RAW = "65f1c0ffee0000000000abcd"


class TestDomainId:
    """Tests du comportement de valeur de DomainId."""

    def test_str_is_raw_value(self):
        """La forme affichee est la chaine brute."""
        assert str(UserId(RAW)) == RAW
        assert UserId(RAW).value == RAW

    def test_construction_never_fails(self):
        """Un ID mal forme se construit sans erreur."""
        user_id = UserId("pas-un-id")
        assert str(user_id) == "pas-un-id"

    def test_equality_by_value(self):
        """Deux IDs de meme valeur sont egaux et ont le meme hash."""
        assert UserId(RAW) == UserId(RAW)
        assert hash(UserId(RAW)) == hash(UserId(RAW))
        assert UserId(RAW) != UserId("65f1c0ffee0000000000abce")
        assert len({UserId(RAW), UserId(RAW)}) == 1

    def test_not_equal_to_plain_string(self):
        assert UserId(RAW) != RAW

    def test_aliases_share_the_same_runtime_type(self):
        """Les alias sont des vues typees sur DomainId."""
        assert isinstance(ProductId(RAW), DomainId)
        assert isinstance(OrderId(RAW), DomainId)

    def test_immutable(self):
        """Toute affectation d'attribut est refusee."""
        user_id = UserId(RAW)
        with pytest.raises(AttributeError):
            user_id._value = "autre"
        with pytest.raises(AttributeError):
            user_id.extra = 1

    def test_copy_returns_same_instance(self):
        user_id = UserId(RAW)
        assert copy.copy(user_id) is user_id
        assert copy.deepcopy(user_id) is user_id

    def test_pickle_roundtrip(self):
        assert pickle.loads(pickle.dumps(UserId(RAW))) == UserId(RAW)


class TestIsObjectId:
    """Tests du format natif de stockage."""

    @pytest.mark.parametrize("raw", [RAW, "ABCDEF0123456789abcdef01"])
    def test_valid(self, raw):
        assert is_object_id(raw)

    @pytest.mark.parametrize(
        "raw", ["", "abc", RAW + "0", RAW + "\n", "\n" + RAW, "zzzzzzzzzzzzzzzzzzzzzzzz"]
    )
    def test_invalid(self, raw):
        assert not is_object_id(raw)
