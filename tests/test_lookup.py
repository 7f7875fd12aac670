import pytest

from catalog.domain.exceptions import NotFoundError
from catalog.domain.lookup import Lookup


def test_found_returns_value():
    assert Lookup.of("x").or_raise(NotFoundError) == "x"


def test_missing_raises_given_error():
    with pytest.raises(NotFoundError, match="Product not found"):
        Lookup.missing().or_raise(NotFoundError)


def test_of_none_is_missing():
    assert not Lookup.of(None).found
