import pytest

from catalog.data.models.product import ProductModel
from catalog.domain.exceptions import NotFoundError


def test_create_then_get_returns_same_product(service):
    created = service.create_product(ProductModel(name="Widget", price=9.99))

    fetched = service.get_product_by_id(created.id)

    assert fetched.id == created.id
    assert fetched.name == "Widget"
    assert fetched.price == 9.99


def test_create_does_not_validate_price(service):
    created = service.create_product(ProductModel(name="Freebie", price=-1.0))

    assert created.price == -1.0


def test_get_all_products_counts(service):
    before = len(service.get_all_products())
    for i in range(3):
        service.create_product(ProductModel(name=f"P{i}", price=float(i)))

    assert len(service.get_all_products()) == before + 3


def test_get_all_products_empty(service):
    assert service.get_all_products() == []


def test_update_price_changes_only_price(service):
    created = service.create_product(ProductModel(name="Widget", price=9.99))

    updated = service.update_price(created.id, 12.50)

    assert updated.id == created.id
    assert updated.name == "Widget"
    assert updated.price == 12.50
    assert service.get_product_by_id(created.id).price == 12.50


def test_update_price_accepts_any_value(service):
    created = service.create_product(ProductModel(name="Widget", price=9.99))

    assert service.update_price(created.id, -5.0).price == -5.0


def test_get_missing_product_raises_not_found(service):
    with pytest.raises(NotFoundError, match="Product not found"):
        service.get_product_by_id(999)


def test_update_missing_product_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_price(999, 1.0)

    assert service.get_all_products() == []
