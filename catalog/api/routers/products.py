# catalog/api/routers/products.py
from typing import List

from fastapi import APIRouter

from catalog.data.models.product import ProductModel
from catalog.domain.schemas import PriceUpdateIn, ProductIn, ProductOut
from catalog.services.product_service import ProductService


def create_products_router(service: ProductService) -> APIRouter:
    """
    Endpointy /api/products. Serwis podawany przy starcie aplikacji.
    NotFoundError nie jest tu lapany, leci jako 500.
    """
    router = APIRouter(prefix="/api/products", tags=["products"])

    @router.post("", response_model=ProductOut)
    def create_product(payload: ProductIn):
        # id z body ignorowane
        return service.create_product(ProductModel(name=payload.name, price=payload.price))

    @router.get("", response_model=List[ProductOut])
    def get_all_products():
        return service.get_all_products()

    @router.put("/{product_id}", response_model=ProductOut)
    def update_price(product_id: int, payload: PriceUpdateIn):
        return service.update_price(product_id, payload.price)

    @router.get("/{product_id}", response_model=ProductOut)
    def get_product(product_id: int):
        return service.get_product_by_id(product_id)

    return router
