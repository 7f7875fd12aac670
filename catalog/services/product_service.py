# catalog/services/product_service.py
from typing import List

from catalog.data.models.product import ProductModel
from catalog.domain.exceptions import NotFoundError
from catalog.repos.product_repo import ProductRepo
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use case'y katalogu produktow.
    Deleguje do repo, jedyna logika to zmiana ceny i blad "not found".
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    #commands
    def create_product(self, product: ProductModel) -> ProductModel:
        created = self.repo.save(product)
        logger.info(f"Created product {created.id} ({created.name})")
        return created

    def update_price(self, product_id: int, new_price: float) -> ProductModel:
        product = self._require(product_id)
        old_price = product.price
        product.price = new_price
        updated = self.repo.save(product)
        logger.info(f"Product {product_id} price changed from {old_price} to {new_price}")
        return updated

    #query
    def get_all_products(self) -> List[ProductModel]:
        return self.repo.find_all()

    def get_product_by_id(self, product_id: int) -> ProductModel:
        return self._require(product_id)

    def _require(self, product_id: int) -> ProductModel:
        lookup = self.repo.find_by_id(product_id)
        if not lookup.found:
            logger.warning(f"Product {product_id} not found")
        return lookup.or_raise(NotFoundError)
