# catalog/repos/product_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from catalog.data.models.product import ProductModel
from catalog.domain.lookup import Lookup
from catalog.utils.logging import get_logger

logger = get_logger(__name__)


class ProductRepo:
    """
    Storage gateway dla produktow.
    Kazda operacja otwiera i zamyka wlasna sesje, jeden commit na zapis.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def save(self, product: ProductModel) -> ProductModel:
        # merge: brak id -> INSERT (id z bazy), jest id -> nadpisanie rekordu
        with self.session_factory() as db:
            stored = db.merge(product)
            db.commit()
            db.refresh(stored)
            logger.debug(f"Saved product {stored.id}")
            return stored

    def find_all(self) -> List[ProductModel]:
        with self.session_factory() as db:
            return list(
                db.execute(select(ProductModel).order_by(ProductModel.id)).scalars().all()
            )

    def find_by_id(self, product_id: int) -> Lookup[ProductModel]:
        with self.session_factory() as db:
            product = db.get(ProductModel, product_id)
            if product is None:
                logger.debug(f"Product {product_id} not in store")
                return Lookup.missing()
            return Lookup.of(product)
