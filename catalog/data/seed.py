# catalog/data/seed.py
from catalog.data.models.product import ProductModel
from catalog.repos.product_repo import ProductRepo
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"name": "Keyboard", "price": 199.99},
    {"name": "Mouse", "price": 49.50},
    {"name": "Monitor", "price": 899.00},
]


def seed(repo: ProductRepo) -> int:
    # not forcing: only seed if empty
    if repo.find_all():
        return 0
    for data in DEMO_PRODUCTS:
        repo.save(ProductModel(**data))
    logger.info(f"Seeded {len(DEMO_PRODUCTS)} demo products")
    return len(DEMO_PRODUCTS)
