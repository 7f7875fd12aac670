# catalog/main.py
from fastapi import FastAPI
import uvicorn

from catalog.api import create_products_router, health_router
from catalog.data.database import SessionLocal, engine, init_db
from catalog.data.seed import seed
from catalog.repos.product_repo import ProductRepo
from catalog.services.product_service import ProductService
from catalog.utils.logging import get_logger
from catalog.utils.settings import HOST, PORT, SEED_DEMO_PRODUCTS

logger = get_logger(__name__)


def build_default_service() -> ProductService:
    logger.info(f"Initializing database on {engine.url.render_as_string(hide_password=True)}")
    try:
        init_db(engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    repo = ProductRepo(SessionLocal)
    if SEED_DEMO_PRODUCTS:
        seed(repo)
    return ProductService(repo)


def create_app(service: ProductService | None = None) -> FastAPI:
    # wiring reczny: repo -> serwis -> router
    if service is None:
        service = build_default_service()

    app = FastAPI(
        title="Product Catalog Service",
        version="1.0.0",
    )

    app.include_router(health_router)
    app.include_router(create_products_router(service))

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
