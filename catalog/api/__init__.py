# catalog/api/__init__.py
from catalog.api.routers.health import router as health_router
from catalog.api.routers.products import create_products_router

__all__ = ["health_router", "create_products_router"]
