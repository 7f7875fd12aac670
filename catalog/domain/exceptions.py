# catalog/domain/exceptions.py


class CatalogError(Exception):
    """Base class for catalog errors."""


class NotFoundError(CatalogError):
    """Requested product id has no record."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message)
