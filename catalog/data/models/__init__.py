#import modeli zeby SQLAlchemy je zarejestrowal w Base.metadata
from catalog.data.models.product import ProductModel

__all__ = ["ProductModel"]
