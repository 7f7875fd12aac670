from sqlalchemy import Column, Float, Integer, String

from catalog.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"ProductModel(id={self.id!r}, name={self.name!r}, price={self.price!r})"
