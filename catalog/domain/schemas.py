# catalog/domain/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Schema dla tworzenia produktu. id jest ignorowane, nadaje je baza."""
    id: int | None = Field(None, description="Ignorowane przy tworzeniu")
    name: str = Field(..., description="Nazwa produktu")
    price: float = Field(..., allow_inf_nan=False, description="Cena produktu")


class PriceUpdateIn(BaseModel):
    """Schema dla zmiany ceny. Z body brana jest tylko cena."""
    id: int | None = None
    name: str | None = None
    price: float = Field(..., allow_inf_nan=False, description="Nowa cena produktu")


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""
    id: int
    name: str
    price: float

    model_config = ConfigDict(from_attributes=True)


class HealthOut(BaseModel):
    status: str
