# backend/app/schemas/catalog_schema.py
"""
Esquemas Pydantic para el catálogo: artículos (Item) y servicios (Service).
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.page_schema import PartialUpdate

# ========================================
# ARTÍCULOS
# ========================================

class ItemBase(BaseModel):
    """Propiedades comunes de un artículo de inventario."""
    name: str = Field(..., min_length=1)
    vendor_id: Optional[str] = None
    buy_price: float = Field(..., ge=0, description="Precio de compra")
    sell_price: float = Field(..., ge=0, description="Precio de venta")
    stock_qty: int = Field(0, ge=0, description="Unidades en stock")
    warranty: Optional[str] = None

class ItemCreate(ItemBase):
    pass

class ItemUpdate(PartialUpdate):
    NULLABLE_FIELDS = frozenset({"vendor_id", "warranty"})

    name: Optional[str] = Field(None, min_length=1)
    vendor_id: Optional[str] = None
    buy_price: Optional[float] = Field(None, ge=0)
    sell_price: Optional[float] = Field(None, ge=0)
    stock_qty: Optional[int] = Field(None, ge=0)
    warranty: Optional[str] = None

class ItemResponse(ItemBase):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

# ========================================
# SERVICIOS
# ========================================

class ServiceBase(BaseModel):
    """Propiedades comunes de un servicio ofrecido."""
    name: str = Field(..., min_length=1)
    vendor_id: Optional[str] = None
    cost: float = Field(..., ge=0)

class ServiceCreate(ServiceBase):
    pass

class ServiceUpdate(PartialUpdate):
    NULLABLE_FIELDS = frozenset({"vendor_id"})

    name: Optional[str] = Field(None, min_length=1)
    vendor_id: Optional[str] = None
    cost: Optional[float] = Field(None, ge=0)

class ServiceResponse(ServiceBase):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
