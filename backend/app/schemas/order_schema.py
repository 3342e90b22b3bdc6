# backend/app/schemas/order_schema.py
"""
Se encarga de definir los esquemas Pydantic para los modelos Order y OrderDetail.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from datetime import datetime
import enum

from app.schemas.page_schema import PartialUpdate

class OrderStatus(str, enum.Enum):
    """Define los posibles estados de un pedido."""
    PENDING = "pending"
    APPROVED = "approved"
    DELIVERED = "delivered"
    COMPLETED = "completed"

class OrderType(str, enum.Enum):
    """Un pedido es de artículos o de servicios."""
    ITEM = "item"
    SERVICE = "service"

class OrderDetailBase(BaseModel):
    """Propiedades base para una línea de pedido."""
    item_id: Optional[str] = Field(None, description="Artículo de la línea")
    service_id: Optional[str] = Field(None, description="Servicio de la línea")
    quantity: int = Field(1, description="Cantidad", gt=0)
    unit_price: float = Field(..., description="Precio unitario", ge=0)

class OrderDetailCreate(OrderDetailBase):
    """Esquema para crear una línea. Debe referenciar un artículo o un servicio."""

    @model_validator(mode="after")
    def validate_reference(self):
        if (self.item_id is None) == (self.service_id is None):
            raise ValueError('La línea debe referenciar exactamente un artículo o un servicio')
        return self

class OrderDetail(OrderDetailBase):
    """Esquema de respuesta para una línea de pedido."""
    id: str
    order_id: str
    subtotal: float

    model_config = ConfigDict(from_attributes=True)

class OrderBase(BaseModel):
    """Propiedades base para un pedido."""
    client_id: str = Field(..., description="Cliente que realiza el pedido")
    type: OrderType = Field(..., description="Pedido de artículos o de servicios")
    total_amount: float = Field(0, description="Monto total del pedido", ge=0)
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Estado del pedido")

class OrderCreate(OrderBase):
    """Esquema para crear un pedido, opcionalmente con sus líneas."""
    details: List[OrderDetailCreate] = Field(default_factory=list, description="Líneas del pedido")

    @field_validator('total_amount')
    @classmethod
    def validate_total_amount(cls, v):
        return round(v, 2)

class OrderUpdate(PartialUpdate):
    """Actualización parcial de un pedido."""
    client_id: Optional[str] = None
    type: Optional[OrderType] = None
    total_amount: Optional[float] = Field(None, ge=0)
    status: Optional[OrderStatus] = None

class Order(OrderBase):
    """Esquema completo de respuesta para un pedido."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class OrderWithDetails(Order):
    details: List[OrderDetail] = []

class OrderStatusUpdate(BaseModel):
    """Esquema para actualizar únicamente el estado de un pedido."""
    status: OrderStatus = Field(..., description="Nuevo estado del pedido")
