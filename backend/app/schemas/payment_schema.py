# backend/app/schemas/payment_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.page_schema import PartialUpdate

class PaymentBase(BaseModel):
    client_id: str
    order_id: str
    amount_paid: float = Field(..., gt=0, description="Importe abonado")

class PaymentCreate(PaymentBase):
    """El saldo se calcula a partir del total del pedido y los pagos previos."""
    payment_date: Optional[datetime] = None

class PaymentUpdate(PartialUpdate):
    amount_paid: Optional[float] = Field(None, gt=0)
    balance: Optional[float] = None
    payment_date: Optional[datetime] = None

class PaymentResponse(PaymentBase):
    id: str
    balance: float
    payment_date: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
