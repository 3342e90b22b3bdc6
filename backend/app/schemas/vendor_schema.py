# backend/app/schemas/vendor_schema.py
"""
Esquemas Pydantic para proveedores.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.page_schema import PartialUpdate
import enum

class VendorType(str, enum.Enum):
    """Qué suministra el proveedor."""
    ITEM = "item"
    SERVICE = "service"
    BOTH = "both"

class VendorBase(BaseModel):
    name: str = Field(..., min_length=1)
    contact: str = Field(..., min_length=1)
    type: VendorType = VendorType.ITEM

class VendorCreate(VendorBase):
    pass

class VendorUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    contact: Optional[str] = Field(None, min_length=1)
    type: Optional[VendorType] = None

class VendorResponse(VendorBase):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
