# backend/app/schemas/technician_schema.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.page_schema import PartialUpdate

class TechnicianBase(BaseModel):
    name: str = Field(..., min_length=1)
    contact: str = Field(..., min_length=1)
    service_ids: List[str] = Field(default_factory=list, description="Servicios que puede realizar")
    is_available: bool = True

class TechnicianCreate(TechnicianBase):
    pass

class TechnicianUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    contact: Optional[str] = Field(None, min_length=1)
    service_ids: Optional[List[str]] = None
    is_available: Optional[bool] = None

class TechnicianResponse(TechnicianBase):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
