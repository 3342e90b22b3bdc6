# backend/app/schemas/document_schema.py
"""
Esquemas Pydantic para documentos comerciales.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.page_schema import PartialUpdate
import enum

class DocumentType(str, enum.Enum):
    PROFORMA = "proforma"
    DELIVERY_NOTE = "delivery_note"
    PAYMENT_STATEMENT = "payment_statement"
    RECEIPT = "receipt"
    JOB_CARD = "job_card"
    DIAGNOSIS = "diagnosis"

class DocumentStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DELIVERED = "delivered"
    PAID = "paid"

# Prefijo del número de documento según su tipo
DOCUMENT_PREFIXES = {
    DocumentType.PROFORMA: "PF",
    DocumentType.DELIVERY_NOTE: "DN",
    DocumentType.PAYMENT_STATEMENT: "PS",
    DocumentType.RECEIPT: "RC",
    DocumentType.JOB_CARD: "JC",
    DocumentType.DIAGNOSIS: "DG",
}

class DocumentBase(BaseModel):
    order_id: str
    client_id: str
    vendor_id: Optional[str] = None
    type: DocumentType
    status: DocumentStatus = DocumentStatus.PENDING
    due_date: Optional[date] = None
    file_path: Optional[str] = None

class DocumentCreate(DocumentBase):
    """Si no se envía número, se genera con el prefijo del tipo."""
    document_number: Optional[str] = Field(None, description="Formato PREFIJO/AÑO/0001")

class DocumentUpdate(PartialUpdate):
    NULLABLE_FIELDS = frozenset({"vendor_id", "due_date", "file_path"})

    vendor_id: Optional[str] = None
    status: Optional[DocumentStatus] = None
    due_date: Optional[date] = None
    file_path: Optional[str] = None
    document_number: Optional[str] = None

class DocumentResponse(DocumentBase):
    id: str
    document_number: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class DocumentStatusUpdate(BaseModel):
    """Esquema para actualizar únicamente el estado de un documento."""
    status: DocumentStatus
