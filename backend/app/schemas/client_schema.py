# backend/app/schemas/client_schema.py
"""
Esquemas Pydantic para el modelo Client.

Patrón de esquemas utilizado:
- ClientBase: Propiedades comunes compartidas
- ClientCreate: Para crear nuevos clientes (POST)
- ClientUpdate: Para actualizaciones parciales (PATCH)
- ClientResponse: Para respuestas de la API (GET)
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.page_schema import PartialUpdate

# ========================================
# ESQUEMA BASE
# ========================================

class ClientBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de cliente."""
    name: str = Field(..., min_length=1, description="Nombre o razón social")
    contact: str = Field(..., min_length=1, description="Teléfono o email de contacto")
    address: Optional[str] = None
    credit_limit: float = Field(0, ge=0, description="Límite de crédito")
    credit_days: int = Field(0, ge=0, description="Días de crédito")


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ClientCreate(ClientBase):
    """Esquema para crear un nuevo cliente."""
    pass


class ClientUpdate(PartialUpdate):
    """Esquema para actualizar un cliente. Todos los campos son opcionales."""
    NULLABLE_FIELDS = frozenset({"address"})

    name: Optional[str] = Field(None, min_length=1)
    contact: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    credit_limit: Optional[float] = Field(None, ge=0)
    credit_days: Optional[int] = Field(None, ge=0)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class ClientResponse(ClientBase):
    """Esquema para las respuestas de la API al leer clientes."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
