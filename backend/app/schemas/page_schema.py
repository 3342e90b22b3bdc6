# backend/app/schemas/page_schema.py
"""
Esquemas de respuesta comunes a todas las páginas de listado.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List
from pydantic import BaseModel, Field, model_validator
import enum

class NotificationLevel(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"

class Notification(BaseModel):
    """Aviso efímero (toast) que acompaña a la respuesta."""
    level: NotificationLevel
    message: str

class EmptyState(str, enum.Enum):
    """Distingue una tabla vacía de una tabla sin coincidencias."""
    NONE = "none"
    NO_ROWS = "no_rows"
    NO_MATCHES = "no_matches"

class ListPageResponse(BaseModel):
    """Estado completo de una página de listado tras cargar y filtrar."""
    resource: str
    search: str = ""
    filters: Dict[str, str] = Field(default_factory=dict, description="Filtros de categoría activos")
    available_filters: Dict[str, List[str]] = Field(default_factory=dict)
    total: int = Field(..., description="Filas cargadas")
    visible_count: int = Field(..., description="Filas que pasan los filtros")
    rows: List[Dict[str, Any]]
    stats: Dict[str, Any]
    empty_state: EmptyState
    notifications: List[Notification] = []

class ActionResponse(BaseModel):
    """Resultado de una acción sin efecto sobre los datos (p. ej. generar un recibo)."""
    ok: bool
    notifications: List[Notification] = []

class PartialUpdate(BaseModel):
    """
    Base de los esquemas de actualización parcial.

    Un campo omitido no se toca; un null explícito solo se admite en las
    columnas opcionales listadas en NULLABLE_FIELDS.
    """
    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_on_required_fields(self):
        nulls = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.NULLABLE_FIELDS
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self
