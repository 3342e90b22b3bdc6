# backend/app/crud/document_crud.py
"""
Operaciones de creación para el recurso documents.

Incluye la generación del número de documento con el formato
PREFIJO/AÑO/NNNN, donde el prefijo depende del tipo de documento.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, Optional
import re

from app.crud.gateway import DataGateway
from app.schemas.document_schema import DOCUMENT_PREFIXES, DocumentCreate, DocumentType
from app.services.periods import utc_now


def format_document_number(prefix: str, sequence: int, year: int) -> str:
    """Ej.: format_document_number("PF", 7, 2025) -> "PF/2025/0007"."""
    return f"{prefix}/{year}/{sequence:04d}"


def next_sequence(existing_numbers: Iterable[str], prefix: str, year: int) -> int:
    """Siguiente secuencia para prefijo y año; ignora números con otro formato."""
    pattern = re.compile(rf"^{re.escape(prefix)}/{year}/(\d+)$")
    last = 0
    for number in existing_numbers:
        match = pattern.match(number or "")
        if match:
            last = max(last, int(match.group(1)))
    return last + 1


async def get_next_document_number(db: DataGateway, doc_type: DocumentType, now: Optional[datetime] = None) -> str:
    """
    Calcula el siguiente número para el tipo de documento en el año en curso.
    No se reserva el número: dos altas simultáneas pueden obtener el mismo.
    """
    doc_type = DocumentType(doc_type)
    year = (now or utc_now()).year
    prefix = DOCUMENT_PREFIXES[doc_type]
    rows = await db.select("documents", columns=["document_number"], filters={"type": doc_type.value})
    sequence = next_sequence((row["document_number"] for row in rows), prefix, year)
    return format_document_number(prefix, sequence, year)


async def create_document(db: DataGateway, document: DocumentCreate, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Crea un documento, numerándolo si no trae número."""
    payload = document.model_dump(mode="json", exclude_none=True)
    if document.due_date is not None:
        payload["due_date"] = document.due_date
    if not payload.get("document_number"):
        payload["document_number"] = await get_next_document_number(db, document.type, now)
    return await db.insert("documents", payload)
