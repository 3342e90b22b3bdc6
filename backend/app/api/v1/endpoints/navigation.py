# backend/app/api/v1/endpoints/navigation.py
"""
Menú de navegación del panel (estático, sin consultas).
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query

from app.core.navigation import NAVIGATION, active_section

router = APIRouter()


@router.get("/")
async def read_navigation(path: Optional[str] = Query(None, description="Ruta actual para marcar la sección activa")) -> Dict[str, Any]:
    entries: List[Dict[str, Any]] = NAVIGATION
    return {"entries": entries, "active": active_section(path) if path else ""}
