# backend/app/api/v1/endpoints/services.py
"""
Endpoints REST para servicios ofrecidos.

El listado admite ?cost=low|medium|high.
"""

from app.api.v1.endpoints.pages import build_page_router
from app.schemas import catalog_schema

router = build_page_router(
    "services",
    catalog_schema.ServiceCreate,
    catalog_schema.ServiceUpdate,
    catalog_schema.ServiceResponse,
)
