# backend/app/api/v1/endpoints/items.py
"""
Endpoints REST para artículos del inventario.

El listado admite ?stock=in_stock|low_stock|out_of_stock.
"""

from app.api.v1.endpoints.pages import build_page_router
from app.schemas import catalog_schema

router = build_page_router(
    "items",
    catalog_schema.ItemCreate,
    catalog_schema.ItemUpdate,
    catalog_schema.ItemResponse,
)
