# backend/app/api/v1/endpoints/vendors.py
"""
Endpoints REST para proveedores de artículos y servicios.
"""

from app.api.v1.endpoints.pages import build_page_router
from app.schemas import vendor_schema

router = build_page_router(
    "vendors",
    vendor_schema.VendorCreate,
    vendor_schema.VendorUpdate,
    vendor_schema.VendorResponse,
)
