# backend/app/api/v1/endpoints/clients.py
"""
Endpoints REST para clientes.
"""

from app.api.v1.endpoints.pages import build_page_router
from app.schemas import client_schema

router = build_page_router(
    "clients",
    client_schema.ClientCreate,
    client_schema.ClientUpdate,
    client_schema.ClientResponse,
)
