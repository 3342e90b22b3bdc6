# backend/app/api/v1/api_router.py
"""
Este archivo contiene el router principal para la API versión 1.

Se encarga de registrar y configurar todos los routers de la versión 1 de la API.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from app.api.v1.endpoints import (
    clients,
    vendors,
    items,
    services,
    technicians,
    orders,
    documents,
    payments,
    dashboard,
    reports,
    navigation,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL V1
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# GESTIÓN: clientes, proveedores, catálogo y técnicos
api_router_v1.include_router(clients.router, prefix="/clients", tags=["Clients"])
api_router_v1.include_router(vendors.router, prefix="/vendors", tags=["Vendors"])
api_router_v1.include_router(items.router, prefix="/items", tags=["Items"])
api_router_v1.include_router(services.router, prefix="/services", tags=["Services"])
api_router_v1.include_router(technicians.router, prefix="/technicians", tags=["Technicians"])

# OPERACIONES: pedidos, documentos y pagos
api_router_v1.include_router(orders.router, prefix="/orders", tags=["Orders"])
api_router_v1.include_router(documents.router, prefix="/documents", tags=["Documents"])
api_router_v1.include_router(payments.router, prefix="/payments", tags=["Payments"])

# PANEL, INFORMES Y NAVEGACIÓN
api_router_v1.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
api_router_v1.include_router(reports.router, prefix="/reports", tags=["Reports"])
api_router_v1.include_router(navigation.router, prefix="/navigation", tags=["Navigation"])
