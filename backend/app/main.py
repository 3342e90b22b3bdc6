# backend/app/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo el logging, el registro de rutas, la documentación automática
y los eventos del ciclo de vida de la aplicación.
"""

import logging

from fastapi import Depends, FastAPI

from app.api import deps
from app.core.config import settings  # Configuración centralizada de la aplicación
from app.core.exceptions import GatewayError
from app.core.logging_config import setup_logging
from app.api.v1.api_router import api_router_v1  # Router principal de la API v1
from app.crud.gateway import DataGateway
from app.db.database import init_db

setup_logging()
logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API de gestión para clientes, proveedores, inventario, pedidos, documentos y pagos",
)

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

# El prefijo se obtiene de settings (típicamente "/api/v1")
app.include_router(api_router_v1, prefix=settings.API_V1_STR)


# ========================================
# ENDPOINTS RAÍZ Y VERIFICACIÓN DE ESTADO
# ========================================

@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Molant ICT Business API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


@app.get("/health", tags=["Root"])
async def health_check(gateway: DataGateway = Depends(deps.get_gateway)):
    """Comprueba que el almacén de datos responde."""
    try:
        await gateway.count("clients")
    except GatewayError as e:
        logger.error(f"❌ HEALTH: El almacén no responde: {e}")
        return {"status": "degraded", "database": "unreachable"}
    return {"status": "ok", "database": "ok"}

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.

    Con CREATE_TABLES_ON_STARTUP=true crea las tablas que falten; en
    producción el esquema se gestiona fuera de la aplicación.
    """
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_db()
        logger.info("✅ Tablas de la base de datos verificadas")
    logger.info(f"🚀 {settings.PROJECT_NAME} v{settings.PROJECT_VERSION} iniciado")
