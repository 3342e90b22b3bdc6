# backend/app/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que se inyectan en los endpoints:
el gateway de datos, la configuración y la verificación de la clave de API.
En los tests basta con sobrescribir get_gateway para apuntar a otra base.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from app.core.config import Settings, settings
from app.crud.gateway import DataGateway
from app.db.database import AsyncSessionLocal

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)

_gateway = DataGateway(AsyncSessionLocal)


def get_gateway() -> DataGateway:
    """
    Dependencia de FastAPI para obtener el gateway de datos.
    Cada operación del gateway abre y cierra su propia sesión.
    """
    return _gateway


def get_settings() -> Settings:
    """
    Dependencia de FastAPI para obtener el objeto de configuración.
    """
    return settings


async def verify_api_key(
    api_key: str = Depends(api_key_header),
    current_settings: Settings = Depends(get_settings),
) -> str:
    """Rechaza la petición si la cabecera X-API-Key no coincide con API_KEY."""
    if api_key != current_settings.API_KEY:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
        )
    return api_key
