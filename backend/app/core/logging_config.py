# backend/app/core/logging_config.py
"""
Configuración del logging de la aplicación a partir de settings.
"""

import logging

from app.core.config import settings


def setup_logging(level: str = None, fmt: str = None) -> None:
    """Configura el logger raíz una sola vez con nivel y formato de settings."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=fmt or settings.LOG_FORMAT,
    )
    # SQLAlchemy es muy verboso en DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
