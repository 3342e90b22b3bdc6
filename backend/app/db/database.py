# backend/app/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con el almacén relacional usando SQLAlchemy
asíncrono y define los componentes básicos que serán utilizados por toda la
aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)

La función get_gateway() vive en app/api/deps.py para mantener las
dependencias de FastAPI separadas de la configuración.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from app.core.config import settings # Importamos nuestra configuración


def _on_sqlite_connect(dbapi_conn, _conn_record):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys = ON;")
    cur.close()


def make_engine(url: str) -> AsyncEngine:
    """Crea un motor asíncrono para la URL indicada."""
    async_engine = create_async_engine(url, pool_pre_ping=True)
    if async_engine.dialect.name == "sqlite":
        # SQLite no aplica ON DELETE CASCADE sin este pragma
        event.listen(async_engine.sync_engine, "connect", _on_sqlite_connect)
    return async_engine


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False es importante para que los objetos sigan siendo
    # utilizables después de que la transacción se haya confirmado.
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Crear el motor de base de datos asíncrono
engine = make_engine(settings.DATABASE_URL)

AsyncSessionLocal = make_session_factory(engine)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


def register_models() -> None:
    """Importa todos los modelos para que queden registrados en Base.metadata."""
    from app.db.models import (  # noqa: F401
        client_model,
        vendor_model,
        catalog_model,
        technician_model,
        order_model,
        document_model,
        payment_model,
    )


async def init_db(bind: AsyncEngine = None) -> None:
    """Crea las tablas que falten. Las vistas agregadas son consultas, no tablas."""
    register_models()
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def new_id() -> str:
    """Identificador textual (UUID4) para nuevas filas."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
