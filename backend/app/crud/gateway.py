# backend/app/crud/gateway.py
"""
Gateway de datos: contrato único de acceso al almacén relacional.

Todas las páginas, el dashboard y los informes hablan con la base de datos
a través de esta clase, nunca con sesiones de SQLAlchemy directamente.
El contrato es pequeño:

- select(recurso, filtros, joins, orden) -> lista de filas (dict)
- count(recurso, filtros) -> int
- insert / update / delete sobre tablas (las vistas son de solo lectura)

Cada llamada abre su propia sesión, de modo que varias consultas pueden
lanzarse en paralelo con asyncio.gather. Cualquier falla se traduce a
GatewayError (o RecordNotFound) para que las capas superiores no dependan
de excepciones de SQLAlchemy.
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.exceptions import GatewayError, ReadOnlyResource, RecordNotFound
from app.db.models.client_model import Client
from app.db.models.vendor_model import Vendor
from app.db.models.catalog_model import Item, Service
from app.db.models.technician_model import Technician
from app.db.models.order_model import Order, OrderDetail
from app.db.models.document_model import Document
from app.db.models.payment_model import Payment
from app.db.views import VIEWS

logger = logging.getLogger(__name__)

# ========================================
# REGISTRO DE RECURSOS
# ========================================

TABLES = {
    "clients": Client,
    "vendors": Vendor,
    "items": Item,
    "services": Service,
    "technicians": Technician,
    "orders": Order,
    "order_details": OrderDetail,
    "documents": Document,
    "payments": Payment,
}

# (recurso, relación) -> (recurso destino, columna FK local)
RELATIONS = {
    ("items", "vendors"): ("vendors", "vendor_id"),
    ("services", "vendors"): ("vendors", "vendor_id"),
    ("orders", "clients"): ("clients", "client_id"),
    ("order_details", "orders"): ("orders", "order_id"),
    ("order_details", "items"): ("items", "item_id"),
    ("order_details", "services"): ("services", "service_id"),
    ("documents", "clients"): ("clients", "client_id"),
    ("documents", "orders"): ("orders", "order_id"),
    ("documents", "vendors"): ("vendors", "vendor_id"),
    ("payments", "clients"): ("clients", "client_id"),
    ("payments", "orders"): ("orders", "order_id"),
}

Joins = Mapping[str, Sequence[str]]
FilterValue = Union[Any, Iterable[Any]]


def _plain(value: Any) -> Any:
    """Convierte Decimal a float para que las filas sean serializables y sumables."""
    if isinstance(value, Decimal):
        return float(value)
    return value


def _row_to_dict(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: _plain(value) for key, value in mapping.items()}


class DataGateway:
    """
    Implementación del gateway sobre SQLAlchemy asíncrono.

    Las filas se devuelven como diccionarios planos. Las relaciones pedidas
    en `joins` se anidan bajo el nombre de la relación (p. ej. row["clients"])
    con solo los campos solicitados, o None si la fila relacionada no existe.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    # ========================================
    # RESOLUCIÓN DE RECURSOS
    # ========================================

    def _source(self, resource: str):
        if resource in TABLES:
            return TABLES[resource].__table__
        if resource in VIEWS:
            return VIEWS[resource]
        raise GatewayError(f"Unknown resource '{resource}'", resource=resource)

    def _model(self, resource: str):
        if resource in VIEWS:
            raise ReadOnlyResource(resource)
        if resource not in TABLES:
            raise GatewayError(f"Unknown resource '{resource}'", resource=resource)
        return TABLES[resource]

    def _column(self, source, resource: str, field: str):
        try:
            return source.c[field]
        except KeyError:
            raise GatewayError(f"Unknown field '{field}' on {resource}", resource=resource)

    def _apply_filters(self, stmt, source, resource: str, filters: Optional[Mapping[str, FilterValue]]):
        for field, value in (filters or {}).items():
            column = self._column(source, resource, field)
            if isinstance(value, (list, tuple, set, frozenset)):
                stmt = stmt.where(column.in_(list(value)))
            elif value is None:
                stmt = stmt.where(column.is_(None))
            else:
                stmt = stmt.where(column == value)
        return stmt

    # ========================================
    # OPERACIONES DE LECTURA
    # ========================================

    async def select(
        self,
        resource: str,
        *,
        columns: Optional[Sequence[str]] = None,
        filters: Optional[Mapping[str, FilterValue]] = None,
        joins: Optional[Joins] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Obtiene filas de un recurso con filtros de igualdad, orden y relaciones."""
        source = self._source(resource)
        if columns:
            stmt = select(*[self._column(source, resource, name) for name in columns])
        else:
            stmt = select(source)
        stmt = self._apply_filters(stmt, source, resource, filters)
        if order_by:
            order_column = self._column(source, resource, order_by)
            stmt = stmt.order_by(order_column.desc() if descending else order_column.asc())
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                rows = [_row_to_dict(row) for row in result.mappings().all()]
                for relation, fields in (joins or {}).items():
                    await self._embed(session, resource, rows, relation, fields)
        except SQLAlchemyError as e:
            logger.error(f"❌ GATEWAY: Error consultando '{resource}': {e}")
            raise GatewayError(f"Failed to fetch {resource}", resource=resource) from e

        logger.debug(f"📋 GATEWAY: {len(rows)} filas de '{resource}'")
        return rows

    async def _embed(self, session, resource: str, rows: List[Dict[str, Any]], relation: str, fields: Sequence[str]) -> None:
        """Anida la relación `relation` en cada fila (join por clave foránea)."""
        if (resource, relation) not in RELATIONS:
            raise GatewayError(f"Unknown relation '{relation}' on {resource}", resource=resource)
        target, fk = RELATIONS[(resource, relation)]
        target_source = self._source(target)
        wanted = list(fields) or [c.name for c in target_source.columns]

        keys = {row.get(fk) for row in rows if row.get(fk) is not None}
        related: Dict[Any, Dict[str, Any]] = {}
        if keys:
            id_column = target_source.c["id"]
            stmt = select(id_column, *[self._column(target_source, target, f) for f in wanted if f != "id"])
            result = await session.execute(stmt.where(id_column.in_(keys)))
            for rel in result.mappings().all():
                related[rel["id"]] = {f: _plain(rel[f]) for f in wanted}

        for row in rows:
            row[relation] = related.get(row.get(fk))

    async def get(self, resource: str, record_id: str, joins: Optional[Joins] = None) -> Dict[str, Any]:
        """Obtiene una fila por identificador o lanza RecordNotFound."""
        rows = await self.select(resource, filters={"id": record_id}, joins=joins, limit=1)
        if not rows:
            raise RecordNotFound(resource, record_id)
        return rows[0]

    async def count(self, resource: str, filters: Optional[Mapping[str, FilterValue]] = None) -> int:
        """Cuenta las filas de un recurso que cumplen los filtros."""
        source = self._source(resource)
        stmt = self._apply_filters(select(func.count()).select_from(source), source, resource, filters)
        try:
            async with self._session_factory() as session:
                total = await session.scalar(stmt)
        except SQLAlchemyError as e:
            logger.error(f"❌ GATEWAY: Error contando '{resource}': {e}")
            raise GatewayError(f"Failed to count {resource}", resource=resource) from e
        return total or 0

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def insert(self, resource: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Inserta una fila y la devuelve tal como quedó guardada."""
        model = self._model(resource)
        table = model.__table__
        unknown = set(payload) - set(table.c.keys())
        if unknown:
            raise GatewayError(f"Unknown fields for {resource}: {', '.join(sorted(unknown))}", resource=resource)

        try:
            async with self._session_factory() as session:
                instance = model(**dict(payload))
                session.add(instance)
                await session.commit()
                await session.refresh(instance)
                created = self._instance_to_dict(instance)
        except SQLAlchemyError as e:
            logger.error(f"❌ GATEWAY: Error insertando en '{resource}': {e}")
            raise GatewayError(f"Failed to create {resource} record", resource=resource) from e

        logger.info(f"🆕 GATEWAY: Creado {resource} '{created['id']}'")
        return created

    async def update(self, resource: str, record_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Actualiza solo los campos indicados de una fila existente."""
        model = self._model(resource)
        unknown = set(payload) - set(model.__table__.c.keys())
        if unknown:
            raise GatewayError(f"Unknown fields for {resource}: {', '.join(sorted(unknown))}", resource=resource)

        try:
            async with self._session_factory() as session:
                instance = await session.get(model, record_id)
                if instance is None:
                    raise RecordNotFound(resource, record_id)
                for key, value in payload.items():
                    setattr(instance, key, value)
                await session.commit()
                await session.refresh(instance)
                updated = self._instance_to_dict(instance)
        except SQLAlchemyError as e:
            logger.error(f"❌ GATEWAY: Error actualizando {resource} '{record_id}': {e}")
            raise GatewayError(f"Failed to update {resource} record", resource=resource) from e

        logger.info(f"🔄 GATEWAY: Actualizado {resource} '{record_id}' ({', '.join(payload)})")
        return updated

    async def delete(self, resource: str, record_id: str) -> None:
        """
        Elimina una fila de forma irreversible. Las filas dependientes las
        borra (o desvincula) la base de datos mediante sus claves foráneas.
        """
        table = self._model(resource).__table__
        try:
            async with self._session_factory() as session:
                result = await session.execute(delete(table).where(table.c.id == record_id))
                if result.rowcount == 0:
                    raise RecordNotFound(resource, record_id)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ GATEWAY: Error eliminando {resource} '{record_id}': {e}")
            raise GatewayError(f"Failed to delete {resource} record", resource=resource) from e

        logger.info(f"🗑️ GATEWAY: Eliminado {resource} '{record_id}'")

    @staticmethod
    def _instance_to_dict(instance) -> Dict[str, Any]:
        return {c.name: _plain(getattr(instance, c.key)) for c in instance.__table__.columns}
