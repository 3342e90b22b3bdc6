# backend/app/services/list_page.py
"""
Controlador genérico de páginas de listado.

Todas las entidades (clientes, proveedores, artículos, servicios, técnicos,
pedidos, documentos y pagos) siguen el mismo ciclo:

1. Cargar todas las filas (con relaciones para mostrar) en un orden estable.
2. Mantener en memoria el conjunto completo y el subconjunto visible.
3. Recalcular el subconjunto visible cada vez que cambian la búsqueda,
   los filtros de categoría o los datos base.
4. Calcular estadísticas de cabecera sobre el conjunto completo.
5. Borrar o actualizar un campo vía gateway y recargar todo.

Lo que cambia entre entidades se describe con PageConfig; el controlador
no conoce ninguna entidad concreta.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import logging

from app.core.exceptions import GatewayError
from app.crud.gateway import DataGateway
from app.schemas.page_schema import EmptyState, ListPageResponse
from app.services.notifications import Notifier
from app.services.periods import utc_now

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
RowPredicate = Callable[[Row, datetime], bool]

# Valor de filtro que equivale a "sin filtro"
ALL = "all"


def resolve_path(row: Mapping[str, Any], path: str) -> Any:
    """Lee un campo anidado con notación de puntos ("clients.name")."""
    value: Any = row
    for part in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def field_equals(field: str, expected: Any) -> RowPredicate:
    """Predicado de coincidencia exacta sobre un campo enumerado."""
    return lambda row, _now: row.get(field) == expected


def matches_search(row: Row, term: str, fields: Sequence[str]) -> bool:
    """Coincidencia por subcadena, sin distinguir mayúsculas, en cualquiera de los campos."""
    needle = term.lower()
    for path in fields:
        value = resolve_path(row, path)
        if value is not None and needle in str(value).lower():
            return True
    return False


class CategoryFilter:
    """
    Filtro de categoría: un nombre y un predicado por cada valor admitido.
    El valor "all" (o ausente) desactiva el filtro.
    """

    def __init__(self, name: str, options: Mapping[str, RowPredicate]):
        self.name = name
        self.options = dict(options)

    @classmethod
    def exact(cls, name: str, field: str, values: Sequence[str]) -> "CategoryFilter":
        return cls(name, {value: field_equals(field, value) for value in values})

    @property
    def values(self) -> List[str]:
        return [ALL] + list(self.options)

    def predicate(self, value: str) -> RowPredicate:
        if value not in self.options:
            raise ValueError(f"Invalid value '{value}' for filter '{self.name}'. Allowed: {', '.join(self.values)}")
        return self.options[value]


class PageConfig:
    """Descripción declarativa de una página de listado."""

    def __init__(
        self,
        resource: str,
        label: str,
        order_by: str,
        *,
        descending: bool = False,
        joins: Optional[Mapping[str, Sequence[str]]] = None,
        search_fields: Sequence[str] = (),
        filters: Sequence[CategoryFilter] = (),
        statistics: Optional[Callable[[List[Row], datetime], Dict[str, Any]]] = None,
        display_labels: Optional[Mapping[str, Tuple[str, str]]] = None,
        decorate: Optional[Callable[[Row, datetime], Row]] = None,
    ):
        self.resource = resource
        self.label = label
        self.order_by = order_by
        self.descending = descending
        self.joins = dict(joins or {})
        self.search_fields = list(search_fields)
        self.filters = {f.name: f for f in filters}
        self.statistics = statistics or (lambda rows, _now: {"total": len(rows)})
        # campo de salida -> (ruta anidada, etiqueta de respaldo)
        self.display_labels = dict(display_labels or {})
        self.decorate = decorate


class ListPageController:
    """
    Modelo de vista de una página de listado durante una petición.

    No hay actualizaciones optimistas: toda mutación termina recargando
    el conjunto completo, y si falla el estado visible no cambia.
    """

    def __init__(self, gateway: DataGateway, config: PageConfig, now: Optional[datetime] = None):
        self.gateway = gateway
        self.config = config
        self.now = now or utc_now()
        self.notifier = Notifier()
        self.rows: List[Row] = []
        self.visible: List[Row] = []
        self.search_term = ""
        self.active_filters: Dict[str, str] = {}
        self.loading = False
        self.last_error: Optional[GatewayError] = None

    # ========================================
    # CARGA
    # ========================================

    async def load(self) -> bool:
        """Carga todas las filas. Si falla, notifica y conserva lo que ya había (vacío al inicio)."""
        self.loading = True
        try:
            rows = await self.gateway.select(
                self.config.resource,
                joins=self.config.joins,
                order_by=self.config.order_by,
                descending=self.config.descending,
            )
        except GatewayError as e:
            self.last_error = e
            self.notifier.error(f"Failed to fetch {self.config.resource}", e)
            return False
        finally:
            self.loading = False

        self._set_rows([self.present(row) for row in rows])
        logger.debug(f"📋 PÁGINA {self.config.resource}: {len(self.rows)} filas cargadas")
        return True

    def present(self, row: Row) -> Row:
        """Añade etiquetas de relaciones (con respaldo) y campos derivados."""
        for output, (path, fallback) in self.config.display_labels.items():
            value = resolve_path(row, path)
            row[output] = value if value is not None else fallback
        if self.config.decorate is not None:
            row = self.config.decorate(row, self.now)
        return row

    def _set_rows(self, rows: List[Row]) -> None:
        self.rows = rows
        self._recompute()

    # ========================================
    # FILTRADO
    # ========================================

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = (term or "").strip()
        self._recompute()

    def set_filter(self, name: str, value: Optional[str]) -> None:
        """Activa un filtro de categoría; "all" o None lo desactiva."""
        if name not in self.config.filters:
            raise ValueError(f"Unknown filter '{name}' for {self.config.resource}")
        if value is None or value == ALL:
            self.active_filters.pop(name, None)
        else:
            self.config.filters[name].predicate(value)
            self.active_filters[name] = value
        self._recompute()

    def clear_filters(self) -> None:
        self.search_term = ""
        self.active_filters = {}
        self._recompute()

    def apply(self, rows: List[Row]) -> List[Row]:
        """Filtros de categoría primero (AND) y después la búsqueda de texto."""
        result = rows
        for name, value in self.active_filters.items():
            predicate = self.config.filters[name].predicate(value)
            result = [row for row in result if predicate(row, self.now)]
        if self.search_term:
            result = [row for row in result if matches_search(row, self.search_term, self.config.search_fields)]
        return result

    def _recompute(self) -> None:
        self.visible = self.apply(self.rows)

    # ========================================
    # ESTADÍSTICAS Y ESTADO VACÍO
    # ========================================

    @property
    def stats(self) -> Dict[str, Any]:
        """Agregados sobre el conjunto completo, no sobre el filtrado."""
        return self.config.statistics(self.rows, self.now)

    @property
    def empty_state(self) -> EmptyState:
        if not self.rows:
            return EmptyState.NO_ROWS
        if not self.visible:
            return EmptyState.NO_MATCHES
        return EmptyState.NONE

    # ========================================
    # MUTACIONES
    # ========================================

    async def delete(self, record_id: str, confirmed: bool = False) -> bool:
        """Borra una fila tras confirmación y recarga. Si falla, el estado no cambia."""
        if not confirmed:
            logger.info(f"⚠️ PÁGINA {self.config.resource}: borrado de '{record_id}' sin confirmar")
            return False
        try:
            await self.gateway.delete(self.config.resource, record_id)
        except GatewayError as e:
            self.last_error = e
            self.notifier.error(f"Failed to delete {self.config.label}", e)
            return False

        self.notifier.success(f"{self.config.label.capitalize()} deleted successfully")
        await self.load()
        return True

    async def update_field(
        self,
        record_id: str,
        field: str,
        value: Any,
        success_message: str,
        failure_message: str,
    ) -> bool:
        """Actualiza un único campo y recarga; sin parche local."""
        try:
            await self.gateway.update(self.config.resource, record_id, {field: value})
        except GatewayError as e:
            self.last_error = e
            self.notifier.error(failure_message, e)
            return False

        self.notifier.success(success_message)
        await self.load()
        return True

    def find(self, record_id: str) -> Optional[Row]:
        for row in self.rows:
            if row.get("id") == record_id:
                return row
        return None

    # ========================================
    # SERIALIZACIÓN
    # ========================================

    def snapshot(self) -> ListPageResponse:
        return ListPageResponse(
            resource=self.config.resource,
            search=self.search_term,
            filters=dict(self.active_filters),
            available_filters={name: f.values for name, f in self.config.filters.items()},
            total=len(self.rows),
            visible_count=len(self.visible),
            rows=self.visible,
            stats=self.stats,
            empty_state=self.empty_state,
            notifications=list(self.notifier.notifications),
        )
