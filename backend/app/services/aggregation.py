# backend/app/services/aggregation.py
"""
Lanzamiento concurrente de consultas con aislamiento por consulta.

Usado por el panel y los informes: si una consulta falla, su resultado
queda en el valor por defecto y el nombre de la fuente se añade a la
lista de fallidas; el resto se usa normalmente.
"""

from typing import Any, Awaitable, Dict, List, Mapping, Tuple
import asyncio
import logging

from app.core.exceptions import GatewayError
from app.services.notifications import Notifier

logger = logging.getLogger(__name__)


async def gather_sources(
    fetches: Mapping[str, Awaitable[Any]],
    defaults: Mapping[str, Any],
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Ejecuta todas las consultas a la vez. Devuelve (resultados, fuentes_fallidas).

    Solo se aíslan los GatewayError; cualquier otra excepción se propaga.
    """
    names = list(fetches)
    outcomes = await asyncio.gather(*fetches.values(), return_exceptions=True)

    results: Dict[str, Any] = {}
    failed: List[str] = []
    for name, outcome in zip(names, outcomes):
        if isinstance(outcome, GatewayError):
            logger.warning(f"⚠️ AGREGADO: La fuente '{name}' falló: {outcome}")
            results[name] = defaults[name]
            failed.append(name)
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results[name] = outcome
    return results, failed


def report_failures(notifier: Notifier, what: str, failed: List[str]) -> None:
    """Una única notificación de error para todas las fuentes fallidas."""
    if failed:
        notifier.error(f"Failed to fetch {what} data ({', '.join(failed)})")
