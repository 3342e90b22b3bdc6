# backend/app/services/notifications.py
"""
Acumulador de notificaciones por petición.

Sustituye a los "toasts" del panel: cada éxito o fallo de una operación
queda registrado en el log y se devuelve al cliente junto con la respuesta.
"""

from typing import List, Optional
import logging

from app.schemas.page_schema import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class Notifier:
    """Registra notificaciones en orden de emisión."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def _push(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self.notifications.append(notification)
        return notification

    def success(self, message: str) -> Notification:
        logger.info(f"✅ {message}")
        return self._push(NotificationLevel.SUCCESS, message)

    def info(self, message: str) -> Notification:
        logger.info(f"ℹ️ {message}")
        return self._push(NotificationLevel.INFO, message)

    def error(self, message: str, exc: Optional[BaseException] = None) -> Notification:
        if exc is not None:
            logger.error(f"❌ {message}: {exc}")
        else:
            logger.error(f"❌ {message}")
        return self._push(NotificationLevel.ERROR, message)

    @property
    def errors(self) -> List[Notification]:
        return [n for n in self.notifications if n.level == NotificationLevel.ERROR]
