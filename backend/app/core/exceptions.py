# backend/app/core/exceptions.py
"""
Excepciones propias de la aplicación.

Toda falla al hablar con el almacén de datos se expresa como GatewayError,
de modo que los servicios puedan convertirla en una notificación y los
endpoints en un HTTPException sin conocer detalles de SQLAlchemy.
"""


class GatewayError(Exception):
    """Falla genérica de una operación contra el almacén de datos."""

    def __init__(self, message: str, resource: str = None):
        super().__init__(message)
        self.message = message
        self.resource = resource


class RecordNotFound(GatewayError):
    """El registro pedido por identificador no existe."""

    def __init__(self, resource: str, record_id: str):
        super().__init__(f"{resource} record '{record_id}' not found", resource=resource)
        self.record_id = record_id


class ReadOnlyResource(GatewayError):
    """Se intentó escribir sobre una vista agregada."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} is a read-only view", resource=resource)
