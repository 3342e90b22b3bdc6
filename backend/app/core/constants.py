# backend/app/core/constants.py
"""
Umbrales de negocio compartidos por las vistas agregadas y las páginas.
"""

# Un artículo con 1..LOW_STOCK_THRESHOLD unidades está en "stock bajo"
LOW_STOCK_THRESHOLD = 10

# Bandas de coste de servicios: < LOW, [LOW, HIGH), >= HIGH
SERVICE_COST_LOW = 100
SERVICE_COST_HIGH = 500

# Etiquetas para relaciones ausentes
UNKNOWN_CLIENT = "Unknown Client"
UNKNOWN_VENDOR = "Unknown Vendor"
UNKNOWN_ORDER = "Unknown"

RECENT_ORDERS_LIMIT = 5
