# backend/app/schemas/report_schema.py
"""
Esquemas de respuesta para informes por periodo.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field
import enum

from app.schemas.page_schema import Notification
from app.services.periods import ReportPeriod

class ReportType(str, enum.Enum):
    FINANCIAL = "financial"
    ORDERS = "orders"
    INVENTORY = "inventory"
    CLIENTS = "clients"
    PERFORMANCE = "performance"

class RevenueMetrics(BaseModel):
    total_revenue: float = 0
    total_received: float = 0
    outstanding_balance: float = 0

class ClientMetrics(BaseModel):
    total_clients: int = 0
    new_clients: int = Field(0, description="Clientes creados en el periodo")
    active_clients: int = Field(0, description="Clientes con pedidos en el periodo")

class InventoryMetrics(BaseModel):
    """Independiente del periodo."""
    total_items: int = 0
    total_value: float = 0
    low_stock_items: int = 0
    out_of_stock_items: int = 0

class OrderMetrics(BaseModel):
    total_orders: int = 0
    period_orders: int = 0
    avg_order_value: float = 0
    item_orders: int = 0
    service_orders: int = 0

class ReportResponse(BaseModel):
    period: ReportPeriod
    period_start: datetime
    generated_at: datetime
    revenue: RevenueMetrics
    clients: ClientMetrics
    inventory: InventoryMetrics
    orders: OrderMetrics
    failed_sources: List[str] = []
    notifications: List[Notification] = []
