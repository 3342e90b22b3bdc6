# backend/app/schemas/dashboard_schema.py
"""
Esquemas de respuesta del panel principal.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from app.schemas.page_schema import Notification

class DashboardStats(BaseModel):
    """Contadores y totales de la cabecera del panel."""
    total_clients: int = 0
    total_vendors: int = 0
    total_items: int = 0
    total_services: int = 0
    total_technicians: int = 0
    total_orders: int = 0
    total_revenue: float = Field(0, description="Suma de client_summary.total_revenue")
    outstanding_balance: float = Field(0, description="Suma de client_summary.outstanding_balance")

class RecentOrder(BaseModel):
    id: str
    client_id: Optional[str] = None
    client_name: str
    type: str
    status: str
    total_amount: float
    created_at: datetime

class DashboardResponse(BaseModel):
    stats: DashboardStats
    recent_orders: List[RecentOrder] = []
    failed_sources: List[str] = Field(default_factory=list, description="Consultas que fallaron")
    notifications: List[Notification] = []
