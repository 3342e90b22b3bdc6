# backend/app/db/models/order_model.py
"""
Este archivo contiene los modelos de pedido y de líneas de pedido.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Numeric, ForeignKey
)
from sqlalchemy.orm import relationship

from app.db.database import Base, new_id, utcnow

class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    type = Column(String(20), nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)
    # pending -> approved -> delivered -> completed (solo orientativo)
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    details = relationship("OrderDetail", back_populates="order", cascade="all, delete-orphan")
    client = relationship("Client", back_populates="orders")

    def __repr__(self):
        return f"<Order(id={self.id}, client_id='{self.client_id}', status='{self.status}')>"


class OrderDetail(Base):
    __tablename__ = "order_details"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    item_id = Column(String(36), ForeignKey("items.id", ondelete="SET NULL"), nullable=True)
    service_id = Column(String(36), ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(Numeric(12, 2), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    order = relationship("Order", back_populates="details")

    def __repr__(self):
        return f"<OrderDetail(id={self.id}, order_id={self.order_id}, quantity={self.quantity})>"
