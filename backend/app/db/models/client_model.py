# backend/app/db/models/client_model.py
"""
Se encarga de definir el modelo de cliente para la aplicación.
"""

from sqlalchemy import Column, String, Text, Numeric, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.database import Base, new_id, utcnow

class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False, index=True)
    contact = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    credit_limit = Column(Numeric(12, 2), nullable=False, default=0)
    credit_days = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relación con las órdenes, documentos y pagos
    orders = relationship("Order", back_populates="client", passive_deletes=True)
    documents = relationship("Document", back_populates="client", passive_deletes=True)
    payments = relationship("Payment", back_populates="client", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("credit_limit >= 0", name="ck_clients_credit_limit"),
        CheckConstraint("credit_days >= 0", name="ck_clients_credit_days"),
    )
