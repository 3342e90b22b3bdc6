# backend/app/db/models/payment_model.py

from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.database import Base, new_id, utcnow

class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_id)
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    amount_paid = Column(Numeric(12, 2), nullable=False)
    # Saldo del pedido tras este pago; se calcula solo al registrarlo
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    payment_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    client = relationship("Client", back_populates="payments")
