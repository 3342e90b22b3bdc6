# backend/app/db/models/document_model.py
"""
Documentos comerciales ligados a un pedido: proformas, albaranes,
estados de cuenta, recibos, partes de trabajo y diagnósticos.
"""

from sqlalchemy import Column, String, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship

from app.db.database import Base, new_id, utcnow

class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    vendor_id = Column(String(36), ForeignKey("vendors.id", ondelete="SET NULL"), nullable=True)
    type = Column(String(30), nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    due_date = Column(Date, nullable=True)
    file_path = Column(Text, nullable=True)
    # Formato PREFIJO/AÑO/0001, no se garantiza unicidad
    document_number = Column(String(50), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    client = relationship("Client", back_populates="documents")
