# backend/app/db/models/vendor_model.py
"""
Modelo de proveedores. Un proveedor puede suministrar artículos,
servicios o ambos (`type`), aunque la aplicación no lo hace cumplir.
"""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from app.db.database import Base, new_id, utcnow

class Vendor(Base):
    __tablename__ = "vendors"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False, index=True)
    contact = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False, default="item")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    items = relationship("Item", back_populates="vendor")
    services = relationship("Service", back_populates="vendor")

    def __repr__(self):
        return f"<Vendor(id={self.id}, name='{self.name}', type='{self.type}')>"
