# backend/app/db/models/technician_model.py

from sqlalchemy import Column, String, Boolean, DateTime, JSON
from app.db.database import Base, new_id, utcnow

class Technician(Base):
    __tablename__ = "technicians"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False, index=True)
    contact = Column(String(255), nullable=False)
    # Lista de ids de servicios que el técnico puede realizar (many-to-many ligero)
    service_ids = Column(JSON, nullable=False, default=list)
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
