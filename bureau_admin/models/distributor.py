"""
Modelos de Distribuidor y sus documentos
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from .database import Base


class DistributorProfile(Base):
    """
    Perfil de distribuidor
    NOTA: email y mobileNumber son únicos por validación previa al insert,
    no por restricción de la base de datos
    """

    __tablename__ = "distributor_profiles"

    id = Column(Integer, primary_key=True, index=True)
    fullName = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    mobileNumber = Column(String(20), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    createdAt = Column(DateTime, server_default=func.now())
    location = Column(String(255), nullable=True)
    paymentStatus = Column(String(50), nullable=True)
    companyName = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<DistributorProfile(id={self.id}, email={self.email}, company={self.companyName})>"


class DistributorDocument(Base):
    """Documento subido al registrar un distribuidor"""

    __tablename__ = "distributor_documents"

    id = Column(Integer, primary_key=True, index=True)
    # Sin FK: la relación se mantiene por aplicación
    distributor_id = Column(Integer, nullable=False, index=True)
    file_path = Column(Text, nullable=False)

    def __repr__(self):
        return f"<DistributorDocument(id={self.id}, distributor={self.distributor_id})>"
