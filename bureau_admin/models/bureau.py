"""
Modelos de Bureau y sus documentos
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from .database import Base


class BureauProfile(Base):
    """
    Perfil de bureau
    bureauId es el identificador público de 7 dígitos, distinto del id interno
    """

    __tablename__ = "bureau_profiles"

    id = Column(Integer, primary_key=True, index=True)
    bureauId = Column(String(7), nullable=False, index=True)
    bureauName = Column(String(255), nullable=False)
    mobileNumber = Column(String(20), nullable=False, index=True)
    about = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, index=True)
    ownerName = Column(String(255), nullable=False)
    paymentStatus = Column(String(50), nullable=True)
    # Referencia al distribuidor sin FK
    distributorId = Column(String(50), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    createdAt = Column(DateTime, server_default=func.now())
    welcomeImageBanner = Column(Text, nullable=True)

    def __repr__(self):
        return f"<BureauProfile(id={self.id}, bureauId={self.bureauId}, name={self.bureauName})>"


class BureauDocument(Base):
    """Documento subido al registrar un bureau (referencia el id interno)"""

    __tablename__ = "bureau_documents"

    id = Column(Integer, primary_key=True, index=True)
    bureau_id = Column(Integer, nullable=False, index=True)
    file_path = Column(Text, nullable=False)

    def __repr__(self):
        return f"<BureauDocument(id={self.id}, bureau={self.bureau_id})>"
