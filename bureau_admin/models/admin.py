"""
Modelo de Administrador
"""
from sqlalchemy import Column, Integer, String
from .database import Base


class Admin(Base):
    """Cuenta de administrador - se crea fuera de la API (ver seed.py)"""

    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Admin(id={self.id}, email={self.email})>"
