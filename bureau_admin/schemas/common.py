"""
Schemas comunes
"""
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Respuesta simple con mensaje"""
    message: str


class AdminResponse(BaseModel):
    """Administrador (sin hash de contraseña)"""
    id: int
    email: str

    class Config:
        from_attributes = True


class HealthResponse(BaseModel):
    """Estado del servicio"""
    status: str = Field(..., description="healthy / unhealthy")
    service: str
    version: str
    database: str = Field(..., description="connected / disconnected")
