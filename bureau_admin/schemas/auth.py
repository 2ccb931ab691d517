"""
Schemas de autenticación (login)
"""
from pydantic import BaseModel, Field
from typing import Optional, Union


class LoginRequest(BaseModel):
    """Credenciales de login (admin, distribuidor o bureau)"""
    email: str = Field(..., description="Email tal como fue registrado")
    password: str = Field(..., description="Contraseña en texto plano")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "owner@bureau.com",
                "password": "secreto123"
            }
        }


class LoginResponse(BaseModel):
    """Respuesta de login exitoso"""
    message: str = "Login successful"
    # Distribuidor: id interno; bureau: bureauId público; admin: sin id
    id: Optional[Union[int, str]] = None
