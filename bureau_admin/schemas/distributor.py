"""
Schemas de Distribuidor
"""
from pydantic import BaseModel, Field, field_validator
from typing import ClassVar, Optional, List, Tuple
from datetime import datetime


class DistributorCreate(BaseModel):
    """
    Datos de registro de distribuidor (campos del formulario multipart)
    La presencia de los campos requeridos la valida el flujo de registro
    """
    fullName: Optional[str] = None
    email: Optional[str] = None
    mobileNumber: Optional[str] = None
    password: Optional[str] = None
    companyName: Optional[str] = None
    createdAt: Optional[datetime] = Field(None, description="Por defecto la fecha actual")
    location: Optional[str] = None
    paymentStatus: Optional[str] = None

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("fullName", "email", "mobileNumber", "password", "companyName")

    @field_validator("createdAt", mode="before")
    @classmethod
    def empty_created_at(cls, v):
        """Un campo de formulario vacío equivale a no enviado"""
        if v == "":
            return None
        return v

    def missing_fields(self) -> List[str]:
        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]


class DistributorResponse(BaseModel):
    """Perfil de distribuidor (sin hash de contraseña)"""
    id: int
    fullName: str
    email: str
    mobileNumber: str
    createdAt: Optional[datetime] = None
    location: Optional[str] = None
    paymentStatus: Optional[str] = None
    companyName: str

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "fullName": "Ravi Kumar",
                "email": "ravi@distrib.com",
                "mobileNumber": "9876543210",
                "createdAt": "2024-10-02T00:00:00",
                "location": "Chennai",
                "paymentStatus": "paid",
                "companyName": "RK Distributors"
            }
        }


class DistributorListResponse(BaseModel):
    distributors: List[DistributorResponse]
