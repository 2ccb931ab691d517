"""
Schemas de Bureau
"""
from pydantic import BaseModel, Field, field_validator
from typing import ClassVar, Dict, List, Optional, Tuple
from datetime import datetime


class BureauCreate(BaseModel):
    """Datos de registro de bureau (campos del formulario multipart)"""
    bureauName: Optional[str] = None
    mobileNumber: Optional[str] = None
    about: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    ownerName: Optional[str] = None
    distributorId: Optional[str] = None
    password: Optional[str] = None
    paymentStatus: Optional[str] = None

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "bureauName", "mobileNumber", "about", "location",
        "email", "ownerName", "distributorId", "password",
    )

    def missing_fields(self) -> List[str]:
        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]


class BureauUpdate(BaseModel):
    """
    Actualización parcial de bureau

    Solo se actualizan los campos presentes en el cuerpo con valor no vacío.
    Un campo ausente, null o cadena vacía no se modifica: no se puede vaciar un campo.
    """
    bureauId: Optional[str] = Field(None, description="Identificador público de 7 dígitos")
    bureauName: Optional[str] = None
    mobileNumber: Optional[str] = None
    about: Optional[str] = None
    location: Optional[str] = None

    UPDATABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("bureauName", "mobileNumber", "about", "location")

    @field_validator("bureauId", "mobileNumber", mode="before")
    @classmethod
    def numbers_as_text(cls, v):
        """Los clientes suelen enviar bureauId y teléfono como número"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def changes(self) -> Dict[str, str]:
        """Campos a actualizar: presentes en la petición y con valor no vacío"""
        provided = self.model_dump(exclude_unset=True, include=set(self.UPDATABLE_FIELDS))
        return {field: value for field, value in provided.items() if value}

    class Config:
        json_schema_extra = {
            "example": {
                "bureauId": "4821937",
                "location": "Coimbatore"
            }
        }


class BureauResponse(BaseModel):
    """Perfil de bureau (sin hash de contraseña)"""
    id: int
    bureauId: str
    bureauName: str
    mobileNumber: str
    about: Optional[str] = None
    location: Optional[str] = None
    email: str
    ownerName: str
    paymentStatus: Optional[str] = None
    distributorId: str
    createdAt: Optional[datetime] = None
    welcomeImageBanner: Optional[str] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 3,
                "bureauId": "4821937",
                "bureauName": "Sri Lakshmi Matrimony",
                "mobileNumber": "9876501234",
                "about": "Matrimony bureau since 1998",
                "location": "Madurai",
                "email": "contact@srilakshmi.com",
                "ownerName": "Lakshmi",
                "paymentStatus": "pending",
                "distributorId": "1",
                "createdAt": "2024-10-02T00:00:00",
                "welcomeImageBanner": "/homebanners/1727827200000-welcome.jpg"
            }
        }


class BureauListResponse(BaseModel):
    bureauProfiles: List[BureauResponse]


class BureauCreatedResponse(BaseModel):
    message: str = "Bureau created successfully"
    bureauId: str
