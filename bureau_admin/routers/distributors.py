"""
Router de Distribuidores
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import StoreError, ValidationError
from ..models import get_db, DistributorProfile
from ..schemas import (
    DistributorCreate, DistributorResponse, DistributorListResponse, MessageResponse
)
from ..services import register_distributor
from ..utils import document_receiver

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/distributors", response_model=DistributorListResponse)
async def list_distributors(db: Session = Depends(get_db)):
    """Listar todos los distribuidores (lista vacía si no hay)"""
    try:
        distributors = db.query(DistributorProfile).all()
    except SQLAlchemyError:
        logger.exception("Error consultando distributor_profiles")
        raise StoreError()
    return DistributorListResponse(
        distributors=[DistributorResponse.model_validate(d) for d in distributors]
    )


@router.post("/distributor/create", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_distributor(
    fullName: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    mobileNumber: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    companyName: Optional[str] = Form(None),
    createdAt: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    paymentStatus: Optional[str] = Form(None),
    documents: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db)
):
    """
    Registrar distribuidor con hasta 10 documentos
    Los documentos se guardan en disco antes de ejecutar el registro
    """
    try:
        data = DistributorCreate(
            fullName=fullName,
            email=email,
            mobileNumber=mobileNumber,
            password=password,
            companyName=companyName,
            createdAt=createdAt,
            location=location,
            paymentStatus=paymentStatus,
        )
    except PydanticValidationError:
        raise ValidationError("Invalid createdAt value.")

    stored = await document_receiver.save_all(documents)
    await register_distributor(db, data, stored)
    return MessageResponse(message="Distributor created successfully")
