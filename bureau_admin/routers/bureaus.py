"""
Router de Bureaus: registro, consultas y actualización de perfil
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, StoreError, ValidationError
from ..models import get_db, BureauProfile
from ..schemas import (
    BureauCreate, BureauUpdate, BureauResponse, BureauListResponse,
    BureauCreatedResponse, MessageResponse
)
from ..services import register_bureau
from ..utils import document_receiver

logger = logging.getLogger(__name__)

router = APIRouter()


def _bureau_list(db: Session, *criteria) -> BureauListResponse:
    try:
        bureaus = db.query(BureauProfile).filter(*criteria).all()
    except SQLAlchemyError:
        logger.exception("Error consultando bureau_profiles")
        raise StoreError()
    return BureauListResponse(bureauProfiles=[BureauResponse.model_validate(b) for b in bureaus])


# ============================================================================
# CONSULTAS
# ============================================================================

@router.get("/bureau_profiles_distributer", response_model=BureauListResponse)
async def list_bureaus_by_distributor(
    distributorId: Optional[str] = Query(None, description="ID del distribuidor"),
    db: Session = Depends(get_db)
):
    """Bureaus de un distribuidor (lista vacía si no tiene)"""
    if not distributorId:
        raise ValidationError("Distributor ID is required")
    return _bureau_list(db, BureauProfile.distributorId == distributorId)


@router.get("/bureau_profiles_bureauId", response_model=BureauListResponse)
async def list_bureaus_by_bureau_id(
    bureauId: Optional[str] = Query(None, description="Identificador público de 7 dígitos"),
    db: Session = Depends(get_db)
):
    """Bureau por su bureauId público"""
    if not bureauId:
        raise ValidationError("bureauId is required")
    return _bureau_list(db, BureauProfile.bureauId == bureauId)


@router.get("/bureau_profiles", response_model=BureauListResponse)
async def list_bureaus(db: Session = Depends(get_db)):
    """Listar todos los bureaus"""
    return _bureau_list(db)


# ============================================================================
# REGISTRO
# ============================================================================

@router.post("/bureau/create", response_model=BureauCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_bureau(
    bureauName: Optional[str] = Form(None),
    mobileNumber: Optional[str] = Form(None),
    about: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    ownerName: Optional[str] = Form(None),
    paymentStatus: Optional[str] = Form(None),
    distributorId: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    documents: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db)
):
    """Registrar bureau con hasta 10 documentos; devuelve el bureauId generado"""
    data = BureauCreate(
        bureauName=bureauName,
        mobileNumber=mobileNumber,
        about=about,
        location=location,
        email=email,
        ownerName=ownerName,
        paymentStatus=paymentStatus,
        distributorId=distributorId,
        password=password,
    )

    stored = await document_receiver.save_all(documents)
    result = await register_bureau(db, data, stored)
    return BureauCreatedResponse(bureauId=result.profile.bureauId)


# ============================================================================
# ACTUALIZACIÓN
# ============================================================================

@router.put("/bureau/update", response_model=MessageResponse)
async def update_bureau(update_data: BureauUpdate, db: Session = Depends(get_db)):
    """
    Actualización parcial de bureau
    Solo se modifican los campos enviados: bureauName, mobileNumber, about, location
    """
    changes = update_data.changes()
    if not update_data.bureauId or not changes:
        raise ValidationError("Please provide bureauId and at least one field to update.")

    try:
        updated = db.query(BureauProfile).filter(
            BureauProfile.bureauId == update_data.bureauId
        ).update(changes, synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error actualizando bureau {update_data.bureauId}")
        raise StoreError()

    if updated == 0:
        raise NotFoundError("Bureau not found.")

    logger.info(f"Bureau {update_data.bureauId} actualizado: {sorted(changes)}")
    return MessageResponse(message="Bureau updated successfully")
