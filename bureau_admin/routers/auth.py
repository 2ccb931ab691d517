"""
Router de autenticación (admin, distribuidor, bureau)
"""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import StoreError
from ..models import get_db, Admin, DistributorProfile, BureauProfile
from ..schemas import LoginRequest, LoginResponse, AdminResponse
from ..services import authenticate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/admin", response_model=List[AdminResponse])
async def list_admins(db: Session = Depends(get_db)):
    """Listar administradores"""
    try:
        admins = db.query(Admin).all()
    except SQLAlchemyError:
        logger.exception("Error consultando admin")
        raise StoreError()
    return [AdminResponse.model_validate(admin) for admin in admins]


@router.post("/distributor/login", response_model=LoginResponse, response_model_exclude_none=True)
async def distributor_login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Login de distribuidor: devuelve su id interno"""
    distributor = await authenticate(
        db, DistributorProfile, credentials.email, credentials.password, "Distributor not found"
    )
    return LoginResponse(id=distributor.id)


@router.post("/admin/login", response_model=LoginResponse, response_model_exclude_none=True)
async def admin_login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Login de administrador"""
    await authenticate(db, Admin, credentials.email, credentials.password, "Admin not found")
    return LoginResponse()


@router.post("/bureaulogin", response_model=LoginResponse, response_model_exclude_none=True)
async def bureau_login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Login de bureau: devuelve su bureauId público"""
    bureau = await authenticate(
        db, BureauProfile, credentials.email, credentials.password, "Bureau not found"
    )
    return LoginResponse(id=bureau.bureauId)
