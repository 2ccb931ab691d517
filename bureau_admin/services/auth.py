"""
Login de administradores, distribuidores y bureaus
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, AuthError, StoreError
from ..models import Admin
from ..utils.security import hash_password, verify_password_async

logger = logging.getLogger(__name__)


async def authenticate(db: Session, model, email: str, password: str, not_found_message: str):
    """
    Busca la cuenta por email exacto y verifica la contraseña

    Args:
        db: Sesión de base de datos
        model: Admin, DistributorProfile o BureauProfile
        email: Email tal como fue registrado
        password: Contraseña en texto plano
        not_found_message: Mensaje para el 404

    Returns:
        La fila de la cuenta autenticada

    Raises:
        StoreError: Falla de la consulta
        NotFoundError: No existe cuenta con ese email
        AuthError: Contraseña incorrecta
    """
    try:
        account = db.query(model).filter(model.email == email).first()
    except SQLAlchemyError:
        logger.exception(f"Error consultando {model.__tablename__} para login")
        raise StoreError()

    if not account:
        logger.warning(f"Login fallido en {model.__tablename__}: {email} no existe")
        raise NotFoundError(not_found_message)

    if not await verify_password_async(password, account.password):
        logger.warning(f"Login fallido en {model.__tablename__}: contraseña inválida para {email}")
        raise AuthError("Invalid password")

    return account


def create_admin(db: Session, email: str, password: str) -> Admin:
    """Crea un administrador (no existe endpoint HTTP para esto)"""
    admin = Admin(email=email, password=hash_password(password))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info(f"Administrador creado: {email}")
    return admin
