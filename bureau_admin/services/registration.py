"""
Flujo de registro de distribuidores y bureaus

Pasos secuenciales sin transacción que los abarque: validar campos, verificar
que email y teléfono no estén registrados, hashear la contraseña, insertar el
perfil y vincular los documentos subidos. Cada sentencia hace commit por
separado; si falla la vinculación de un documento se registra en el log y el
registro se sigue considerando exitoso.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import ValidationError, ConflictError, StoreError
from ..models import DistributorProfile, DistributorDocument, BureauProfile, BureauDocument
from ..schemas import DistributorCreate, BureauCreate
from ..utils.identifiers import generate_bureau_id
from ..utils.security import hash_password_async
from ..utils.uploads import StoredFile

logger = logging.getLogger(__name__)


@dataclass
class RegistrationResult:
    """Perfil creado y cantidad de documentos vinculados"""
    profile: object
    documents_linked: int = 0
    failed_documents: List[str] = field(default_factory=list)


def _find_existing(db: Session, model, email: str, mobile_number: str):
    try:
        return db.query(model).filter(
            or_(model.email == email, model.mobileNumber == mobile_number)
        ).first()
    except SQLAlchemyError:
        logger.exception(f"Error consultando {model.__tablename__} por email/teléfono")
        raise StoreError()


async def _hash(password: str) -> str:
    try:
        return await hash_password_async(password)
    except (ValueError, TypeError):
        logger.exception("Error hashing password")
        raise StoreError("Error hashing password.")


def _insert(db: Session, profile):
    try:
        db.add(profile)
        db.commit()
        db.refresh(profile)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error insertando en {profile.__tablename__}")
        raise StoreError()
    return profile


def link_documents(
    db: Session,
    model,
    owner_column: str,
    owner_id: int,
    documents: Optional[List[StoredFile]],
    result: RegistrationResult
) -> RegistrationResult:
    """
    Inserta una fila de documento por archivo, cada una con su propio commit

    Los errores no se propagan: el perfil ya existe y la respuesta sigue siendo exitosa.
    """
    for document in documents or []:
        try:
            db.add(model(**{owner_column: owner_id, "file_path": document.url}))
            db.commit()
            result.documents_linked += 1
        except SQLAlchemyError as e:
            db.rollback()
            result.failed_documents.append(document.filename)
            logger.error(f"Error saving file path {document.url} for {owner_column}={owner_id}: {e}")
    return result


async def register_distributor(
    db: Session,
    data: DistributorCreate,
    documents: Optional[List[StoredFile]] = None
) -> RegistrationResult:
    """
    Crea un distribuidor y vincula sus documentos

    Raises:
        ValidationError: Falta algún campo requerido
        ConflictError: Ya existe un distribuidor con ese email o teléfono
        StoreError: Falla de base de datos o de hash
    """
    if data.missing_fields():
        raise ValidationError("Please fill all required fields.")

    if _find_existing(db, DistributorProfile, data.email, data.mobileNumber):
        logger.warning(f"Distribuidor duplicado: {data.email} / {data.mobileNumber}")
        raise ConflictError("Distributor already exists with this email or mobile number.")

    hashed_password = await _hash(data.password)

    distributor = _insert(db, DistributorProfile(
        fullName=data.fullName,
        email=data.email,
        mobileNumber=data.mobileNumber,
        password=hashed_password,
        createdAt=data.createdAt or datetime.now(),
        location=data.location,
        paymentStatus=data.paymentStatus,
        companyName=data.companyName,
    ))
    logger.info(f"Distribuidor creado: id={distributor.id} email={distributor.email}")

    return link_documents(
        db, DistributorDocument, "distributor_id", distributor.id, documents,
        RegistrationResult(profile=distributor)
    )


async def register_bureau(
    db: Session,
    data: BureauCreate,
    documents: Optional[List[StoredFile]] = None
) -> RegistrationResult:
    """
    Crea un bureau con bureauId de 7 dígitos y vincula sus documentos

    El bureauId no se verifica contra los existentes (colisión posible).
    Los documentos referencian el id interno del bureau, no el bureauId.
    """
    if data.missing_fields():
        raise ValidationError("Please fill all required fields.")

    bureau_id = generate_bureau_id()

    if _find_existing(db, BureauProfile, data.email, data.mobileNumber):
        logger.warning(f"Bureau duplicado: {data.email} / {data.mobileNumber}")
        raise ConflictError("Bureau already exists with this email or mobile number.")

    hashed_password = await _hash(data.password)

    bureau = _insert(db, BureauProfile(
        bureauId=bureau_id,
        bureauName=data.bureauName,
        mobileNumber=data.mobileNumber,
        about=data.about,
        location=data.location,
        email=data.email,
        ownerName=data.ownerName,
        paymentStatus=data.paymentStatus,
        distributorId=data.distributorId,
        password=hashed_password,
        createdAt=datetime.now(),
    ))
    logger.info(f"Bureau creado: bureauId={bureau.bureauId} id={bureau.id}")

    return link_documents(
        db, BureauDocument, "bureau_id", bureau.id, documents,
        RegistrationResult(profile=bureau)
    )
