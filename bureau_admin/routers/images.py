"""
Router de imágenes del sitio web de cada bureau
Banner de bienvenida (columna del perfil), slider y galería (tablas propias)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, StoreError, ValidationError
from ..models import get_db, BureauProfile, SliderImage, GalleryImage
from ..schemas import (
    ImageUploadResponse, ImageItem, BannerImagesResponse,
    GalleryImagesResponse, MessageResponse
)
from ..utils import (
    UploadReceiver, home_banner_receiver, slider_image_receiver, gallery_image_receiver
)

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_IMAGE_INPUT = "Please provide bureauId and an image to upload."


def _require_upload(bureauId: Optional[str], image: Optional[UploadFile]):
    if not bureauId or image is None or not image.filename:
        raise ValidationError(MISSING_IMAGE_INPUT)


def _parse_image_id(imageId: str) -> int:
    try:
        return int(imageId)
    except (TypeError, ValueError):
        raise ValidationError("Please provide imageId.")


async def _add_image(db: Session, model, receiver: UploadReceiver, bureau_id: str, image: UploadFile) -> str:
    """Guarda la imagen y agrega una fila; bureauId no se valida contra bureau_profiles"""
    stored = await receiver.save(image)
    try:
        db.add(model(bureauId=bureau_id, imageUrl=stored.url))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error insertando en {model.__tablename__}")
        raise StoreError()
    return stored.url


def _list_images(db: Session, model, bureau_id: Optional[str]):
    if not bureau_id:
        raise ValidationError("Please provide bureauId.")
    try:
        images = db.query(model).filter(model.bureauId == bureau_id).all()
    except SQLAlchemyError:
        logger.exception(f"Error consultando {model.__tablename__}")
        raise StoreError()
    if not images:
        raise NotFoundError("No images found for the given bureau.")
    return [ImageItem.model_validate(image) for image in images]


def _delete_image(db: Session, model, image_id: str) -> MessageResponse:
    """Elimina una imagen por su id, sin verificar a qué bureau pertenece"""
    image_pk = _parse_image_id(image_id)
    try:
        deleted = db.query(model).filter(model.id == image_pk).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error eliminando de {model.__tablename__}")
        raise StoreError()
    if deleted == 0:
        raise NotFoundError("Image not found.")
    return MessageResponse(message="Image deleted successfully.")


# ============================================================================
# BANNER DE BIENVENIDA
# ============================================================================

@router.put("/bureau/uploadBanner", response_model=ImageUploadResponse)
async def upload_banner(
    bureauId: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """Sube el banner de bienvenida y lo asigna al bureau"""
    _require_upload(bureauId, image)

    stored = await home_banner_receiver.save(image)
    try:
        updated = db.query(BureauProfile).filter(
            BureauProfile.bureauId == bureauId
        ).update({"welcomeImageBanner": stored.url}, synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Error actualizando banner del bureau {bureauId}")
        raise StoreError()

    if updated == 0:
        raise NotFoundError("Bureau not found.")

    return ImageUploadResponse(message="Image uploaded successfully", imageUrl=stored.url)


# ============================================================================
# SLIDER
# ============================================================================

@router.post("/bureau/slider", response_model=ImageUploadResponse)
async def upload_slider_image(
    bureauId: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """Agrega una imagen al slider del bureau"""
    _require_upload(bureauId, image)
    image_url = await _add_image(db, SliderImage, slider_image_receiver, bureauId, image)
    return ImageUploadResponse(
        message="Image uploaded and inserted into slider_images table successfully.",
        imageUrl=image_url
    )


@router.get("/bureau/getBannerImages", response_model=BannerImagesResponse)
async def get_slider_images(
    bureauId: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Imágenes del slider de un bureau (404 si no tiene ninguna)"""
    return BannerImagesResponse(bannerImages=_list_images(db, SliderImage, bureauId))


@router.delete("/deleteBannerImage/{imageId}", response_model=MessageResponse)
async def delete_slider_image(imageId: str, db: Session = Depends(get_db)):
    """Eliminar imagen del slider por id"""
    return _delete_image(db, SliderImage, imageId)


# ============================================================================
# GALERÍA
# ============================================================================

@router.post("/gallery/upload", response_model=ImageUploadResponse)
async def upload_gallery_image(
    bureauId: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """Agrega una imagen a la galería del bureau"""
    _require_upload(bureauId, image)
    image_url = await _add_image(db, GalleryImage, gallery_image_receiver, bureauId, image)
    return ImageUploadResponse(
        message="Image uploaded and inserted into gallery_images table successfully.",
        imageUrl=image_url
    )


@router.get("/gallery/getImages", response_model=GalleryImagesResponse)
async def get_gallery_images(
    bureauId: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Imágenes de la galería de un bureau (404 si no tiene ninguna)"""
    return GalleryImagesResponse(galleryImages=_list_images(db, GalleryImage, bureauId))


@router.delete("/deleteGalleryImage/{imageId}", response_model=MessageResponse)
async def delete_gallery_image(imageId: str, db: Session = Depends(get_db)):
    """Eliminar imagen de la galería por id"""
    return _delete_image(db, GalleryImage, imageId)
