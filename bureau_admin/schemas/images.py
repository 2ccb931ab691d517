"""
Schemas de imágenes de bureau (banner, slider, galería)
"""
from pydantic import BaseModel, Field
from typing import List


class ImageUploadResponse(BaseModel):
    """Respuesta al subir una imagen"""
    message: str
    imageUrl: str = Field(..., description="URL relativa a la raíz del servidor")


class ImageItem(BaseModel):
    imageUrl: str
    id: int

    class Config:
        from_attributes = True


class BannerImagesResponse(BaseModel):
    message: str = "Banner images fetched successfully."
    bannerImages: List[ImageItem]


class GalleryImagesResponse(BaseModel):
    message: str = "Gallery images fetched successfully."
    galleryImages: List[ImageItem]
