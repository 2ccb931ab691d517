"""
Schemas Pydantic para validación
"""
from .auth import LoginRequest, LoginResponse
from .common import MessageResponse, AdminResponse, HealthResponse
from .distributor import (
    DistributorCreate,
    DistributorResponse,
    DistributorListResponse
)
from .bureau import (
    BureauCreate,
    BureauUpdate,
    BureauResponse,
    BureauListResponse,
    BureauCreatedResponse
)
from .images import (
    ImageUploadResponse,
    ImageItem,
    BannerImagesResponse,
    GalleryImagesResponse
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    # Common
    "MessageResponse",
    "AdminResponse",
    "HealthResponse",
    # Distributor
    "DistributorCreate",
    "DistributorResponse",
    "DistributorListResponse",
    # Bureau
    "BureauCreate",
    "BureauUpdate",
    "BureauResponse",
    "BureauListResponse",
    "BureauCreatedResponse",
    # Images
    "ImageUploadResponse",
    "ImageItem",
    "BannerImagesResponse",
    "GalleryImagesResponse",
]
