"""
Utilidades del servicio
"""
from .security import hash_password, verify_password, hash_password_async, verify_password_async
from .identifiers import generate_bureau_id
from .uploads import (
    StoredFile,
    UploadReceiver,
    document_receiver,
    home_banner_receiver,
    slider_image_receiver,
    gallery_image_receiver,
    ensure_upload_directories,
)

__all__ = [
    "hash_password",
    "verify_password",
    "hash_password_async",
    "verify_password_async",
    "generate_bureau_id",
    "StoredFile",
    "UploadReceiver",
    "document_receiver",
    "home_banner_receiver",
    "slider_image_receiver",
    "gallery_image_receiver",
    "ensure_upload_directories",
]
