"""
Recepción de archivos subidos (documentos e imágenes)

Cada categoría guarda en su propia carpeta bajo settings.UPLOAD_ROOT y nombra
los archivos como <epoch-ms>-<nombre original>.
"""
import logging
import os
import time
from dataclasses import dataclass
from typing import List, Optional

from fastapi import UploadFile

from ..config import settings
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Archivo ya persistido en disco"""
    original_name: str
    filename: str
    path: str
    url: str


class UploadReceiver:
    """Guarda archivos subidos en una carpeta de destino fija"""

    def __init__(self, folder: str, max_files: Optional[int] = None):
        self.folder = folder
        self.max_files = max_files

    @property
    def directory(self) -> str:
        return os.path.join(settings.UPLOAD_ROOT, self.folder)

    def ensure_directory(self) -> str:
        os.makedirs(self.directory, exist_ok=True)
        return self.directory

    def public_url(self, filename: str) -> str:
        return f"/{self.folder}/{filename}"

    def _write_new(self, original_name: str, content: bytes) -> str:
        """Crea el archivo en modo exclusivo; si el nombre ya existe avanza 1 ms"""
        timestamp = int(time.time() * 1000)
        while True:
            filename = f"{timestamp}-{original_name}"
            try:
                with open(os.path.join(self.directory, filename), "xb") as buffer:
                    buffer.write(content)
                return filename
            except FileExistsError:
                timestamp += 1

    async def save(self, file: UploadFile) -> StoredFile:
        """
        Persiste un archivo y devuelve su ruta en disco y su URL pública

        Args:
            file: Archivo recibido en la petición multipart

        Returns:
            StoredFile: nombre guardado, ruta en disco y URL relativa a la raíz
        """
        # Solo el nombre base: evita escribir fuera de la carpeta
        original_name = os.path.basename((file.filename or "").replace("\\", "/"))
        if not original_name:
            raise ValidationError("Uploaded file must have a filename.")

        content = await file.read()
        self.ensure_directory()
        filename = self._write_new(original_name, content)
        path = os.path.join(self.directory, filename)

        logger.info(f"Archivo guardado en {path} ({len(content)} bytes)")
        return StoredFile(
            original_name=original_name,
            filename=filename,
            path=path,
            url=self.public_url(filename),
        )

    async def save_all(self, files: Optional[List[UploadFile]]) -> List[StoredFile]:
        """Guarda un lote de archivos en orden; rechaza lotes mayores al límite"""
        files = [f for f in (files or []) if f is not None and f.filename]
        if self.max_files is not None and len(files) > self.max_files:
            raise ValidationError(f"You can upload at most {self.max_files} files.")
        stored = []
        for file in files:
            stored.append(await self.save(file))
        return stored


# Instancias globales por categoría
document_receiver = UploadReceiver("uploads", max_files=settings.MAX_DOCUMENTS)
home_banner_receiver = UploadReceiver("homebanners")
slider_image_receiver = UploadReceiver("bannerimages")
gallery_image_receiver = UploadReceiver("galleryimages")

ALL_RECEIVERS = [
    document_receiver,
    home_banner_receiver,
    slider_image_receiver,
    gallery_image_receiver,
]


def ensure_upload_directories():
    """Crea las cuatro carpetas de destino si no existen"""
    for receiver in ALL_RECEIVERS:
        receiver.ensure_directory()
