"""
Modelos de imágenes por bureau (slider y galería)
"""
from sqlalchemy import Column, Integer, String, Text
from .database import Base


class SliderImage(Base):
    """Imagen del slider (banner) de la web del bureau"""

    __tablename__ = "slider_images"

    id = Column(Integer, primary_key=True, index=True)
    bureauId = Column(String(7), nullable=False, index=True)
    imageUrl = Column(Text, nullable=False)

    def __repr__(self):
        return f"<SliderImage(id={self.id}, bureauId={self.bureauId})>"


class GalleryImage(Base):
    """Imagen de la galería del bureau"""

    __tablename__ = "gallery_images"

    id = Column(Integer, primary_key=True, index=True)
    bureauId = Column(String(7), nullable=False, index=True)
    imageUrl = Column(Text, nullable=False)

    def __repr__(self):
        return f"<GalleryImage(id={self.id}, bureauId={self.bureauId})>"
