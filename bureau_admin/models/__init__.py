"""
Modelos de la base de datos
"""
from .database import Base, get_db, engine, SessionLocal, init_db
from .admin import Admin
from .distributor import DistributorProfile, DistributorDocument
from .bureau import BureauProfile, BureauDocument
from .images import SliderImage, GalleryImage

__all__ = [
    "Base",
    "get_db",
    "engine",
    "SessionLocal",
    "init_db",
    "Admin",
    "DistributorProfile",
    "DistributorDocument",
    "BureauProfile",
    "BureauDocument",
    "SliderImage",
    "GalleryImage",
]
