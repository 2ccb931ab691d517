"""
Routers de la API
"""
from .auth import router as auth_router
from .distributors import router as distributors_router
from .bureaus import router as bureaus_router
from .images import router as images_router

__all__ = [
    "auth_router",
    "distributors_router",
    "bureaus_router",
    "images_router"
]
