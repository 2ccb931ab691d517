"""
Lógica de negocio: registro y login
"""
from .registration import RegistrationResult, register_distributor, register_bureau, link_documents
from .auth import authenticate, create_admin

__all__ = [
    "RegistrationResult",
    "register_distributor",
    "register_bureau",
    "link_documents",
    "authenticate",
    "create_admin",
]
