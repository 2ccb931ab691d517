"""
Errores de la API y sus manejadores

Cada error es una HTTPException con su código de estado, de modo que se
traduce directamente a respuesta en el punto donde ocurre.
"""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Server error. Please try again later."


class ValidationError(HTTPException):
    """Datos faltantes o inválidos (400)"""

    def __init__(self, detail: str = "Please fill all required fields."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    """Email o teléfono ya registrado (409)"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class NotFoundError(HTTPException):
    """No existe la fila buscada (404)"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AuthError(HTTPException):
    """Contraseña incorrecta (401)"""

    def __init__(self, detail: str = "Invalid password"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class StoreError(HTTPException):
    """
    Falla de la base de datos (500)
    El cliente solo recibe un mensaje genérico; el detalle queda en el log
    """

    def __init__(self, detail: str = GENERIC_SERVER_ERROR):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def setup_exception_handlers(app: FastAPI):
    """Registra los manejadores que devuelven {"message": ...}"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Petición inválida en {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request.", "errors": jsonable_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Error no controlado en {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_SERVER_ERROR},
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Errores de validación reducidos a campos serializables"""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
