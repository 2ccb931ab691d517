"""
Bureau Directory Admin - Backend de administración de distribuidores y bureaus
FastAPI Application
"""
import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .config import settings
from .exceptions import setup_exception_handlers
from .models import get_db, init_db
from .schemas import HealthResponse
from .utils.uploads import ALL_RECEIVERS, ensure_upload_directories

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    Backend de administración del directorio de bureaus.

    ## Funcionalidades

    * **Login**: administradores, distribuidores y bureaus
    * **Distribuidores**: registro con documentos y listado
    * **Bureaus**: registro con bureauId de 7 dígitos, consultas y actualización parcial
    * **Sitio web del bureau**: banner de bienvenida, slider y galería de imágenes
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Errores como {"message": ...}
setup_exception_handlers(app)

# Importar routers después de crear la app para evitar imports circulares
from .routers import (
    auth_router,
    distributors_router,
    bureaus_router,
    images_router
)

app.include_router(auth_router, prefix=settings.API_PREFIX, tags=["auth"])
app.include_router(distributors_router, prefix=settings.API_PREFIX, tags=["distributors"])
app.include_router(bureaus_router, prefix=settings.API_PREFIX, tags=["bureaus"])
app.include_router(images_router, prefix=settings.API_PREFIX, tags=["images"])

# Archivos subidos servidos en la misma ruta que se guarda en la base de datos
for receiver in ALL_RECEIVERS:
    app.mount(
        f"/{receiver.folder}",
        StaticFiles(directory=receiver.directory, check_dir=False),
        name=receiver.folder
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redireccionar a la documentación"""
    return RedirectResponse(url="/docs")


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(db: Session = Depends(get_db)):
    """Health check con verificación de la base de datos"""
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError:
        logger.warning("Health check: base de datos no disponible")
        db_status = "disconnected"

    return HealthResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        database=db_status
    )


# Event handlers
@app.on_event("startup")
async def startup_event():
    """Evento de inicio de la aplicación"""
    ensure_upload_directories()
    if settings.AUTO_CREATE_TABLES:
        try:
            init_db()
        except SQLAlchemyError:
            logger.exception("No se pudieron crear las tablas")
    logger.info(f"[STARTUP] {settings.APP_NAME} v{settings.APP_VERSION} iniciado")
    logger.info(f"[INFO] Documentación disponible en: http://{settings.SERVICE_HOST}:{settings.PORT}/docs")
    logger.info(f"[INFO] Endpoints en: {settings.API_PREFIX}")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de cierre de la aplicación"""
    logger.info(f"[SHUTDOWN] {settings.APP_NAME} detenido")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bureau_admin.main:app",
        host=settings.SERVICE_HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
