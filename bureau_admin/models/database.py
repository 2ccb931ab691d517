"""
Conexión a la base de datos (pool de conexiones SQLAlchemy)
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from ..config import settings

Base = declarative_base()


def _engine_options(url: str) -> dict:
    # SQLite no acepta parámetros de pool de tamaño fijo
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,                   # detecta conexiones caídas y reconecta al hacer checkout
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": 30,
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependencia: obtiene una sesión del pool y la libera al terminar la petición"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Crea las tablas que no existan"""
    Base.metadata.create_all(bind=bind or engine)
