"""
Configuración del servicio de administración de bureaus
"""
from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Configuration
    APP_NAME: str = "Bureau Directory Admin Service"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    # Si DATABASE_URL está definida tiene prioridad sobre las variables DB_*
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql"
    DB_HOST: str = "localhost"
    DB_PORT: Optional[int] = None
    DB_USER: str = "bureau_user"
    DB_PASSWORD: str = "bureau_pass"
    DB_NAME: str = "bureau_directory"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_RECYCLE: int = 300
    AUTO_CREATE_TABLES: bool = True

    # CORS Configuration
    CORS_ORIGINS: list = ["*"]

    # Service Configuration
    SERVICE_HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Uploads
    UPLOAD_ROOT: str = "."
    MAX_DOCUMENTS: int = 10

    # Seguridad
    BCRYPT_ROUNDS: int = 10

    @property
    def database_url(self) -> str:
        """URL de conexión construida a partir de las variables DB_*"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        host = f"{self.DB_HOST}:{self.DB_PORT}" if self.DB_PORT else self.DB_HOST
        return f"{self.DB_DRIVER}://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}@{host}/{self.DB_NAME}"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
