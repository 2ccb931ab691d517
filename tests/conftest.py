"""
Configuración común de tests: base de datos SQLite y carpeta de uploads temporal
"""
import os

# El engine de la aplicación se crea al importar; sin esto intentaría usar PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_app.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bureau_admin.config import settings
from bureau_admin.main import app
from bureau_admin.models import Base, get_db

# Base de datos de pruebas
SQLALCHEMY_TEST_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_TEST_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency"""
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Crear y limpiar base de datos antes de cada test"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def upload_root(tmp_path, monkeypatch):
    """Los archivos subidos se escriben en un directorio temporal"""
    monkeypatch.setattr(settings, "UPLOAD_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


DISTRIBUTOR_FORM = {
    "fullName": "Ravi Kumar",
    "email": "ravi@distrib.com",
    "mobileNumber": "9876543210",
    "password": "ravi-secret",
    "companyName": "RK Distributors",
    "location": "Chennai",
    "paymentStatus": "paid",
}

BUREAU_FORM = {
    "bureauName": "Sri Lakshmi Matrimony",
    "mobileNumber": "9876501234",
    "about": "Matrimony bureau since 1998",
    "location": "Madurai",
    "email": "contact@srilakshmi.com",
    "ownerName": "Lakshmi",
    "paymentStatus": "pending",
    "distributorId": "1",
    "password": "bureau-secret",
}


@pytest.fixture
def distributor_form():
    """Formulario válido de distribuidor con campos sobreescribibles"""
    return lambda **overrides: {**DISTRIBUTOR_FORM, **overrides}


@pytest.fixture
def bureau_form():
    """Formulario válido de bureau con campos sobreescribibles"""
    return lambda **overrides: {**BUREAU_FORM, **overrides}


@pytest.fixture
def create_bureau(client, bureau_form):
    """Crea un bureau vía API y devuelve su bureauId"""
    def _create(**overrides):
        response = client.post("/api/bureau/create", data=bureau_form(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["bureauId"]
    return _create
