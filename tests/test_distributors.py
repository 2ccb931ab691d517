"""
Tests del registro y listado de distribuidores
"""
import asyncio

from bureau_admin.models import DistributorProfile, DistributorDocument
from bureau_admin.schemas import DistributorCreate
from bureau_admin.services import register_distributor
from bureau_admin.utils import StoredFile
from bureau_admin.utils.security import verify_password

from conftest import DISTRIBUTOR_FORM, TestingSessionLocal


def test_create_distributor(client, db, distributor_form):
    response = client.post("/api/distributor/create", data=distributor_form())
    assert response.status_code == 201
    assert response.json() == {"message": "Distributor created successfully"}

    rows = db.query(DistributorProfile).all()
    assert len(rows) == 1
    distributor = rows[0]
    assert distributor.password != "ravi-secret"
    assert verify_password("ravi-secret", distributor.password)
    assert distributor.createdAt is not None
    assert distributor.companyName == "RK Distributors"


def test_create_distributor_keeps_supplied_created_at(client, db, distributor_form):
    response = client.post("/api/distributor/create", data=distributor_form(createdAt="2024-01-15T10:30:00"))
    assert response.status_code == 201

    distributor = db.query(DistributorProfile).one()
    assert distributor.createdAt.isoformat().startswith("2024-01-15T10:30:00")


def test_create_distributor_invalid_created_at(client, distributor_form):
    response = client.post("/api/distributor/create", data=distributor_form(createdAt="ayer"))
    assert response.status_code == 400


def test_create_distributor_missing_required_field(client, db, distributor_form):
    form = distributor_form()
    del form["companyName"]

    response = client.post("/api/distributor/create", data=form)
    assert response.status_code == 400
    assert response.json()["message"] == "Please fill all required fields."
    assert db.query(DistributorProfile).count() == 0


def test_create_distributor_duplicate_email(client, db, distributor_form):
    """Mismo email con otro teléfono: 201 y luego 409"""
    first = client.post("/api/distributor/create", data=distributor_form())
    second = client.post("/api/distributor/create", data=distributor_form(mobileNumber="9000000000"))

    assert first.status_code == 201
    assert second.status_code == 409
    assert db.query(DistributorProfile).count() == 1


def test_create_distributor_duplicate_mobile(client, db, distributor_form):
    client.post("/api/distributor/create", data=distributor_form())
    response = client.post("/api/distributor/create", data=distributor_form(email="otro@distrib.com"))

    assert response.status_code == 409
    assert db.query(DistributorProfile).count() == 1


def test_create_distributor_with_documents(client, db, distributor_form, upload_root):
    files = [
        ("documents", ("gst.pdf", b"gst", "application/pdf")),
        ("documents", ("pan.pdf", b"pan", "application/pdf")),
    ]
    response = client.post("/api/distributor/create", data=distributor_form(), files=files)
    assert response.status_code == 201

    distributor = db.query(DistributorProfile).one()
    documents = db.query(DistributorDocument).filter(DistributorDocument.distributor_id == distributor.id).all()
    assert len(documents) == 2
    assert sorted(d.file_path.rsplit("-", 1)[-1] for d in documents) == ["gst.pdf", "pan.pdf"]
    assert all(d.file_path.startswith("/uploads/") for d in documents)
    assert len(list((upload_root / "uploads").iterdir())) == 2


def test_create_distributor_too_many_documents(client, db, distributor_form):
    files = [("documents", (f"doc{i}.pdf", b"x", "application/pdf")) for i in range(11)]

    response = client.post("/api/distributor/create", data=distributor_form(), files=files)
    assert response.status_code == 400
    assert db.query(DistributorProfile).count() == 0


def test_document_link_failure_is_not_propagated(db):
    """Si falla la fila de un documento, el distribuidor queda creado igual"""
    documents = [
        StoredFile(original_name="ok.pdf", filename="1-ok.pdf", path="uploads/1-ok.pdf", url="/uploads/1-ok.pdf"),
        # file_path NOT NULL: el insert falla
        StoredFile(original_name="bad.pdf", filename="2-bad.pdf", path="uploads/2-bad.pdf", url=None),
    ]
    data = DistributorCreate(**DISTRIBUTOR_FORM)

    result = asyncio.run(register_distributor(db, data, documents))

    assert result.documents_linked == 1
    assert result.failed_documents == ["2-bad.pdf"]
    assert db.query(DistributorProfile).count() == 1
    assert db.query(DistributorDocument).count() == 1


def test_concurrent_duplicate_creation_may_both_succeed():
    """
    Carrera conocida: la verificación de duplicados y el insert no son atómicos.
    Dos registros simultáneos con el mismo email pueden pasar ambos la verificación.
    """
    sessions = [TestingSessionLocal(), TestingSessionLocal()]
    data = DistributorCreate(**DISTRIBUTOR_FORM)

    async def both():
        return await asyncio.gather(*(register_distributor(s, data) for s in sessions))

    try:
        results = asyncio.run(both())
        assert len(results) == 2
        assert sessions[0].query(DistributorProfile).filter(
            DistributorProfile.email == DISTRIBUTOR_FORM["email"]
        ).count() == 2
    finally:
        for s in sessions:
            s.close()


def test_list_distributors(client, distributor_form):
    assert client.get("/api/distributors").json() == {"distributors": []}

    client.post("/api/distributor/create", data=distributor_form())
    response = client.get("/api/distributors")
    assert response.status_code == 200
    distributors = response.json()["distributors"]
    assert len(distributors) == 1
    assert distributors[0]["email"] == "ravi@distrib.com"
    assert "password" not in distributors[0]
