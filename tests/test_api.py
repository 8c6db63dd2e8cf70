"""
API route tests - verifies endpoints and database file creation
"""
import json
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from dental_clinic.main import create_app
from dental_clinic.core.config import Settings
from dental_clinic.database.patients import PLACEHOLDER_AVATAR_URL


JANE = {
    "name": "Jane Doe",
    "phone": "555-0101",
    "email": "jane@x.com",
    "dateOfBirth": "1990-01-01",
    "medicalHistory": "None",
    "dentalHistory": "None",
}


@pytest.fixture
def temp_data_dir(tmp_path):
    """Temporary data directory for tests"""
    return tmp_path / "data"


@pytest.fixture
def client(temp_data_dir):
    """Test client backed by local JSON files only"""
    return TestClient(create_app(Settings(data_dir=temp_data_dir)))


@pytest.fixture
def remote_client(temp_data_dir):
    """Test client with the remote drive backend enabled"""
    return TestClient(create_app(Settings(data_dir=temp_data_dir, remote_storage_enabled=True)))


def test_root(client):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_patients_empty(client, temp_data_dir):
    """Listing an empty store bootstraps the patients document"""
    response = client.get("/api/v1/patients")
    assert response.status_code == 200
    assert response.json() == []
    assert json.loads((temp_data_dir / "patients.json").read_text()) == []


def test_add_patient(client, temp_data_dir):
    """Test adding a patient and verify the database file contents"""
    response = client.post("/api/v1/patients", json=JANE)

    assert response.status_code == 200
    data = response.json()
    assert data == {**JANE, "id": 1, "avatarUrl": PLACEHOLDER_AVATAR_URL}

    patient_file = Path(temp_data_dir) / "patients.json"
    assert patient_file.exists(), f"Patient file should be created at {patient_file}"
    with open(patient_file, 'r') as f:
        saved_data = json.load(f)
        assert saved_data == [data]


def test_get_patient(client):
    """Test getting a patient after adding one"""
    created = client.post("/api/v1/patients", json=JANE).json()

    response = client.get(f"/api/v1/patients/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_get_patient_not_found(client):
    response = client.get("/api/v1/patients/42")
    assert response.status_code == 404
    assert response.json()["detail"] == "Patient not found"


def test_add_multiple_patients(client):
    """Ids are assigned sequentially and patients are appended in order"""
    ids = [
        client.post("/api/v1/patients", json={**JANE, "name": f"Patient {i}"}).json()["id"]
        for i in range(3)
    ]
    assert ids == [1, 2, 3]

    names = [p["name"] for p in client.get("/api/v1/patients").json()]
    assert names == ["Patient 0", "Patient 1", "Patient 2"]


def test_patient_validation(client):
    """Missing or blank fields are rejected before reaching storage"""
    missing = {k: v for k, v in JANE.items() if k != "name"}
    assert client.post("/api/v1/patients", json=missing).status_code == 422
    assert client.post("/api/v1/patients", json={**JANE, "phone": "  "}).status_code == 422
    assert client.post("/api/v1/patients", json={**JANE, "email": "not-an-email"}).status_code == 422


def test_add_patient_storage_failure(client, temp_data_dir):
    """Malformed stored JSON becomes a generic 500"""
    temp_data_dir.mkdir(parents=True)
    (temp_data_dir / "patients.json").write_text("{not json")

    response = client.post("/api/v1/patients", json=JANE)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to add patient."


def test_files_empty_for_unknown_patient(client):
    response = client.get("/api/v1/patients/7/files")
    assert response.status_code == 200
    assert response.json() == []


def test_add_and_list_files(client, temp_data_dir):
    upload = {"name": "xray.png", "url": "data:image/png;base64,AAAA", "type": "image", "hint": "dental x-ray"}
    response = client.post("/api/v1/patients/1/files", json=upload)
    assert response.status_code == 200
    assert response.json() == {**upload, "provider": "local"}

    listing = client.get("/api/v1/patients/1/files").json()
    assert listing[-1] == {**upload, "provider": "local"}

    saved = json.loads((temp_data_dir / "files.json").read_text())
    assert saved == {"1": [{**upload, "provider": "local"}]}


def test_add_file_rejects_unknown_type(client):
    upload = {"name": "scan.bin", "url": "data:,", "type": "video"}
    assert client.post("/api/v1/patients/1/files", json=upload).status_code == 422


def test_files_remote_listed_first(remote_client):
    upload = {"name": "notes.txt", "url": "data:text/plain;base64,AAAA", "type": "doc"}
    added = remote_client.post("/api/v1/patients/3/files", json=upload).json()
    assert added["provider"] == "remote"

    listing = remote_client.get("/api/v1/patients/3/files").json()
    assert [f["name"] for f in listing] == [
        "panoramic_xray_gdrive.jpg",
        "referral_letter_gdrive.pdf",
        "notes.txt",
    ]


def test_share_local_data_uri(client):
    file = {"name": "x.png", "url": "data:image/png;base64,AAAA", "type": "image", "provider": "local"}
    response = client.post("/api/v1/files/share", json=file)
    assert response.status_code == 200
    assert response.json() == {"success": True, "url": "data:image/png;base64,AAAA"}


def test_share_local_remote_url(client):
    file = {"name": "x.png", "url": "https://example.com/x.png", "type": "image", "provider": "local"}
    response = client.post("/api/v1/files/share", json=file)
    assert response.status_code == 200
    assert response.json()["success"] is False


def test_share_remote_file_disabled(client):
    file = {"name": "x.png", "url": "https://placehold.co/400x400.png", "type": "image", "provider": "remote"}
    body = client.post("/api/v1/files/share", json=file).json()
    assert body["success"] is False
    assert body["error"].endswith("not enabled.")


def test_share_remote_file_enabled(remote_client):
    file = {"name": "x.png", "url": "https://placehold.co/400x400.png", "type": "image", "provider": "remote"}
    body = remote_client.post("/api/v1/files/share", json=file).json()
    assert body["success"] is True
    assert body["url"].startswith("https://")


def test_auth_config(temp_data_dir):
    disabled = TestClient(create_app(Settings(data_dir=temp_data_dir)))
    enabled = TestClient(create_app(Settings(data_dir=temp_data_dir, auth_provider_enabled=True)))
    assert disabled.get("/api/v1/config/auth").json() == {"google": {"enabled": False}}
    assert enabled.get("/api/v1/config/auth").json() == {"google": {"enabled": True}}


def test_seed_demo_data_on_startup(temp_data_dir):
    with TestClient(create_app(Settings(data_dir=temp_data_dir, seed_demo_data=True))) as seeded:
        patients = seeded.get("/api/v1/patients").json()
    assert len(patients) == 5
    assert patients[0]["name"] == "Jane Doe"


def test_building_app_does_not_seed(temp_data_dir):
    """Seeding waits for startup so importing or building the app touches nothing"""
    create_app(Settings(data_dir=temp_data_dir, seed_demo_data=True))
    assert not (temp_data_dir / "patients.json").exists()


def test_search_patients_by_name_ignores_case(client):
    client.post("/api/v1/patients", json=JANE)
    client.post("/api/v1/patients", json={**JANE, "name": "John Smith", "phone": "555-0102"})

    response = client.get("/api/v1/patients", params={"search": "jANe"})
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Jane Doe"]


def test_search_patients_by_phone(client):
    client.post("/api/v1/patients", json=JANE)
    client.post("/api/v1/patients", json={**JANE, "name": "John Smith", "phone": "555-0102"})

    response = client.get("/api/v1/patients", params={"search": "0102"})
    assert [p["name"] for p in response.json()] == ["John Smith"]
    assert client.get("/api/v1/patients", params={"search": "nobody"}).json() == []


def test_files_document_with_wrong_shape(client, temp_data_dir):
    """A files document that is not an object becomes a generic 500"""
    temp_data_dir.mkdir(parents=True)
    (temp_data_dir / "files.json").write_text("[]")

    response = client.get("/api/v1/patients/1/files")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to load files."


def test_response_time_header(client):
    response = client.get("/")
    assert float(response.headers["X-Response-Time-Ms"]) >= 0
