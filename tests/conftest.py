"""
Shared test fixtures.

Provides:
- ``app`` / ``client`` on the in-memory store (testing config)
- ``db_app`` on in-memory SQLite through the database store
- factories that create patients and records through the API
"""
import pytest
from family_emr import create_app
from family_emr.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app('testing', overrides={'UPLOAD_FOLDER': str(tmp_path / 'uploads')})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    return app.extensions['storage']


@pytest.fixture
def db_app(tmp_path):
    """App bound to the SQLAlchemy store on a throwaway in-memory database."""
    app = create_app('testing', overrides={
        'STORAGE_BACKEND': 'database',
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def create_patient(client):
    """POST a patient and return its JSON body."""
    def _create(**overrides):
        payload = {'name': 'Ana Silva', 'birthDate': '2008-07-10'}
        payload.update(overrides)
        response = client.post('/api/patients', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create


@pytest.fixture
def create_record(client):
    """POST a medical record for ``patient_id`` and return its JSON body."""
    def _create(patient_id, **overrides):
        payload = {'patientId': patient_id, 'type': 'exam', 'date': '2025-01-01', 'title': 'Hemograma'}
        payload.update(overrides)
        response = client.post('/api/medical-records', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _create
