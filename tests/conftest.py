from datetime import timedelta
import itertools

import pytest
from flask_jwt_extended import create_access_token

from config import TestConfig
from recruitment import create_app
from recruitment.clock import utcnow
from recruitment.extensions import db
from recruitment.models import DocumentType, Interviewer
from recruitment.services import candidate_directory
from recruitment.services.documents import PendingDocument
from recruitment.services.lifecycle import get_coordinator


@pytest.fixture
def app(tmp_path):
    class Config(TestConfig):
        STORAGE_ROOT = str(tmp_path / "storage")

    app = create_app(Config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["object_store"]


@pytest.fixture
def coordinator(app):
    return get_coordinator()


@pytest.fixture
def interviewer(app):
    interviewer = Interviewer(name="Helena Rocha")
    db.session.add(interviewer)
    db.session.commit()
    return interviewer


@pytest.fixture
def make_candidate(app):
    counter = itertools.count(1)

    def factory(name="Ana Silva", documents=None, **overrides):
        n = next(counter)
        profile = {
            "name": name,
            "government_id": f"{n:03d}.456.789-01",
            "email": f"candidate{n}@example.com",
            "phone": "(11) 98765-4321",
            "job_position": "Project Manager",
        }
        profile.update(overrides)
        return candidate_directory.create_candidate(profile, documents, actor="recruiter@example.com")

    return factory


@pytest.fixture
def pdf():
    def factory(name="resume.pdf", doc_type=DocumentType.RESUME, size=128):
        return PendingDocument(type=doc_type, file_name=name, raw_bytes=b"%PDF" + b"x" * size, content_type="application/pdf")
    return factory


@pytest.fixture
def next_week():
    return (utcnow() + timedelta(days=7)).replace(hour=14, minute=30, second=0, microsecond=0)


@pytest.fixture
def auth_headers(app):
    token = create_access_token(identity="user-1", additional_claims={"email": "recruiter@example.com"})
    return {"Authorization": f"Bearer {token}"}
