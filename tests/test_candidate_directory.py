import os

import pytest

from recruitment.errors import NotFound, ValidationFailed
from recruitment.extensions import db
from recruitment.models import Candidate, DocumentType, Status
from recruitment.services import candidate_directory, ledger
from recruitment.services.documents import PendingDocument

PROFILE = {
    "name": "Marcos Lima",
    "government_id": "321.654.987-00",
    "email": "marcos@example.com",
    "phone": "(21) 99876-5432",
    "job_position": "Backend Developer",
}


def test_create_candidate_starts_in_screening(app):
    candidate = candidate_directory.create_candidate(dict(PROFILE, description="Python, Flask"), actor="hr@example.com")

    assert candidate.created_by == "hr@example.com"
    assert candidate.description == "Python, Flask"
    assert len(candidate.status_history) == 1
    first = candidate.status_history[0]
    assert first.status == Status.SCREENING
    assert first.notes == "Candidate registered in the system."
    assert first.actor == "hr@example.com"
    assert candidate.last_update == first.date


def test_create_candidate_without_actor(app):
    candidate = candidate_directory.create_candidate(PROFILE)

    assert candidate.created_by is None
    assert candidate.status_history[0].actor == "System"


@pytest.mark.parametrize("field,value", [
    ("name", "A"),
    ("government_id", "12345678900"),
    ("email", "not-an-email"),
    ("phone", "12345"),
    ("job_position", "  "),
])
def test_create_candidate_validation(app, field, value):
    with pytest.raises(ValidationFailed):
        candidate_directory.create_candidate(dict(PROFILE, **{field: value}))
    assert Candidate.query.count() == 0


def test_duplicate_government_id_is_rejected(app):
    candidate_directory.create_candidate(PROFILE)

    with pytest.raises(ValidationFailed) as excinfo:
        candidate_directory.create_candidate(dict(PROFILE, email="other@example.com"))

    assert "already registered" in excinfo.value.message
    assert Candidate.query.count() == 1


def test_documents_are_stored_before_the_candidate(app, store, pdf):
    candidate = candidate_directory.create_candidate(PROFILE, [pdf("cv.pdf"), pdf("cnh.pdf", DocumentType.LICENSE)])

    assert [d.type for d in candidate.documents] == [DocumentType.RESUME, DocumentType.LICENSE]
    assert all(store.exists(d.locator) for d in candidate.documents)
    assert all(d.locator.startswith(f"candidates/{candidate.id}/") for d in candidate.documents)


def test_invalid_document_stores_nothing(app, store, pdf):
    gif = PendingDocument(type=DocumentType.OTHER, file_name="cat.gif", raw_bytes=b"GIF89a", content_type="image/gif")

    with pytest.raises(ValidationFailed):
        candidate_directory.create_candidate(PROFILE, [pdf(), gif])

    assert Candidate.query.count() == 0
    assert not os.path.exists(store.root) or os.listdir(store.root) == []


def test_update_candidate_edits_profile_and_appends_documents(make_candidate, pdf):
    candidate = make_candidate(documents=[pdf("cv.pdf")])
    history_before = len(candidate.status_history)

    updated = candidate_directory.update_candidate(
        candidate.id,
        {"name": "Ana Souza", "phone": "(11) 91234-5678"},
        [pdf("ctps.pdf", DocumentType.WORK_CARD)],
        actor="hr@example.com",
    )

    assert updated.name == "Ana Souza"
    assert updated.phone == "(11) 91234-5678"
    assert [d.file_name for d in updated.documents] == ["cv.pdf", "ctps.pdf"]
    assert updated.last_updated_by == "hr@example.com"
    assert len(updated.status_history) == history_before
    assert ledger.current_status(updated) == Status.SCREENING


def test_government_id_cannot_change(make_candidate):
    candidate = make_candidate()

    with pytest.raises(ValidationFailed):
        candidate_directory.update_candidate(candidate.id, {"government_id": "999.999.999-99"})

    # sending the same value back is fine
    updated = candidate_directory.update_candidate(
        candidate.id, {"government_id": candidate.government_id, "email": "new@example.com"}
    )
    assert updated.email == "new@example.com"


def test_update_missing_candidate(app):
    with pytest.raises(NotFound):
        candidate_directory.update_candidate("missing", {"name": "Nobody"})


def test_get_candidate(make_candidate):
    candidate = make_candidate()

    assert candidate_directory.get_candidate(candidate.id) is candidate
    with pytest.raises(NotFound):
        candidate_directory.get_candidate("missing")


def test_list_candidates_search(make_candidate):
    make_candidate(name="Ana Silva", job_position="Designer")
    make_candidate(name="Bruno Costa", job_position="Backend Developer")
    make_candidate(name="Carla Dias", job_position="Data Analyst")

    assert [c.name for c in candidate_directory.list_candidates("ana")] == ["Carla Dias", "Ana Silva"]
    assert [c.name for c in candidate_directory.list_candidates("BACKEND")] == ["Bruno Costa"]
    assert [c.name for c in candidate_directory.list_candidates("002.456")] == ["Bruno Costa"]
    assert len(candidate_directory.list_candidates()) == 3
    assert candidate_directory.list_candidates("nobody") == []


def test_list_candidates_most_recent_first(make_candidate, coordinator):
    first = make_candidate(name="Ana Silva")
    make_candidate(name="Bruno Costa")
    coordinator.change_status(first.id, "Offer", "Offer letter sent today.")

    db.session.expire_all()
    assert [c.name for c in candidate_directory.list_candidates()] == ["Ana Silva", "Bruno Costa"]
