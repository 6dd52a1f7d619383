"""Candidate records: profile fields and attached documents.

Status changes never go through here; see ``lifecycle``.
"""
import logging
import re
import uuid

from flask import current_app
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from recruitment.clock import utcnow
from recruitment.errors import NotFound, PersistenceFailed, ValidationFailed
from recruitment.extensions import db
from recruitment.models import Candidate, CandidateDocument, Status, StatusEntry
from recruitment.services import documents as document_store
from recruitment.services import ledger
from recruitment.services.storage import StorageObjectNotFound

logger = logging.getLogger(__name__)

GOVERNMENT_ID_PATTERN = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

EDITABLE_FIELDS = ("name", "email", "phone", "job_position", "description")


def validate_profile(profile, partial=False):
    """Check and clean the profile fields; returns a new dict.

    With ``partial`` only the fields present are validated (edit form).
    """
    cleaned = {}

    def present(field):
        return not partial or field in profile

    if present("name"):
        name = (profile.get("name") or "").strip()
        if len(name) < 2:
            raise ValidationFailed("The name must have at least 2 characters")
        cleaned["name"] = name

    if not partial:
        government_id = (profile.get("government_id") or "").strip()
        if not GOVERNMENT_ID_PATTERN.match(government_id):
            raise ValidationFailed("Invalid government ID. Use the format XXX.XXX.XXX-XX")
        cleaned["government_id"] = government_id

    if present("email"):
        email = (profile.get("email") or "").strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationFailed("Invalid email")
        cleaned["email"] = email

    if present("phone"):
        phone = (profile.get("phone") or "").strip()
        if len(phone) < 10:
            raise ValidationFailed("Invalid phone number")
        cleaned["phone"] = phone

    if present("job_position"):
        job_position = (profile.get("job_position") or "").strip()
        if not job_position:
            raise ValidationFailed("Please select a job position")
        cleaned["job_position"] = job_position

    if "description" in profile:
        cleaned["description"] = profile.get("description") or None

    return cleaned


def get_candidate(candidate_id):
    candidate = db.session.get(Candidate, candidate_id)
    if candidate is None:
        raise NotFound(f"Candidate {candidate_id} not found")
    return candidate


def open_document(candidate_id, document_id):
    """Return (document, binary stream) for one of the candidate's stored documents."""
    document = CandidateDocument.query.filter_by(id=document_id, candidate_id=get_candidate(candidate_id).id).first()
    if document is None:
        raise NotFound(f"Document {document_id} not found")
    try:
        stream = current_app.extensions["object_store"].open(document.locator)
    except StorageObjectNotFound as e:
        logger.warning(f"⚠️ Document {document.locator} is missing from the object store")
        raise NotFound(f"The file for document {document_id} is no longer available") from e
    return document, stream


def list_candidates(search=None):
    """All candidates, most recently updated first, optionally filtered.

    ``search`` matches name or job position (case-insensitive) or a piece of
    the government ID.
    """
    query = Candidate.query
    term = (search or "").strip()
    if term:
        like = f"%{term.lower()}%"
        query = query.filter(or_(
            func.lower(Candidate.name).like(like),
            func.lower(Candidate.job_position).like(like),
            Candidate.government_id.like(f"%{term}%"),
        ))
    return query.order_by(Candidate.last_update.desc()).all()


def create_candidate(profile, documents=None, actor=None):
    """Register a candidate in Screening, uploading any pending documents first."""
    data = validate_profile(profile)
    pending = _validate_documents(documents)

    if Candidate.query.filter_by(government_id=data["government_id"]).first():
        raise ValidationFailed("This government ID is already registered")

    candidate_id = str(uuid.uuid4())
    stored = _upload_all(candidate_id, pending)
    now = utcnow()

    candidate = Candidate(id=candidate_id, created_by=actor, created_at=now, **data)
    for doc in stored:
        candidate.documents.append(CandidateDocument(
            type=doc.type, file_name=doc.file_name, locator=doc.locator, content_type=doc.content_type
        ))
    ledger.append(candidate, StatusEntry(
        status=Status.SCREENING,
        date=now,
        notes="Candidate registered in the system.",
        actor=actor or current_app.config.get("DEFAULT_ACTOR", "System"),
    ))

    try:
        db.session.add(candidate)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        _discard_uploads(stored)
        raise ValidationFailed("This government ID is already registered") from e
    except SQLAlchemyError as e:
        db.session.rollback()
        _discard_uploads(stored)
        logger.error(f"❌ Error adding candidate: {e}")
        raise PersistenceFailed("Could not register the candidate") from e

    logger.info(f"✅ Candidate {candidate.name} registered ({len(stored)} documents)")
    return candidate


def update_candidate(candidate_id, profile, documents=None, actor=None):
    """Edit profile fields and append new documents; the government ID never changes."""
    candidate = get_candidate(candidate_id)
    government_id = profile.get("government_id")
    if government_id and government_id != candidate.government_id:
        raise ValidationFailed("The government ID cannot be changed")

    data = validate_profile({k: v for k, v in profile.items() if k in EDITABLE_FIELDS}, partial=True)
    pending = _validate_documents(documents)
    stored = _upload_all(candidate.id, pending)

    for field, value in data.items():
        setattr(candidate, field, value)
    for doc in stored:
        candidate.documents.append(CandidateDocument(
            type=doc.type, file_name=doc.file_name, locator=doc.locator, content_type=doc.content_type
        ))
    candidate.last_update = utcnow()
    candidate.last_updated_by = actor

    try:
        db.session.commit()
    except StaleDataError as e:
        db.session.rollback()
        _discard_uploads(stored)
        raise PersistenceFailed("The candidate was modified by someone else. Reload and try again.") from e
    except SQLAlchemyError as e:
        db.session.rollback()
        _discard_uploads(stored)
        logger.error(f"❌ Error updating candidate {candidate_id}: {e}")
        raise PersistenceFailed("Could not update the candidate") from e

    logger.info(f"✅ Candidate {candidate_id} updated ({len(stored)} new documents)")
    return candidate


def _validate_documents(documents):
    config = current_app.config
    return [
        document_store.validate_pending(doc, config["MAX_DOCUMENT_SIZE"], config["ACCEPTED_DOCUMENT_TYPES"])
        for doc in documents or []
    ]


def _upload_all(candidate_id, pending):
    store = current_app.extensions["object_store"]
    stored = []
    try:
        for doc in pending:
            stored.append(document_store.upload(store, candidate_id, doc))
    except Exception:
        _discard_uploads(stored)
        raise
    return stored


def _discard_uploads(stored):
    store = current_app.extensions["object_store"]
    for doc in stored:
        try:
            store.delete(doc.locator)
        except (StorageObjectNotFound, OSError) as e:
            logger.warning(f"⚠️ Could not clean up {doc.locator}: {e}")
