"""Candidate documents before and after they reach the object store."""
from dataclasses import dataclass

from recruitment.errors import ObjectStoreFailed, ValidationFailed
from recruitment.models import DocumentType


@dataclass(frozen=True)
class PendingDocument:
    """A file received from the client that has not been uploaded yet."""
    type: DocumentType
    file_name: str
    raw_bytes: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class StoredDocument:
    """A document already in the object store; the only kind ever persisted."""
    type: DocumentType
    file_name: str
    locator: str
    content_type: str = "application/octet-stream"


def parse_document_type(value):
    try:
        return DocumentType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in DocumentType)
        raise ValidationFailed(f"Unknown document type '{value}'. Choose one of: {allowed}")


def validate_pending(document, max_size, accepted_types):
    if not document.file_name:
        raise ValidationFailed("Every document needs a file")
    if len(document.raw_bytes) > max_size:
        raise ValidationFailed(f"{document.file_name}: maximum file size is {max_size // (1024 * 1024)}MB")
    if document.content_type not in accepted_types:
        raise ValidationFailed(f"{document.file_name}: supported formats are JPEG, PNG and PDF")
    return document


def upload(object_store, candidate_id, document):
    """Turn a PendingDocument into a StoredDocument."""
    try:
        locator = object_store.upload(f"candidates/{candidate_id}/{document.file_name}", document.raw_bytes)
    except (OSError, ValueError) as e:
        raise ObjectStoreFailed(f"Could not upload {document.file_name}") from e
    return StoredDocument(
        type=document.type, file_name=document.file_name, locator=locator, content_type=document.content_type
    )
