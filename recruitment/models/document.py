from recruitment.extensions import db
from recruitment.clock import utcnow
import enum
import uuid


class DocumentType(str, enum.Enum):
    LICENSE = "license"
    WORK_CARD = "work-card"
    RESUME = "resume"
    OTHER = "other"


class CandidateDocument(db.Model):
    __tablename__ = "candidate_documents"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = db.Column(db.String(36), db.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    type = db.Column(
        db.Enum(DocumentType, name="document_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    file_name = db.Column(db.String(255), nullable=False)
    locator = db.Column(db.String(512), nullable=False)
    content_type = db.Column(db.String(100), default="application/octet-stream")
    uploaded_at = db.Column(db.DateTime, default=utcnow)

    candidate = db.relationship("Candidate", back_populates="documents")
