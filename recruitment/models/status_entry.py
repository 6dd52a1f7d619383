from recruitment.extensions import db
from recruitment.clock import utcnow
from sqlalchemy import event
import enum
import uuid


class Status(str, enum.Enum):
    SCREENING = "Screening"
    INTERVIEW = "Interview"
    TECHNICAL_TEST = "TechnicalTest"
    OFFER = "Offer"
    HIRED = "Hired"
    REJECTED = "Rejected"


class StatusEntry(db.Model):
    __tablename__ = "status_entries"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = db.Column(db.String(36), db.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False)
    position = db.Column(db.Integer, nullable=False)
    status = db.Column(
        db.Enum(Status, name="candidate_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    date = db.Column(db.DateTime, nullable=False, default=utcnow)
    notes = db.Column(db.Text)
    # back-reference to the interview scheduled by this transition
    interview_id = db.Column(db.String(36))
    actor = db.Column(db.String(255))

    candidate = db.relationship("Candidate", back_populates="status_history")

    def __repr__(self):
        return f"<StatusEntry {self.status.value if self.status else None} @ {self.date}>"


@event.listens_for(StatusEntry, "before_update")
def _reject_history_edit(mapper, connection, target):
    raise ValueError("Status history entries are immutable once appended")
