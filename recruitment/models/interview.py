from recruitment.extensions import db
from recruitment.clock import utcnow
import enum
import uuid


class InterviewType(str, enum.Enum):
    ONLINE = "Online"
    IN_PERSON = "InPerson"


class Interview(db.Model):
    __tablename__ = "interviews"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = db.Column(db.String(36), db.ForeignKey("candidates.id", ondelete="CASCADE"), nullable=False, index=True)
    candidate_name = db.Column(db.String(255))
    interviewer_id = db.Column(db.String(36), db.ForeignKey("interviewers.id", ondelete="SET NULL"))
    interviewer_name = db.Column(db.String(255))
    type = db.Column(
        db.Enum(InterviewType, name="interview_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    date = db.Column(db.DateTime, nullable=False, index=True)
    notes = db.Column(db.Text)
    actor = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=utcnow)

    def __repr__(self):
        return f"<Interview {self.candidate_name} @ {self.date}>"
