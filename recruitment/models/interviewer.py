from recruitment.extensions import db
from recruitment.clock import utcnow
import uuid

class Interviewer(db.Model):
    __tablename__ = "interviewers"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    created_by = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, default=utcnow)
