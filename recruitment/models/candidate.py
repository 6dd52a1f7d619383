from recruitment.extensions import db
from recruitment.clock import utcnow
from sqlalchemy.ext.orderinglist import ordering_list
import uuid


class Candidate(db.Model):
    __tablename__ = "candidates"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    government_id = db.Column(db.String(14), unique=True, nullable=False)
    email = db.Column(db.String(255))
    phone = db.Column(db.String(50))
    job_position = db.Column(db.String(255))
    description = db.Column(db.Text, nullable=True)

    last_update = db.Column(db.DateTime, default=utcnow, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    created_by = db.Column(db.String(255))
    last_updated_by = db.Column(db.String(255))

    # optimistic concurrency: every UPDATE/DELETE checks and bumps this
    version = db.Column(db.Integer, nullable=False)

    status_history = db.relationship(
        "StatusEntry",
        back_populates="candidate",
        order_by="StatusEntry.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    documents = db.relationship(
        "CandidateDocument",
        back_populates="candidate",
        order_by="CandidateDocument.uploaded_at",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Candidate {self.name}>"
