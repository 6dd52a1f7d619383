"""Job positions and interviewers used to fill selection fields."""
import logging

from sqlalchemy.exc import SQLAlchemyError

from recruitment.errors import PersistenceFailed, ValidationFailed
from recruitment.extensions import db
from recruitment.models import Interviewer, JobPosition

logger = logging.getLogger(__name__)


def list_job_positions():
    return JobPosition.query.order_by(JobPosition.name).all()


def list_interviewers():
    return Interviewer.query.order_by(Interviewer.name).all()


def add_job_position(name, actor=None):
    return _add(JobPosition, name, actor, "job position")


def add_interviewer(name, actor=None):
    return _add(Interviewer, name, actor, "interviewer")


def _add(model, name, actor, label):
    name = (name or "").strip()
    if not name:
        raise ValidationFailed(f"The {label} name cannot be empty")

    record = model(name=name, created_by=actor)
    try:
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"❌ Error adding {label}: {e}")
        raise PersistenceFailed(f"Could not add the new {label}") from e

    logger.info(f"✅ Added {label} '{name}'")
    return record
