"""Interview records. Nothing here commits; the caller owns the transaction."""
from recruitment.extensions import db
from recruitment.models import Interview
import uuid


def create(interview):
    """Stage a new interview under a fresh id and return it."""
    interview.id = str(uuid.uuid4())
    db.session.add(interview)
    return interview


def get(interview_id):
    return db.session.get(Interview, interview_id)


def delete_by_id(interview_id):
    """Remove an interview. Deleting an id that is already gone is a no-op."""
    return Interview.query.filter_by(id=interview_id).delete(synchronize_session="fetch")


def delete_all_for_candidate(candidate_id):
    return Interview.query.filter_by(candidate_id=candidate_id).delete(synchronize_session="fetch")


def list_for_candidate(candidate_id):
    return Interview.query.filter_by(candidate_id=candidate_id).order_by(Interview.date.asc()).all()


def list_ordered_by_date():
    """Interviews ascending by date.

    The returned query is lazy and can be iterated any number of times; each
    pass reads the table again.
    """
    return Interview.query.order_by(Interview.date.asc(), Interview.id.asc())
