from recruitment.models import Candidate, CandidateDocument, Interview, StatusEntry
from recruitment.services import ledger


def _iso(value):
    return value.isoformat() if value else None


def _value(enum_member):
    return enum_member.value if enum_member is not None else None


def status_entry_to_dict(entry: StatusEntry):
    return {
        "status": _value(entry.status),
        "date": _iso(entry.date),
        "notes": entry.notes,
        "interview_id": entry.interview_id,
        "actor": entry.actor,
    }


def document_to_dict(doc: CandidateDocument):
    return {
        "id": doc.id,
        "type": _value(doc.type),
        "file_name": doc.file_name,
        "locator": doc.locator,
        "content_type": doc.content_type,
        "uploaded_at": _iso(doc.uploaded_at),
    }


def candidate_to_dict(c: Candidate, with_history=True):
    data = {
        "id": c.id,
        "name": c.name,
        "government_id": c.government_id,
        "email": c.email,
        "phone": c.phone,
        "job_position": c.job_position,
        "description": c.description,
        "current_status": _value(ledger.current_status(c)),
        "documents": [document_to_dict(d) for d in c.documents],
        "last_update": _iso(c.last_update),
        "created_by": c.created_by,
        "last_updated_by": c.last_updated_by,
    }
    if with_history:
        data["status_history"] = [status_entry_to_dict(e) for e in c.status_history]
    return data


def interview_to_dict(interview: Interview):
    return {
        "id": interview.id,
        "candidate_id": interview.candidate_id,
        "candidate_name": interview.candidate_name,
        "interviewer_id": interview.interviewer_id,
        "interviewer_name": interview.interviewer_name,
        "type": _value(interview.type),
        "date": _iso(interview.date),
        "notes": interview.notes,
        "actor": interview.actor,
    }


def calendar_event_to_dict(event):
    return {
        "title": event.title,
        "start": _iso(event.start),
        "end": _iso(event.end),
        "interview": interview_to_dict(event.interview),
    }


def reference_to_dict(record):
    """JobPosition / Interviewer."""
    return {"id": record.id, "name": record.name}
