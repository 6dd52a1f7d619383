from .candidate import Candidate
from .status_entry import StatusEntry, Status
from .interview import Interview, InterviewType
from .document import CandidateDocument, DocumentType
from .job_position import JobPosition
from .interviewer import Interviewer

__all__ = [
    "Candidate",
    "StatusEntry",
    "Status",
    "Interview",
    "InterviewType",
    "CandidateDocument",
    "DocumentType",
    "JobPosition",
    "Interviewer",
]
