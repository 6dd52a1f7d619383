"""Append-only status history of a candidate.

The entry with the greatest ``date`` is the candidate's current status. Entries
are only ever appended; nothing here touches an entry once it is in the list.
"""
from recruitment.models.status_entry import Status


def append(candidate, entry):
    """Add ``entry`` to the end of the candidate's history and refresh ``last_update``."""
    candidate.status_history.append(entry)
    candidate.last_update = latest(candidate.status_history).date
    return entry


def latest(history):
    """Return the entry with the maximum date, or None for an empty history.

    Ties go to the entry appended last.
    """
    if not history:
        return None
    return max(reversed(list(history)), key=lambda entry: entry.date)


def current_status(candidate):
    entry = latest(candidate.status_history)
    return entry.status if entry else None


def active_interview_id(candidate):
    """Id of the interview referenced by the current entry, if any."""
    entry = latest(candidate.status_history)
    if entry is None or entry.status != Status.INTERVIEW:
        return None
    return entry.interview_id
