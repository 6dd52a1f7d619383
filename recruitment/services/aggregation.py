"""Read-only views computed from candidates and interviews on every request."""
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta

from recruitment.models import Status
from recruitment.services import ledger

IN_PROGRESS = (Status.SCREENING, Status.INTERVIEW, Status.TECHNICAL_TEST, Status.OFFER)

SECONDS_PER_DAY = 60 * 60 * 24


def group_by_status(candidates):
    """Partition candidates by their current status (board tabs)."""
    groups = {}
    for candidate in candidates:
        status = ledger.current_status(candidate)
        groups.setdefault(status, []).append(candidate)
    return groups


def status_counts(candidates):
    counts = defaultdict(int)
    for candidate in candidates:
        counts[ledger.current_status(candidate)] += 1
    return dict(counts)


def pipeline_summary(candidates):
    counts = status_counts(candidates)
    return {
        "total": len(candidates),
        "hired": counts.get(Status.HIRED, 0),
        "in_progress": sum(counts.get(status, 0) for status in IN_PROGRESS),
        "rejected": counts.get(Status.REJECTED, 0),
    }


def stage_durations(candidates):
    """Average days spent between consecutive history entries.

    Only adjacent entries (after sorting by date) are paired, and only when the
    later one is strictly later. Returns ``[(label, days), ...]`` ascending by
    days, ``days`` rounded to one decimal.
    """
    samples = defaultdict(list)
    for candidate in candidates:
        history = sorted(candidate.status_history, key=lambda entry: entry.date)
        for current, following in zip(history, history[1:]):
            if following.date <= current.date:
                continue
            elapsed = (following.date - current.date).total_seconds() / SECONDS_PER_DAY
            samples[f"{_label(current.status)} → {_label(following.status)}"].append(elapsed)

    averages = [
        (stage, round(sum(values) / len(values), 1))
        for stage, values in samples.items()
    ]
    return sorted(averages, key=lambda item: item[1])


@dataclass
class CalendarEvent:
    title: str
    start: datetime
    end: datetime
    interview: object


def calendar_events(interviews, duration_minutes=60):
    """One event per interview, each lasting ``duration_minutes``. Overlaps are not checked."""
    return [
        CalendarEvent(
            title=f"{interview.date:%H:%M} - {interview.candidate_name}",
            start=interview.date,
            end=interview.date + timedelta(minutes=duration_minutes),
            interview=interview,
        )
        for interview in interviews
    ]


def _label(status):
    return status.value if isinstance(status, Status) else str(status)
