from datetime import datetime, timedelta
from types import SimpleNamespace

from recruitment.models import Status
from recruitment.services import aggregation

START = datetime(2024, 3, 1, 9, 0)


def entry(status, days, notes="note"):
    return SimpleNamespace(status=status, date=START + timedelta(days=days), notes=notes, interview_id=None)


def candidate(*entries, name="Ana"):
    return SimpleNamespace(id=name.lower(), name=name, status_history=list(entries))


def test_stage_durations_pairs_adjacent_entries():
    rejected = candidate(
        entry(Status.SCREENING, 0),
        entry(Status.INTERVIEW, 5),
        entry(Status.REJECTED, 6),
    )

    assert aggregation.stage_durations([rejected]) == [
        ("Interview → Rejected", 1.0),
        ("Screening → Interview", 5.0),
    ]


def test_stage_durations_averages_across_candidates():
    fast = candidate(entry(Status.SCREENING, 0), entry(Status.INTERVIEW, 2), name="Fast")
    slow = candidate(entry(Status.SCREENING, 0), entry(Status.INTERVIEW, 3), name="Slow")
    # stored out of order, sorted by date before pairing
    hired = candidate(entry(Status.OFFER, 10), entry(Status.HIRED, 10.5), name="Hired")
    hired.status_history.reverse()

    assert aggregation.stage_durations([fast, slow, hired]) == [
        ("Offer → Hired", 0.5),
        ("Screening → Interview", 2.5),
    ]


def test_stage_durations_skips_simultaneous_entries_and_single_entry_histories():
    same_day = candidate(entry(Status.SCREENING, 1), entry(Status.REJECTED, 1))
    lonely = candidate(entry(Status.SCREENING, 0), name="Lonely")

    assert aggregation.stage_durations([same_day, lonely]) == []


def test_group_by_status_uses_latest_entry():
    screening = candidate(entry(Status.SCREENING, 0), name="Bruno")
    hired = candidate(entry(Status.SCREENING, 0), entry(Status.HIRED, 20), name="Carla")
    # latest by date, not position
    back = candidate(entry(Status.OFFER, 9), entry(Status.SCREENING, 3), name="Diego")

    groups = aggregation.group_by_status([screening, hired, back])

    assert [c.name for c in groups[Status.SCREENING]] == ["Bruno"]
    assert [c.name for c in groups[Status.HIRED]] == ["Carla"]
    assert [c.name for c in groups[Status.OFFER]] == ["Diego"]
    assert Status.REJECTED not in groups


def test_pipeline_summary():
    candidates = [
        candidate(entry(Status.SCREENING, 0), name="A"),
        candidate(entry(Status.INTERVIEW, 0), name="B"),
        candidate(entry(Status.TECHNICAL_TEST, 0), name="C"),
        candidate(entry(Status.OFFER, 0), name="D"),
        candidate(entry(Status.HIRED, 0), name="E"),
        candidate(entry(Status.REJECTED, 0), name="F"),
        candidate(entry(Status.REJECTED, 0), name="G"),
    ]

    assert aggregation.pipeline_summary(candidates) == {
        "total": 7,
        "hired": 1,
        "in_progress": 4,
        "rejected": 2,
    }
    assert aggregation.status_counts(candidates)[Status.REJECTED] == 2


def test_pipeline_summary_of_empty_pipeline():
    assert aggregation.pipeline_summary([]) == {"total": 0, "hired": 0, "in_progress": 0, "rejected": 0}


def test_calendar_events_last_one_hour():
    interview = SimpleNamespace(candidate_name="Ana Silva", date=datetime(2024, 5, 2, 14, 30))

    (event,) = aggregation.calendar_events([interview])

    assert event.title == "14:30 - Ana Silva"
    assert event.start == interview.date
    assert event.end == datetime(2024, 5, 2, 15, 30)
    assert event.interview is interview


def test_calendar_events_keep_overlaps():
    same_slot = [
        SimpleNamespace(candidate_name=name, date=datetime(2024, 5, 2, 10, 0))
        for name in ("Ana", "Bruno")
    ]

    events = aggregation.calendar_events(same_slot, duration_minutes=30)

    assert [e.title for e in events] == ["10:00 - Ana", "10:00 - Bruno"]
    assert all(e.end - e.start == timedelta(minutes=30) for e in events)
