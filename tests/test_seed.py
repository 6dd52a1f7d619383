from recruitment.models import Candidate, Interviewer, JobPosition, Status
from recruitment.services import aggregation, ledger


def test_seed_all_is_idempotent(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-all"])
    assert result.exit_code == 0, result.output
    assert "All seeders completed" in result.output

    result = runner.invoke(args=["seed-all"])
    assert result.exit_code == 0, result.output
    assert "already exists" in result.output

    assert Candidate.query.count() == 4
    assert JobPosition.query.count() == 4
    assert Interviewer.query.count() == 3


def test_seeded_pipeline(app):
    app.test_cli_runner().invoke(args=["seed-all"])
    candidates = Candidate.query.all()

    statuses = {c.name: ledger.current_status(c) for c in candidates}
    assert statuses["Ana Silva"] == Status.HIRED
    assert statuses["Bruno Costa"] == Status.REJECTED
    assert dict(aggregation.stage_durations(candidates))["Interview → Rejected"] == 1.0
