from recruitment.extensions import db
from recruitment.models import JobPosition, Interviewer
import click

JOB_POSITIONS = [
    "Project Manager",
    "Full-Stack Developer",
    "UI/UX Designer",
    "Information Security Analyst",
]

INTERVIEWERS = [
    "Helena Rocha",
    "Marcos Lima",
    "Paula Nunes",
]


def seed():
    click.echo("🌱 Seeding job positions and interviewers...")

    created = 0
    for name in JOB_POSITIONS:
        if not JobPosition.query.filter_by(name=name).first():
            db.session.add(JobPosition(name=name, created_by="seed"))
            created += 1

    for name in INTERVIEWERS:
        if not Interviewer.query.filter_by(name=name).first():
            db.session.add(Interviewer(name=name, created_by="seed"))
            created += 1

    db.session.commit()
    click.echo(f"✅ Seeded {created} new reference records!")
