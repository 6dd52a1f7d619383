from recruitment.extensions import db
from recruitment.models import Candidate, StatusEntry, Status
from recruitment.services import ledger
from datetime import datetime
import click

# (status, date, notes)
CANDIDATES = [
    {
        "name": "Ana Silva",
        "government_id": "123.456.789-01",
        "email": "ana.silva@example.com",
        "phone": "(11) 98765-4321",
        "job_position": "Project Manager",
        "description": "Proactive candidate with more than 5 years of project management experience.",
        "history": [
            (Status.SCREENING, datetime(2023, 11, 1), "Good fit for the role, well structured resume."),
            (Status.INTERVIEW, datetime(2023, 11, 5), "Excellent communication and technical knowledge in the HR interview."),
            (Status.TECHNICAL_TEST, datetime(2023, 11, 10), "Top score in the technical test."),
            (Status.OFFER, datetime(2023, 11, 15), "Offer sent and well received."),
            (Status.HIRED, datetime(2023, 11, 20), "Offer accepted. Starts next month."),
        ],
    },
    {
        "name": "Bruno Costa",
        "government_id": "234.567.890-12",
        "email": "bruno.costa@example.com",
        "phone": "(21) 91234-5678",
        "job_position": "Full-Stack Developer",
        "description": "Full-stack developer focused on JavaScript technologies.",
        "history": [
            (Status.SCREENING, datetime(2023, 12, 2), "Interesting resume, little experience with the main stack."),
            (Status.INTERVIEW, datetime(2023, 12, 6), "Good communication, lacked depth for a senior position."),
            (Status.REJECTED, datetime(2023, 12, 7), "Missing essential technical requirements. Keep in mind for junior roles."),
        ],
    },
    {
        "name": "Carla Dias",
        "government_id": "345.678.901-23",
        "email": "carla.dias@example.com",
        "phone": "(31) 95678-1234",
        "job_position": "UI/UX Designer",
        "description": "UI/UX designer with a strong mobile portfolio.",
        "history": [
            (Status.SCREENING, datetime(2024, 1, 10), "Impressive portfolio."),
            (Status.INTERVIEW, datetime(2024, 1, 15), "Great case presentation and cultural fit."),
            (Status.TECHNICAL_TEST, datetime(2024, 1, 20), "Waiting for the technical test delivery."),
        ],
    },
    {
        "name": "Daniel Martins",
        "government_id": "456.789.012-34",
        "email": "daniel.martins@example.com",
        "phone": "(41) 98765-4321",
        "job_position": "Information Security Analyst",
        "description": "Recent graduate with a strong interest in information security.",
        "history": [
            (Status.SCREENING, datetime(2024, 2, 5), "Junior candidate, initial screening."),
        ],
    },
]


def seed():
    click.echo("🌱 Seeding candidates...")

    created = 0
    for data in CANDIDATES:
        if Candidate.query.filter_by(government_id=data["government_id"]).first():
            click.echo(f"⚠️ Candidate '{data['name']}' already exists. Skipping insert.")
            continue

        fields = {k: v for k, v in data.items() if k != "history"}
        first_date = data["history"][0][1]
        candidate = Candidate(created_by="seed", created_at=first_date, **fields)
        for status, date, notes in data["history"]:
            ledger.append(candidate, StatusEntry(status=status, date=date, notes=notes, actor="seed"))
        db.session.add(candidate)
        created += 1

    db.session.commit()
    click.echo(f"✅ Seeded {created} candidates successfully!")
