from flask.cli import with_appcontext
from recruitment.database.seed.seed_reference_data import seed as seed_reference_data
from recruitment.database.seed.seed_candidates import seed as seed_candidates

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Create the tables and run all database seeders."""
    from recruitment.extensions import db

    click.echo("🌱 Seeding database...")
    db.create_all()
    seed_reference_data()
    seed_candidates()
    click.echo("✅ All seeders completed!")
