# cli/commands/db.py
import click

from core.sa.database import Database
from core.sa.repositories import (
    AuthorRepository, BookInstanceRepository, BookRepository, GenreRepository
)
from core.sa.models import LoanStatus
from ..sample_data import populate as populate_catalog


@click.group()
@click.option('--db-url', default=None, help="Database URL (defaults to the DATABASE_URL environment variable)")
@click.pass_context
def db(ctx, db_url):
    """Database management commands"""
    ctx.obj = Database(db_url)


@db.command()
@click.pass_obj
def init(database: Database):
    """Create all tables"""
    database.init_db()
    click.echo(click.style("Database initialized", fg='green'))


@db.command()
@click.option('--yes', is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def drop(database: Database, yes: bool):
    """Drop all tables"""
    if not yes and not click.confirm("This will delete every record. Continue?"):
        click.echo(click.style("Aborted", fg='yellow'))
        return
    database.drop_db()
    click.echo(click.style("Database dropped", fg='green'))


@db.command()
@click.pass_obj
def populate(database: Database):
    """Insert the sample catalog into an empty database"""
    database.init_db()
    try:
        with database.get_db() as session:
            if BookRepository(session).count_books() > 0:
                click.echo(click.style("Catalog already has books, skipping sample data", fg='yellow'))
                return
            created = populate_catalog(session)
    except Exception as e:
        click.echo("\n" + click.style(f"Error during populate: {str(e)}", fg='red'), err=True)
        raise click.Abort()

    click.echo("\n" + click.style("Results:", fg='blue'))
    for name, count in created.items():
        click.echo(click.style(f"{name}: ", fg='blue') + click.style(str(count), fg='green'))


@db.command()
@click.pass_obj
def stats(database: Database):
    """Print the number of records of each type"""
    with database.get_db() as session:
        instance_repo = BookInstanceRepository(session)
        counts = {
            "Books": BookRepository(session).count_books(),
            "Copies": instance_repo.count_instances(),
            "Copies available": instance_repo.count_instances(LoanStatus.AVAILABLE),
            "Authors": AuthorRepository(session).count_authors(),
            "Genres": GenreRepository(session).count_genres(),
        }

    for label, count in counts.items():
        click.echo(click.style(f"{label}: ", fg='blue') + click.style(str(count), fg='cyan'))
