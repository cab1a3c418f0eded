import click
from flask.cli import with_appcontext
from extensions import db


@click.command("init-db")
@click.option(
    "--drop",
    is_flag=True,
    default=False,
    help="Drop all existing tables before creating them.",
)
@with_appcontext
def init_db(drop):
    """Create the database tables.

    With --drop this is a destructive reset. For schema changes on a live
    database, use 'flask db migrate' and 'flask db upgrade' provided by
    Flask-Migrate.
    """
    dialect_name = db.engine.dialect.name

    if drop:
        click.echo(f"{dialect_name.capitalize()} detected. Dropping all tables...")
        db.drop_all()

    db.create_all()
    click.echo("Database tables created.")
