import click
from flask import current_app
from flask.cli import with_appcontext
from pydantic import ValidationError
from extensions import db
from helpers.errors import format_validation_errors
from services.results import Outcome
from services.user_service import UserService
from views.schemas import SignupRequest


@click.command("create-user")
@click.option("--username", prompt=True, help="Username of the new user")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password for the new user",
)
@with_appcontext
def create_user(username, password):
    """Create a user account from the command line."""
    try:
        payload = SignupRequest(username=username, password=password)
    except ValidationError as e:
        for error in format_validation_errors(e):
            click.echo(f"{error['field']}: {error['message']}")
        return

    service = UserService(db.session, rounds=current_app.config["BCRYPT_ROUNDS"])
    result = service.register(payload.username, payload.password)
    if result.outcome is Outcome.DUPLICATE:
        click.echo(f"User {payload.username} already exists.")
        return

    click.echo(f"User {payload.username} created successfully.")
