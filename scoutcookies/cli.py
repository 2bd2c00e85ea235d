# scoutcookies/cli.py
import click
from flask.cli import with_appcontext

from .services.scout_service import create_scout


@click.command("create-scout")
@click.option("--email", required=True)
@click.option("--password", required=True)
@click.option("--name", required=True)
@with_appcontext
def create_scout_command(email, password, name):
    try:
        scout = create_scout(email, password, name)
    except ValueError as e:
        raise click.ClickException(str(e))
    click.echo(f"Scout created: {scout.id} {scout.email}")


def register_cli(app):
    app.cli.add_command(create_scout_command)
