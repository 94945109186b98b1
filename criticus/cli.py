"""CLI tools for site operators."""

import csv
import sys

import click

from criticus.core.config import settings
from criticus.db.enums import FormKind
from criticus.services.errors import StorageUnavailable
from criticus.services.submission_store import SubmissionStore

EXPORT_COLUMNS: dict[FormKind, tuple[str, ...]] = {
    FormKind.WAITLIST: ("id", "name", "email", "university", "role", "how_heard_about_us", "created_at"),
    FormKind.DEMO: ("id", "name", "email", "institution_type", "institution_name", "role", "created_at"),
    FormKind.NEWSLETTER: ("id", "name", "email", "created_at"),
    FormKind.COLLABORATOR: (
        "id",
        "name",
        "email",
        "institution_type",
        "institution_name",
        "role",
        "why_collaborate",
        "created_at",
    ),
}


@click.group()
@click.option("--database-url", default=None, help="Override DATABASE_URL")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None):
    """Criticus site CLI tools."""
    ctx.obj = {"database_url": database_url or settings.DATABASE_URL}


@cli.command()
@click.pass_context
def init_db(ctx: click.Context):
    """
    Create the submission tables if they don't exist.

    Hosted deployments should run `alembic upgrade head` instead.

    Example:
        python -m criticus.cli init-db
    """
    store = SubmissionStore.from_url(ctx.obj["database_url"])
    try:
        store.create_all()
        click.echo("✓ Submission tables ready")
    finally:
        store.close()


@cli.command()
@click.argument("kind", type=click.Choice([kind.value for kind in FormKind]))
@click.option("--format", "output_format", type=click.Choice(["table", "csv"]), default="table")
@click.pass_context
def list_submissions(ctx: click.Context, kind: str, output_format: str):
    """
    List submissions for one form, newest first.

    Example:
        python -m criticus.cli list-submissions waitlist --format csv > waitlist.csv
    """
    form_kind = FormKind(kind)
    columns = EXPORT_COLUMNS[form_kind]
    store = SubmissionStore.from_url(ctx.obj["database_url"])
    try:
        rows = store.list(form_kind)
    except StorageUnavailable as e:
        raise click.ClickException(f"Could not read {kind} submissions: {e}") from e
    finally:
        store.close()

    if output_format == "csv":
        writer = csv.writer(sys.stdout)
        writer.writerow(columns)
        for row in rows:
            writer.writerow([getattr(row, column) for column in columns])
        return

    click.echo(f"{len(rows)} {kind} submission(s)")
    for row in rows:
        click.echo(f"  {row.created_at:%Y-%m-%d %H:%M}  {row.id}  {row.name} <{row.email}>")


if __name__ == "__main__":
    cli()
