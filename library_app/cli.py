import click
from flask import current_app

from library_app.extensions import db
from library_app.services.mail_service import MailService
from library_app.tasks.reminder import run_due_date_sweep
from library_app.utils.dates import parse_date


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("send-reminders")
    @click.option("--today", default=None, help="Pretend today is this date (YYYY-MM-DD).")
    def send_reminders(today):
        """Run the due-date sweep once."""
        try:
            day = parse_date(today)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--today") from None

        report = run_due_date_sweep(db.session, MailService, today=day, logger=current_app.logger)
        click.echo(
            f"threshold={report.to_dict()['threshold']} selected={report.selected} "
            f"sent={report.sent} failed={report.failed} skipped={len(report.skipped)}"
        )
