# bizops/cli.py
import csv
from datetime import date, timedelta

import click

from .errors import BizOpsError, ValidationError
from .extensions import db
from .services.admin import clear_all_data
from .services.backup import backup_now
from .services.messages import send_message
from .services.transactions import create_transaction, validate_transaction

# Export header -> create_transaction payload key
_CSV_COLUMNS = {
    "Date": "date",
    "Customer Name": "customerName",
    "Phone Number": "phoneNumber",
    "Service": "service",
    "Amount Paid": "amountPaid",
    "Service By": "serviceBy",
    "Expenses": "expenses",
}


def register_cli(app):
    @app.cli.command("backup-now")
    def backup_now_cmd():
        """Copy the database file to today's backup slot."""
        path = backup_now()
        if path is None:
            click.echo("⚠️ Database file not found, skipping backup")
        else:
            click.echo(f"✅ Database backed up to {path}")

    @app.cli.command("seed-demo")
    def seed_demo():
        """Dev-only: a handful of transactions and a message."""
        today = date.today()
        samples = [
            dict(customerName="Ada Obi", phoneNumber="08030000001", service="Photography",
                 amountPaid=25000, serviceBy="Tolu", expenses=3000, date=today),
            dict(customerName="Chi Eze", phoneNumber="08030000002", service="Makeup",
                 amountPaid=15000, serviceBy="Kemi", date=today - timedelta(days=3)),
            dict(customerName="Femi Ade", phoneNumber="08030000003", service="Product Sales",
                 amountPaid=8000, serviceBy="Tolu", expenses=5000, date=today - timedelta(days=20)),
        ]
        for s in samples:
            create_transaction(s)
        send_message("Demo data loaded", "dashboard")
        click.echo(f"✅ Seeded {len(samples)} transactions.")

    @app.cli.command("import-csv")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    @click.option("--dry-run", is_flag=True, help="Validate only, write nothing.")
    def import_csv(path, dry_run):
        """Bulk-import transactions from a CSV laid out like the export."""
        created = skipped = 0
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = {"Date", "Customer Name", "Phone Number", "Service",
                       "Amount Paid", "Service By"} - set(reader.fieldnames or [])
            if missing:
                raise click.ClickException(f"CSV is missing columns: {', '.join(sorted(missing))}")

            for lineno, row in enumerate(reader, start=2):
                payload = {key: row.get(col) for col, key in _CSV_COLUMNS.items()}
                try:
                    if dry_run:
                        validate_transaction(payload)
                    else:
                        create_transaction(payload)
                    created += 1
                except ValidationError as e:
                    skipped += 1
                    click.echo(f"[skip] line {lineno}: {e}")

        verb = "Validated" if dry_run else "Imported"
        click.echo(f"✅ {verb} {created} rows, skipped {skipped}.")

    @app.cli.command("clear-data")
    @click.option("--confirm", required=True, help="Must be YES_DELETE_ALL_DATA.")
    def clear_data(confirm):
        """Back up, then delete every transaction and message."""
        try:
            result = clear_all_data(confirm)
        except BizOpsError as e:
            db.session.rollback()
            raise click.ClickException(str(e)) from e
        click.echo(f"🗑️ Cleared {result.transactions} transactions and {result.messages} messages "
                   f"(backup: {result.backup_path or 'none'})")
