"""Management command to import a language from CSV."""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from ...reports import CsvReport
from ...services import LocalizationService
from ...tasks import import_language_csv


class Command(BaseCommand):
    """Create a language from a key,value CSV file."""

    help = "Import a new language from a CSV file of key,value lines"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "culture",
            type=str,
            help="Culture code of the language to create, e.g. fr-FR",
        )
        parser.add_argument(
            "file_path",
            type=str,
            help="Path to the CSV file",
        )
        parser.add_argument(
            "--background",
            action="store_true",
            help="Queue the import as a Celery task instead of running it now",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        file_path = options["file_path"]
        encoding = getattr(settings, "LOCALIZATION", {}).get("CSV_ENCODING", "utf-8")

        try:
            with open(file_path, encoding=encoding) as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            raise CommandError(f"File not found: {file_path}")
        except Exception as e:
            raise CommandError(f"Error reading file: {e}")

        if options["background"]:
            async_result = import_language_csv.delay(options["culture"], lines)
            self.stdout.write(self.style.SUCCESS(f"Queued import of {options['culture']} as task {async_result.id}"))
            return

        report = LocalizationService().import_csv(options["culture"], lines)
        self.show_report(report)

    def show_report(self, report: CsvReport):
        """Print the errors and warnings of an import."""
        for warning in report.warnings:
            self.stdout.write(self.style.WARNING(f"[{warning.error_warning_type.value}] {warning.message}"))

        for error in report.errors:
            self.stdout.write(self.style.ERROR(f"[{error.error_warning_type.value}] {error.message}"))

        self.stdout.write("")
        summary = f"Import completed: {len(report.errors)} errors, {len(report.warnings)} warnings"
        if report.has_errors:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))
