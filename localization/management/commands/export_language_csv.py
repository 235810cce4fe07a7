"""Management command to export a language to CSV."""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from ...services import LocalizationService


class Command(BaseCommand):
    """Export the values of one language as key,value lines."""

    help = "Export a language to CSV (one key,value line per resource key, no header)"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "culture",
            type=str,
            help="Culture code of the language to export",
        )
        parser.add_argument(
            "--output",
            "-o",
            type=str,
            help="Output file path (default: stdout)",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        service = LocalizationService()

        language = service.get_language_by_culture(options["culture"])
        if language is None:
            raise CommandError(f"No language defined for language-culture '{options['culture']}'")

        content = service.export_csv(language)

        if options["output"]:
            encoding = getattr(settings, "LOCALIZATION", {}).get("CSV_ENCODING", "utf-8")
            with open(options["output"], "w", encoding=encoding, newline="") as f:
                f.write(content)
            self.stdout.write(self.style.SUCCESS(f"Successfully exported {language} to {options['output']}"))
        else:
            self.stdout.write(content, ending="")
