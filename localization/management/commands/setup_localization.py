"""Management command to bootstrap the default forum language."""

from django.core.management.base import BaseCommand, CommandError

from ...exceptions import LocalizationError
from ...services import LocalizationService


class Command(BaseCommand):
    """Create the default language and point the forum settings at it."""

    help = "Create the default language if it is missing and set it as the forum default"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--culture",
            type=str,
            help="Culture code of the default language (default: LOCALIZATION['DEFAULT_LANGUAGE_CULTURE'])",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        try:
            language = LocalizationService().ensure_default_language(options["culture"])
        except LocalizationError as e:
            raise CommandError(e.message)

        self.stdout.write(self.style.SUCCESS(f"Default language: {language}"))
