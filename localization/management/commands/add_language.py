"""Management command to add a language."""

from django.core.management.base import BaseCommand, CommandError

from ...services import LocalizationService


class Command(BaseCommand):
    """Add a language with an empty value for every resource key."""

    help = "Add a language identified by its culture code, e.g. fr-FR"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "culture",
            type=str,
            help="Culture code of the language",
        )
        parser.add_argument(
            "--default",
            action="store_true",
            help="Also make it the forum default language",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        service = LocalizationService()

        result = service.add_language_from_culture(options["culture"])
        if not result.ok:
            raise CommandError(result.message)

        language = result.value
        self.stdout.write(self.style.SUCCESS(f"Added language: {language}"))

        if options["default"]:
            service.set_default_language(language)
            self.stdout.write(f"{language.language_culture} is now the default language")
