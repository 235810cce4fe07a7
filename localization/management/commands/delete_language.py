"""Management command to delete a language."""

from django.core.management.base import BaseCommand, CommandError

from ...services import LocalizationService


class Command(BaseCommand):
    """Delete a language and all of its values."""

    help = "Delete a language identified by its culture code. The default language cannot be deleted."

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "culture",
            type=str,
            help="Culture code of the language",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        service = LocalizationService()

        language = service.get_language_by_culture(options["culture"])
        if language is None:
            raise CommandError(f"No language defined for language-culture '{options['culture']}'")

        result = service.delete_language(language)
        if not result.ok:
            raise CommandError(result.message)

        self.stdout.write(self.style.SUCCESS(f"Deleted language: {language}"))
