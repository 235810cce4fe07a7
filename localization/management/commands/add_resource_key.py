"""Management command to add a resource key."""

from django.core.management.base import BaseCommand, CommandError

from ...services import LocalizationService


class Command(BaseCommand):
    """Add a resource key with an empty value in every language."""

    help = "Add a resource key, e.g. Post.Quote"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "name",
            type=str,
            help="Name of the resource key",
        )
        parser.add_argument(
            "--notes",
            type=str,
            default="",
            help="Notes for translators",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        result = LocalizationService().add_resource_key(options["name"], notes=options["notes"])
        if not result.ok:
            raise CommandError(result.message)

        self.stdout.write(self.style.SUCCESS(f"Added resource key: {result.value.name}"))
