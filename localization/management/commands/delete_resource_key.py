"""Management command to delete a resource key."""

from django.core.management.base import BaseCommand, CommandError

from ...services import LocalizationService


class Command(BaseCommand):
    """Delete a resource key and its values in every language."""

    help = "Delete a resource key and its values in every language"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "name",
            type=str,
            help="Name of the resource key",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        service = LocalizationService()

        resource_key = service.get_resource_key_by_name(options["name"])
        if resource_key is None:
            raise CommandError(f"No resource key named '{options['name']}'")

        result = service.delete_resource_key(resource_key)
        if not result.ok:
            raise CommandError(result.message)

        self.stdout.write(self.style.SUCCESS(f"Deleted resource key: {resource_key.name}"))
