"""Management command to show localization statistics."""

from django.core.management.base import BaseCommand

from ...models import Language, LocaleResourceKey, LocaleStringResource


class Command(BaseCommand):
    """Show how much of each language is translated."""

    help = "Display translation coverage per language"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--missing",
            action="store_true",
            help="List untranslated keys per language",
        )

    def handle(self, *args, **options):
        """Handle the command execution."""
        total_keys = LocaleResourceKey.objects.count()

        self.stdout.write(self.style.SUCCESS("Localization Overview"))
        self.stdout.write("=" * 50)
        self.stdout.write(f"Languages:     {Language.objects.count()}")
        self.stdout.write(f"Resource keys: {total_keys}")
        self.stdout.write("")

        for language in Language.objects.all():
            resources = LocaleStringResource.objects.filter(language=language)
            translated = resources.exclude(resource_value="").count()
            percentage = (translated / total_keys * 100) if total_keys else 100.0
            status_color = self.style.SUCCESS if percentage == 100 else (self.style.WARNING if percentage >= 50 else self.style.ERROR)

            self.stdout.write(f"{language}: {status_color(f'{percentage:.1f}%')} ({translated}/{total_keys})")

            if options["missing"]:
                for resource in resources.filter(resource_value="").select_related("resource_key"):
                    self.stdout.write(f"  - {resource.resource_key.name}")

        self.stdout.write("")
