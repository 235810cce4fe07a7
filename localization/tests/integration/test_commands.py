"""Tests for localization management commands."""

import os
import tempfile
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from localization.models import ForumSettings, Language, LocaleResourceKey, LocaleStringResource
from localization.services import LocalizationService


class CommandTestCase(TestCase):
    """Base class running commands with captured output."""

    def call(self, *args, **kwargs):
        out = StringIO()
        call_command(*args, stdout=out, **kwargs)
        return out.getvalue()

    def write_temp_file(self, content):
        handle, path = tempfile.mkstemp(suffix=".csv")
        with os.fdopen(handle, "w", encoding="utf-8") as f:
            f.write(content)
        self.addCleanup(os.remove, path)
        return path


class SetupLocalizationCommandTest(CommandTestCase):
    """Test cases for setup_localization."""

    def test_creates_default_language(self):
        """The default language is created and recorded."""
        output = self.call("setup_localization", "--culture", "en-GB")

        self.assertIn("Default language", output)
        self.assertEqual(ForumSettings.objects.get().default_language.language_culture, "en-GB")

    def test_unknown_culture(self):
        """Unknown cultures are reported as command errors."""
        with self.assertRaises(CommandError):
            self.call("setup_localization", "--culture", "xx-YY")


class LanguageCommandsTest(CommandTestCase):
    """Test cases for add_language and delete_language."""

    def setUp(self):
        """Set up test data."""
        self.service = LocalizationService()
        self.default = self.service.ensure_default_language("en-GB")
        self.service.add_resource_key("Post.Quote").unwrap()

    def test_add_language(self):
        """A language is added with seeded values."""
        output = self.call("add_language", "fr-FR")

        self.assertIn("Added language", output)
        self.assertEqual(LocaleStringResource.objects.filter(language__language_culture="fr-FR").count(), 1)

    def test_add_language_as_default(self):
        """The new language can become the default."""
        self.call("add_language", "fr-FR", "--default")

        self.assertEqual(self.service.default_language.language_culture, "fr-FR")

    def test_add_existing_language(self):
        """Duplicates are command errors."""
        with self.assertRaisesMessage(CommandError, "already a language defined"):
            self.call("add_language", "en-GB")

    def test_delete_language(self):
        """Other languages can be deleted."""
        self.service.add_language_from_culture("fr-FR").unwrap()

        self.call("delete_language", "fr-FR")

        self.assertFalse(Language.objects.filter(language_culture="fr-FR").exists())

    def test_delete_default_language(self):
        """The default language is refused."""
        with self.assertRaisesMessage(CommandError, "Deleting the default language is not allowed."):
            self.call("delete_language", "en-GB")

    def test_delete_unknown_language(self):
        """Unknown cultures are command errors."""
        with self.assertRaises(CommandError):
            self.call("delete_language", "de-DE")


class ResourceKeyCommandsTest(CommandTestCase):
    """Test cases for add_resource_key and delete_resource_key."""

    def setUp(self):
        """Set up test data."""
        self.service = LocalizationService()
        self.default = self.service.ensure_default_language("en-GB")

    def test_add_resource_key(self):
        """Keys are added with notes."""
        output = self.call("add_resource_key", "Post.Quote", "--notes", "Quote button")

        self.assertIn("Added resource key: Post.Quote", output)
        self.assertEqual(LocaleResourceKey.objects.get(name="Post.Quote").notes, "Quote button")

    def test_add_duplicate_resource_key(self):
        """Duplicates are command errors."""
        self.call("add_resource_key", "Post.Quote")

        with self.assertRaises(CommandError):
            self.call("add_resource_key", "Post.Quote")

    def test_delete_resource_key(self):
        """Keys are deleted with their values."""
        self.call("add_resource_key", "Post.Quote")

        self.call("delete_resource_key", "Post.Quote")

        self.assertFalse(LocaleResourceKey.objects.exists())
        self.assertFalse(LocaleStringResource.objects.exists())

    def test_delete_unknown_resource_key(self):
        """Unknown keys are command errors."""
        with self.assertRaises(CommandError):
            self.call("delete_resource_key", "Post.Quote")


class CsvCommandsTest(CommandTestCase):
    """Test cases for export_language_csv and import_language_csv."""

    def setUp(self):
        """Set up test data."""
        self.service = LocalizationService()
        self.default = self.service.ensure_default_language("en-GB")
        self.service.add_resource_key("Post.Quote").unwrap()
        self.service.update_resource_value(self.default, "Post.Quote", "Quote").unwrap()

    def test_export_to_stdout(self):
        """Exports print the CSV lines."""
        self.assertEqual(self.call("export_language_csv", "en-GB"), "Post.Quote,Quote\n")

    def test_export_to_file(self):
        """Exports can be written to a file."""
        path = self.write_temp_file("")

        self.call("export_language_csv", "en-GB", "--output", path)

        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "Post.Quote,Quote\n")

    def test_export_unknown_language(self):
        """Unknown languages are command errors."""
        with self.assertRaises(CommandError):
            self.call("export_language_csv", "de-DE")

    def test_import(self):
        """Imports create the language and print the report."""
        path = self.write_temp_file("Post.Quote,Citer\nPost.Reply,Répondre\nbroken\n")

        output = self.call("import_language_csv", "fr-FR", path)

        self.assertIn("[NewKeyCreated]", output)
        self.assertIn("[MissingKeyOrValue] Line 3", output)
        self.assertIn("Import completed: 1 errors, 1 warnings", output)
        french = Language.objects.get(language_culture="fr-FR")
        self.assertEqual(self.service.get_resource_string("Post.Reply", french), "Répondre")

    def test_import_file_with_byte_order_mark(self):
        """A UTF-8 byte-order mark does not end up in the first key."""
        handle, path = tempfile.mkstemp(suffix=".csv")
        with os.fdopen(handle, "w", encoding="utf-8-sig") as f:
            f.write("Post.Quote,Citer\n")
        self.addCleanup(os.remove, path)

        output = self.call("import_language_csv", "fr-FR", path)

        self.assertNotIn("[NewKeyCreated]", output)
        self.assertEqual(LocaleResourceKey.objects.count(), 1)
        french = Language.objects.get(language_culture="fr-FR")
        self.assertEqual(self.service.get_resource_string("Post.Quote", french), "Citer")

    def test_import_in_background(self):
        """Background imports are queued as a task."""
        path = self.write_temp_file("Post.Quote,Citer\n")

        output = self.call("import_language_csv", "fr-FR", path, "--background")

        self.assertIn("Queued import of fr-FR", output)
        self.assertTrue(Language.objects.filter(language_culture="fr-FR").exists())

    def test_import_missing_file(self):
        """Missing files are command errors."""
        with self.assertRaisesMessage(CommandError, "File not found"):
            self.call("import_language_csv", "fr-FR", "/nonexistent/fr.csv")


class LocalizationStatsCommandTest(CommandTestCase):
    """Test cases for localization_stats."""

    def test_stats(self):
        """Coverage is shown per language, with missing keys on request."""
        service = LocalizationService()
        default = service.ensure_default_language("en-GB")
        service.add_resource_key("Post.Quote").unwrap()
        service.add_resource_key("Post.Reply").unwrap()
        service.update_resource_value(default, "Post.Quote", "Quote").unwrap()

        output = self.call("localization_stats", "--missing")

        self.assertIn("Resource keys: 2", output)
        self.assertIn("50.0%", output)
        self.assertIn("  - Post.Reply", output)
