"""Tests for culture code lookup."""

from django.test import SimpleTestCase

from localization.cultures import all_cultures, culture_code, get_culture, is_right_to_left


class GetCultureTest(SimpleTestCase):
    """Test cases for get_culture."""

    def test_dash_separated_code(self):
        """Culture codes use dashes."""
        culture = get_culture("en-GB")

        self.assertIsNotNone(culture)
        self.assertEqual(culture.language, "en")
        self.assertEqual(culture.territory, "GB")

    def test_underscore_separated_code(self):
        """Underscore separated codes are accepted too."""
        self.assertEqual(culture_code(get_culture("fr_FR")), "fr-FR")

    def test_unknown_culture(self):
        """Unknown cultures resolve to None."""
        self.assertIsNone(get_culture("xx-YY"))

    def test_malformed_culture(self):
        """Malformed codes resolve to None instead of raising."""
        self.assertIsNone(get_culture("not a culture!"))

    def test_empty_culture(self):
        """Empty codes resolve to None."""
        self.assertIsNone(get_culture(""))
        self.assertIsNone(get_culture("   "))
        self.assertIsNone(get_culture(None))

    def test_english_name(self):
        """Resolved cultures carry an English display name."""
        self.assertIn("German", get_culture("de-DE").english_name)


class CultureHelpersTest(SimpleTestCase):
    """Test cases for culture helpers."""

    def test_culture_code(self):
        """Culture codes round trip through Babel."""
        self.assertEqual(culture_code(get_culture("en-GB")), "en-GB")
        self.assertEqual(culture_code(get_culture("de")), "de")

    def test_right_to_left(self):
        """Arabic is written right to left, English is not."""
        self.assertTrue(is_right_to_left(get_culture("ar-SA")))
        self.assertFalse(is_right_to_left(get_culture("en-GB")))

    def test_all_cultures(self):
        """All cultures are sorted by English name and skip the root locale."""
        cultures = all_cultures()
        names = [c.english_name or "" for c in cultures]

        self.assertGreater(len(cultures), 100)
        self.assertEqual(names, sorted(names))
        self.assertIn("en-GB", {culture_code(c) for c in cultures})
