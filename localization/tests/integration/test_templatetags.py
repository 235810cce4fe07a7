"""Tests for localization template tags."""

from django.core.cache import cache
from django.template import Context, Template
from django.test import RequestFactory, TestCase

from localization.services import LocalizationService


class ResourceTagTest(TestCase):
    """Test cases for the resource and forum_language tags."""

    def setUp(self):
        """Set up test data."""
        cache.clear()
        self.service = LocalizationService()
        self.default = self.service.ensure_default_language("en-GB")
        self.french = self.service.add_language_from_culture("fr-FR").unwrap()
        self.service.add_resource_key("Post.Quote").unwrap()
        self.service.add_resource_key("Member.Greeting").unwrap()
        self.service.update_resource_value(self.default, "Post.Quote", "Quote").unwrap()
        self.service.update_resource_value(self.french, "Post.Quote", "Citer").unwrap()
        self.service.update_resource_value(self.french, "Member.Greeting", "Bonjour, {name} !").unwrap()

    def tearDown(self):
        """Clean up after tests."""
        cache.clear()

    def render(self, source, language=None):
        context = {}
        if language is not None:
            request = RequestFactory().get("/")
            request.forum_language = language
            context["request"] = request
        return Template("{% load localization_tags %}" + source).render(Context(context))

    def test_resource_default_language(self):
        """Without a request the default language is used."""
        self.assertEqual(self.render('{% resource "Post.Quote" %}'), "Quote")

    def test_resource_request_language(self):
        """The request language is used when present."""
        self.assertEqual(self.render('{% resource "Post.Quote" %}', self.french), "Citer")

    def test_resource_with_parameters(self):
        """Keyword arguments are substituted into the value."""
        self.assertEqual(self.render('{% resource "Member.Greeting" name="Alice" %}', self.french), "Bonjour, Alice !")

    def test_resource_missing_parameter(self):
        """Missing parameters leave the value untouched."""
        self.assertEqual(self.render('{% resource "Member.Greeting" %}', self.french), "Bonjour, {name} !")

    def test_resource_untranslated_shows_key(self):
        """Untranslated keys display as the key."""
        self.assertEqual(self.render('{% resource "Member.Greeting" %}'), "Member.Greeting")

    def test_forum_language(self):
        """The current language is exposed to templates."""
        output = self.render("{% forum_language as language %}{{ language.language_culture }}", self.french)

        self.assertEqual(output, "fr-FR")


class NoDefaultLanguageTagTest(TestCase):
    """Test cases for the tags before a default language is set up."""

    def render(self, source):
        return Template("{% load localization_tags %}" + source).render(Context({}))

    def test_resource_shows_key(self):
        """Resources display as their key."""
        self.assertEqual(self.render('{% resource "Post.Quote" %}'), "Post.Quote")

    def test_forum_language_is_none(self):
        """The current language is empty."""
        output = self.render("{% forum_language as language %}{% if language is None %}none{% endif %}")

        self.assertEqual(output, "none")
