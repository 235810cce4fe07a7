"""Models for localization app."""

import uuid

from django.core.exceptions import ValidationError
from django.db import models


class Language(models.Model):
    """A language the forum can be displayed in."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(
        max_length=100,
        help_text="English display name of the language",
    )
    language_culture = models.CharField(
        max_length=20,
        unique=True,
        db_index=True,
        help_text="Culture code identifying the language variant, e.g. en-GB",
    )
    right_to_left = models.BooleanField(
        default=False,
        help_text="Whether the language is written right to left",
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When this language was added",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When this language was last updated",
    )

    class Meta:
        """Meta configuration for Language."""

        ordering = ["name"]
        verbose_name = "Language"
        verbose_name_plural = "Languages"

    def __str__(self):
        """Return string representation."""
        return f"{self.name} ({self.language_culture})"

    def clean(self):
        """Validate the model."""
        super().clean()
        if not self.language_culture.strip():
            raise ValidationError({"language_culture": "Culture code cannot be empty or only whitespace."})


class LocaleResourceKey(models.Model):
    """A unique lookup name for a piece of translatable text."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(
        max_length=200,
        unique=True,
        db_index=True,
        help_text="Dotted lookup key, e.g. Post.Quote",
    )
    notes = models.TextField(
        blank=True,
        default="",
        help_text="Context notes for translators",
    )
    date_added = models.DateTimeField(
        help_text="When this key was created",
    )

    class Meta:
        """Meta configuration for LocaleResourceKey."""

        ordering = ["name"]
        verbose_name = "Resource Key"
        verbose_name_plural = "Resource Keys"

    def __str__(self):
        """Return string representation."""
        return self.name

    def clean(self):
        """Validate the model."""
        super().clean()
        if not self.name.strip():
            raise ValidationError({"name": "Name cannot be empty or only whitespace."})


class LocaleStringResource(models.Model):
    """The translated value of one resource key in one language."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    language = models.ForeignKey(
        Language,
        on_delete=models.CASCADE,
        related_name="resources",
    )
    resource_key = models.ForeignKey(
        LocaleResourceKey,
        on_delete=models.CASCADE,
        related_name="resources",
    )
    resource_value = models.TextField(
        blank=True,
        default="",
        help_text="Translated text, empty until someone translates it",
    )

    class Meta:
        """Meta configuration for LocaleStringResource."""

        ordering = ["resource_key__name"]
        verbose_name = "Resource Value"
        verbose_name_plural = "Resource Values"
        constraints = [
            models.UniqueConstraint(
                fields=["language", "resource_key"],
                name="localization_one_value_per_language_and_key",
            )
        ]

    def __str__(self):
        """Return string representation."""
        return f"{self.resource_key_id}@{self.language_id}"


class ForumSettings(models.Model):
    """Site-wide settings row. Only the first row is ever read."""

    default_language = models.ForeignKey(
        Language,
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name="+",
        help_text="Fallback language for every visitor",
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Meta configuration for ForumSettings."""

        verbose_name = "Forum Settings"
        verbose_name_plural = "Forum Settings"

    def __str__(self):
        """Return string representation."""
        return "Forum settings"
