import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Language",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(help_text="English display name of the language", max_length=100)),
                (
                    "language_culture",
                    models.CharField(
                        db_index=True,
                        help_text="Culture code identifying the language variant, e.g. en-GB",
                        max_length=20,
                        unique=True,
                    ),
                ),
                ("right_to_left", models.BooleanField(default=False, help_text="Whether the language is written right to left")),
                ("created_at", models.DateTimeField(auto_now_add=True, help_text="When this language was added")),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="When this language was last updated")),
            ],
            options={
                "verbose_name": "Language",
                "verbose_name_plural": "Languages",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="LocaleResourceKey",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(db_index=True, help_text="Dotted lookup key, e.g. Post.Quote", max_length=200, unique=True)),
                ("notes", models.TextField(blank=True, default="", help_text="Context notes for translators")),
                ("date_added", models.DateTimeField(help_text="When this key was created")),
            ],
            options={
                "verbose_name": "Resource Key",
                "verbose_name_plural": "Resource Keys",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="LocaleStringResource",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("resource_value", models.TextField(blank=True, default="", help_text="Translated text, empty until someone translates it")),
                (
                    "language",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="resources",
                        to="localization.language",
                    ),
                ),
                (
                    "resource_key",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="resources",
                        to="localization.localeresourcekey",
                    ),
                ),
            ],
            options={
                "verbose_name": "Resource Value",
                "verbose_name_plural": "Resource Values",
                "ordering": ["resource_key__name"],
            },
        ),
        migrations.AddConstraint(
            model_name="localestringresource",
            constraint=models.UniqueConstraint(
                fields=("language", "resource_key"),
                name="localization_one_value_per_language_and_key",
            ),
        ),
        migrations.CreateModel(
            name="ForumSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "default_language",
                    models.ForeignKey(
                        blank=True,
                        help_text="Fallback language for every visitor",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="+",
                        to="localization.language",
                    ),
                ),
            ],
            options={
                "verbose_name": "Forum Settings",
                "verbose_name_plural": "Forum Settings",
            },
        ),
    ]
