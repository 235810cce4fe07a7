"""Persistence collaborators used by the localization service.

The service never talks to the ORM directly. It depends on the two contracts
below, which keep storage dumb: they enforce nothing beyond what the database
schema enforces (unique culture codes, unique key names, one value per
language and key). All policy lives in :mod:`localization.services`.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from uuid import UUID

from django.core.paginator import Page, Paginator
from django.db import transaction

from .models import ForumSettings, Language, LocaleResourceKey, LocaleStringResource


class BaseLocalizationRepository(ABC):
    """Storage contract for languages, resource keys and resource values.

    Lookups return None when nothing matches. Paged queries take a 1-based
    page number and return a Django ``Page``; out of range numbers yield the
    last page. Store failures propagate as the backend's own exceptions.
    """

    # Languages

    @abstractmethod
    def get(self, language_id: UUID) -> Optional[Language]:
        """Return the language with this id."""

    @abstractmethod
    def get_language_by_culture(self, language_culture: str) -> Optional[Language]:
        """Return the language with this culture code."""

    @abstractmethod
    def get_language_by_name(self, name: str) -> Optional[Language]:
        """Return the language with this display name."""

    @abstractmethod
    def get_all(self) -> list[Language]:
        """Return every language."""

    @abstractmethod
    def add_language(self, language: Language, resources: Iterable[LocaleStringResource]) -> Language:
        """Persist a new language together with its resource values."""

    @abstractmethod
    def update_language(self, language: Language) -> Language:
        """Persist changes to an existing language."""

    @abstractmethod
    def delete_language(self, language: Language) -> None:
        """Delete a language and every resource value it owns."""

    # Resource keys

    @abstractmethod
    def get_resource_key(self, key_id: UUID) -> Optional[LocaleResourceKey]:
        """Return the resource key with this id."""

    @abstractmethod
    def get_resource_key_by_name(self, name: str) -> Optional[LocaleResourceKey]:
        """Return the resource key with this name."""

    @abstractmethod
    def get_all_resource_keys(self) -> list[LocaleResourceKey]:
        """Return every resource key."""

    @abstractmethod
    def get_resource_keys_page(self, page: int, page_size: int) -> Page:
        """Return one page of resource keys."""

    @abstractmethod
    def search_resource_keys(self, search: str, page: int, page_size: int) -> Page:
        """Return keys whose name contains ``search``."""

    @abstractmethod
    def add_resource_key(self, resource_key: LocaleResourceKey, resources: Iterable[LocaleStringResource]) -> LocaleResourceKey:
        """Persist a new key together with its resource values."""

    @abstractmethod
    def update_resource_key(self, resource_key: LocaleResourceKey) -> LocaleResourceKey:
        """Persist changes to an existing key."""

    @abstractmethod
    def delete_resource_key(self, resource_key: LocaleResourceKey) -> None:
        """Delete a key and its values in every language."""

    # Resource values

    @abstractmethod
    def get_resource(self, language_id: UUID, key_name: str) -> Optional[LocaleStringResource]:
        """Return the value row for a language and key name."""

    @abstractmethod
    def update_resource(self, resource: LocaleStringResource) -> LocaleStringResource:
        """Persist a changed value row."""

    @abstractmethod
    def get_all_values(self, language_id: UUID, page: int, page_size: int) -> Page:
        """Return one page of value rows for a language."""

    @abstractmethod
    def get_all_values_for_key(self, key_id: UUID) -> list[LocaleStringResource]:
        """Return the value rows of a key across all languages."""

    @abstractmethod
    def search_resource_values(self, language_id: UUID, search: str, page: int, page_size: int) -> Page:
        """Return value rows of a language whose value contains ``search``."""

    @abstractmethod
    def search_resource_keys_for_language(self, language_id: UUID, search: str, page: int, page_size: int) -> Page:
        """Return value rows of a language whose key name contains ``search``."""

    @abstractmethod
    def all_language_resources(self, language_id: UUID) -> Iterable[LocaleStringResource]:
        """Return every value row of a language, ordered by key name."""


class BaseSettingsRepository(ABC):
    """Storage contract for the forum settings row."""

    @abstractmethod
    def get_settings(self) -> ForumSettings:
        """Return the settings row, creating an empty one if needed."""

    @abstractmethod
    def save_settings(self, forum_settings: ForumSettings) -> ForumSettings:
        """Persist the settings row."""


def _paginate(queryset, page: int, page_size: int) -> Page:
    return Paginator(queryset, page_size).get_page(page)


class LocalizationRepository(BaseLocalizationRepository):
    """Django ORM implementation of :class:`BaseLocalizationRepository`."""

    def get(self, language_id):
        return Language.objects.filter(pk=language_id).first()

    def get_language_by_culture(self, language_culture):
        return Language.objects.filter(language_culture=language_culture).first()

    def get_language_by_name(self, name):
        return Language.objects.filter(name=name).first()

    def get_all(self):
        return list(Language.objects.all())

    @transaction.atomic
    def add_language(self, language, resources):
        language.save()
        LocaleStringResource.objects.bulk_create(list(resources))
        return language

    def update_language(self, language):
        language.save()
        return language

    def delete_language(self, language):
        language.delete()

    def get_resource_key(self, key_id):
        return LocaleResourceKey.objects.filter(pk=key_id).first()

    def get_resource_key_by_name(self, name):
        return LocaleResourceKey.objects.filter(name=name).first()

    def get_all_resource_keys(self):
        return list(LocaleResourceKey.objects.all())

    def get_resource_keys_page(self, page, page_size):
        return _paginate(LocaleResourceKey.objects.all(), page, page_size)

    def search_resource_keys(self, search, page, page_size):
        return _paginate(LocaleResourceKey.objects.filter(name__icontains=search), page, page_size)

    @transaction.atomic
    def add_resource_key(self, resource_key, resources):
        resource_key.save()
        LocaleStringResource.objects.bulk_create(list(resources))
        return resource_key

    def update_resource_key(self, resource_key):
        resource_key.save()
        return resource_key

    def delete_resource_key(self, resource_key):
        resource_key.delete()

    def get_resource(self, language_id, key_name):
        return (
            LocaleStringResource.objects.select_related("language", "resource_key")
            .filter(language_id=language_id, resource_key__name=key_name)
            .first()
        )

    def update_resource(self, resource):
        resource.save(update_fields=["resource_value"])
        return resource

    def _values(self, language_id):
        return LocaleStringResource.objects.select_related("resource_key").filter(language_id=language_id)

    def get_all_values(self, language_id, page, page_size):
        return _paginate(self._values(language_id), page, page_size)

    def get_all_values_for_key(self, key_id):
        return list(
            LocaleStringResource.objects.select_related("language")
            .filter(resource_key_id=key_id)
            .order_by("language__name")
        )

    def search_resource_values(self, language_id, search, page, page_size):
        return _paginate(self._values(language_id).filter(resource_value__icontains=search), page, page_size)

    def search_resource_keys_for_language(self, language_id, search, page, page_size):
        return _paginate(self._values(language_id).filter(resource_key__name__icontains=search), page, page_size)

    def all_language_resources(self, language_id):
        return self._values(language_id).order_by("resource_key__name")


class SettingsRepository(BaseSettingsRepository):
    """Django ORM implementation of :class:`BaseSettingsRepository`."""

    def get_settings(self):
        forum_settings = ForumSettings.objects.select_related("default_language").order_by("pk").first()
        if forum_settings is None:
            forum_settings = ForumSettings.objects.create()
        return forum_settings

    def save_settings(self, forum_settings):
        forum_settings.save()
        return forum_settings
