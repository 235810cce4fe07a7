"""Localization service: languages, resource keys and resource values."""

import logging
from typing import Callable, Optional, Union
from uuid import UUID

from babel import Locale
from django.conf import settings
from django.core.cache import cache
from django.core.paginator import Page
from django.utils import timezone

from .cultures import all_cultures, culture_code, get_culture, is_right_to_left
from .exceptions import (
    DefaultLanguageDeletionError,
    LanguageOrCultureAlreadyExistsError,
    LocalizationError,
    LocalizationStoreError,
    NoDefaultLanguageError,
    ResourceKeyAlreadyExistsError,
    ResourceNotFoundError,
)
from .models import Language, LocaleResourceKey, LocaleStringResource
from .reports import CsvErrorWarningType, CsvReport
from .repositories import (
    BaseLocalizationRepository,
    BaseSettingsRepository,
    LocalizationRepository,
    SettingsRepository,
)
from .results import ErrorKind, OperationResult
from .utils import clear_resource_cache, resource_cache_key, safe_plain_text

logger = logging.getLogger(__name__)


class LocalizationService:
    """Single authority over the language x resource key matrix.

    Every language holds exactly one value row per resource key. Adding a
    language or a key completes the matrix with empty values, deleting either
    cascades to its rows.

    Mutating calls return an :class:`OperationResult` instead of raising for
    expected policy failures (duplicate, not found, default language) and for
    wrapped store failures. Only a missing default language raises, since the
    system cannot work without one.
    """

    def __init__(
        self,
        localization_repository: Optional[BaseLocalizationRepository] = None,
        settings_repository: Optional[BaseSettingsRepository] = None,
        config: Optional[dict] = None,
    ):
        """Initialize the localization service.

        Args:
            localization_repository: Store for languages, keys and values
            settings_repository: Store for the forum settings row
            config: Configuration override for the LOCALIZATION setting
        """
        default_config = {"DEFAULT_LANGUAGE_CULTURE": "en-GB", "CACHE_TIMEOUT": 3600}
        self.config = {**default_config, **getattr(settings, "LOCALIZATION", {}), **(config or {})}

        self.repository = localization_repository or LocalizationRepository()
        self.settings_repository = settings_repository or SettingsRepository()

    def _run(self, failure_message: str, operation: Callable, *args) -> OperationResult:
        """Run a mutating operation and fold its outcome into a result."""
        try:
            return OperationResult.success(operation(*args))
        except NoDefaultLanguageError:
            raise
        except LocalizationError as e:
            logger.info(f"{failure_message}: {e.message}")
            return OperationResult.failure(e)
        except Exception as e:
            logger.error(f"{failure_message}: {e}")
            return OperationResult.failure(LocalizationStoreError(f"{failure_message}: {e}", cause=e))

    # Default language

    @property
    def default_language(self) -> Language:
        """The system default language.

        Raises:
            NoDefaultLanguageError: If the forum settings do not name one
        """
        language = self.settings_repository.get_settings().default_language
        if language is None:
            raise NoDefaultLanguageError()
        return language

    def set_default_language(self, language: Language) -> Language:
        forum_settings = self.settings_repository.get_settings()
        forum_settings.default_language = language
        self.settings_repository.save_settings(forum_settings)
        logger.info(f"Default language set to {language.language_culture}")
        return language

    def ensure_default_language(self, language_culture: Optional[str] = None) -> Language:
        """
        Make sure a default language exists, creating it if needed.

        Args:
            language_culture: Culture to use, LOCALIZATION["DEFAULT_LANGUAGE_CULTURE"] if None

        Returns:
            The default language

        Raises:
            LocalizationError: If the culture is unknown or the language cannot be created
        """
        forum_settings = self.settings_repository.get_settings()
        if forum_settings.default_language is not None:
            return forum_settings.default_language

        code = language_culture or self.config["DEFAULT_LANGUAGE_CULTURE"]
        culture = get_culture(code)
        if culture is None:
            raise ResourceNotFoundError(f"The language culture '{code}' does not exist.", {"language_culture": code})

        language = self.get_language_by_culture(culture_code(culture))
        if language is None:
            language = self.add_language_from_culture(culture).unwrap()

        return self.set_default_language(language)

    # Lookups

    def get_resource(self, language: Language, key: str) -> Optional[LocaleStringResource]:
        """Get the value row for a key, or None if it cannot be retrieved."""
        try:
            return self.repository.get_resource(language.id, key.strip())
        except Exception as e:
            # Could be there is no resource
            logger.error(f"Unable to retrieve resource key '{key}' for language id {language.id}. Error: '{e}'.")
            return None

    def get_resource_string(self, key: str, language: Optional[Language] = None) -> str:
        """
        Get the display text for a key.

        Missing or empty translations degrade to the key itself so the page
        shows the raw key instead of failing.

        Args:
            key: Resource key name
            language: Language to look in, the default language if None

        Returns:
            The translated value or the key
        """
        if not key:
            return ""

        language = language or self.default_language
        cache_key = resource_cache_key(language.id, key.strip())

        try:
            cached_value = cache.get(cache_key)
            if cached_value is not None:
                return cached_value
        except Exception as e:
            logger.warning(f"Cache error for resource '{key}': {e}")

        resource = self.get_resource(language, key)
        if resource is not None and resource.resource_value:
            try:
                cache.set(cache_key, resource.resource_value, timeout=self.config["CACHE_TIMEOUT"])
            except Exception as e:
                logger.warning(f"Cache set error for resource '{key}': {e}")
            return resource.resource_value

        return key

    def get_language(self, language_id: UUID) -> Optional[Language]:
        return self.repository.get(language_id)

    def get_language_by_culture(self, language_culture: str) -> Optional[Language]:
        """Retrieve a language by its culture code, e.g. "en-GB"."""
        return self.repository.get_language_by_culture(language_culture)

    def get_language_by_name(self, name: str) -> Optional[Language]:
        return self.repository.get_language_by_name(name)

    def all_languages(self) -> list[Language]:
        return self.repository.get_all()

    def get_resource_key(self, key_id: UUID) -> Optional[LocaleResourceKey]:
        return self.repository.get_resource_key(key_id)

    def get_resource_key_by_name(self, name: str) -> Optional[LocaleResourceKey]:
        return self.repository.get_resource_key_by_name(name)

    def get_all_resource_keys(self) -> list[LocaleResourceKey]:
        return self.repository.get_all_resource_keys()

    def get_resource_keys_page(self, page: int, page_size: int) -> Page:
        return self.repository.get_resource_keys_page(page, page_size)

    def get_all_values(self, language: Language, page: int, page_size: int) -> Page:
        """Get one page of value rows for a language."""
        return self.repository.get_all_values(language.id, page, page_size)

    def get_all_values_for_key(self, key_id: UUID) -> list[LocaleStringResource]:
        """Get the value of a key in every language."""
        return self.repository.get_all_values_for_key(key_id)

    def search_resource_values(self, language: Language, search: str, page: int, page_size: int) -> Page:
        """Search the values of one language."""
        return self.repository.search_resource_values(language.id, safe_plain_text(search), page, page_size)

    def search_resource_keys(self, search: str, page: int, page_size: int) -> Page:
        """Search resource keys by name."""
        return self.repository.search_resource_keys(safe_plain_text(search), page, page_size)

    def search_resource_keys_for_language(self, language: Language, search: str, page: int, page_size: int) -> Page:
        """Search the value rows of one language by key name."""
        return self.repository.search_resource_keys_for_language(language.id, safe_plain_text(search), page, page_size)

    def create_empty_resource_key(self) -> LocaleResourceKey:
        """Return a new, unsaved resource key with empty fields."""
        return LocaleResourceKey(name="", notes="", date_added=None)

    def languages_in_db(self) -> list[Locale]:
        """Cultures of every stored language, sorted by English name."""
        cultures = [get_culture(language.language_culture) for language in self.all_languages()]
        return sorted((c for c in cultures if c is not None), key=lambda c: c.english_name or "")

    def languages_not_in_db(self) -> list[Locale]:
        """Every known culture that has no stored language, sorted by English name."""
        stored = {language.language_culture for language in self.all_languages()}
        return [culture for culture in all_cultures() if culture_code(culture) not in stored]

    # Languages

    def _add_language(self, language: Language) -> Language:
        existing = self.get_language_by_culture(language.language_culture)
        if existing is not None:
            raise LanguageOrCultureAlreadyExistsError(existing.language_culture)

        # Make sure that the new language has a set of empty resources
        resources = [
            LocaleStringResource(language=language, resource_key=resource_key, resource_value="")
            for resource_key in self.repository.get_all_resource_keys()
        ]
        self.repository.add_language(language, resources)

        logger.info(f"Added language {language.language_culture} with {len(resources)} empty resources")
        return language

    def add_language(self, language: Language) -> OperationResult:
        """
        Add a language. Does not change the default language.

        Fails with ALREADY_EXISTS if the culture code is taken.
        """
        return self._run("Unable to add language", self._add_language, language)

    def add_language_from_culture(self, culture: Union[Locale, str]) -> OperationResult:
        """Add a language built from a Babel locale or a culture code."""
        if isinstance(culture, str):
            code = culture
            culture = get_culture(code)
            if culture is None:
                return OperationResult.failure(
                    ResourceNotFoundError(f"The language culture '{code}' does not exist.", {"language_culture": code})
                )

        language = Language(
            name=culture.english_name,
            language_culture=culture_code(culture),
            right_to_left=is_right_to_left(culture),
        )
        return self.add_language(language)

    def _save_language(self, language: Language) -> Language:
        return self.repository.update_language(language)

    def save_language(self, language: Language) -> OperationResult:
        return self._run("Unable to save language", self._save_language, language)

    def _delete_language(self, language: Language) -> None:
        # Cannot delete default language
        if language.id == self.default_language.id:
            raise DefaultLanguageDeletionError()

        key_names = [resource.resource_key.name for resource in self.repository.all_language_resources(language.id)]
        self.repository.delete_language(language)
        clear_resource_cache(key_names, [language.id])

        logger.info(f"Deleted language {language.language_culture}")

    def delete_language(self, language: Language) -> OperationResult:
        """
        Delete a language and its values.

        Fails with DEFAULT_LANGUAGE for the default language, STORE_ERROR if
        the store refuses.
        """
        return self._run("Unable to delete language", self._delete_language, language)

    # Resource keys

    def _add_resource_key(self, resource_key: LocaleResourceKey) -> LocaleResourceKey:
        # Check to see if a resource key of this name already exists
        if self.repository.get_resource_key_by_name(resource_key.name) is not None:
            raise ResourceKeyAlreadyExistsError(resource_key.name)

        resource_key.date_added = timezone.now()

        # Now add an empty value for each language
        resources = [
            LocaleStringResource(language=language, resource_key=resource_key, resource_value="")
            for language in self.repository.get_all()
        ]
        self.repository.add_resource_key(resource_key, resources)

        logger.info(f"Added resource key '{resource_key.name}' to {len(resources)} languages")
        return resource_key

    def add_resource_key(self, resource_key: Union[LocaleResourceKey, str], notes: str = "") -> OperationResult:
        """
        Add a resource key with an empty value in every language.

        Args:
            resource_key: Unsaved key, or the name of the key to create
            notes: Notes for translators, used when a name is given

        Fails with ALREADY_EXISTS if the name is taken.
        """
        if isinstance(resource_key, str):
            resource_key = LocaleResourceKey(name=resource_key, notes=notes)
        return self._run("Unable to add resource key", self._add_resource_key, resource_key)

    def _update_resource_key(self, key_id: UUID, new_name: str) -> LocaleResourceKey:
        resource_key = self.repository.get_resource_key(key_id)
        if resource_key is None:
            raise ResourceNotFoundError(f"Unable to update resource key {key_id}. No resource found.", {"key_id": str(key_id)})

        new_name = safe_plain_text(new_name)
        existing = self.repository.get_resource_key_by_name(new_name)
        if existing is not None and existing.pk != resource_key.pk:
            raise ResourceKeyAlreadyExistsError(new_name)

        old_name = resource_key.name
        resource_key.name = new_name
        self.repository.update_resource_key(resource_key)
        clear_resource_cache([old_name], [language.id for language in self.repository.get_all()])
        return resource_key

    def update_resource_key(self, key_id: UUID, new_name: str) -> OperationResult:
        """Rename a resource key. Fails with NOT_FOUND for an unknown id."""
        return self._run("Unable to update resource key", self._update_resource_key, key_id, new_name)

    def _delete_resource_key(self, resource_key: LocaleResourceKey) -> None:
        language_ids = [language.id for language in self.repository.get_all()]
        self.repository.delete_resource_key(resource_key)
        clear_resource_cache([resource_key.name], language_ids)

        logger.info(f"Deleted resource key '{resource_key.name}'")

    def delete_resource_key(self, resource_key: LocaleResourceKey) -> OperationResult:
        """Delete a resource key together with its values in every language."""
        return self._run("Unable to delete resource key", self._delete_resource_key, resource_key)

    # Resource values

    def _update_resource_value(self, language: Language, key: str, new_value: str) -> LocaleStringResource:
        resource = self.get_resource(language, key)
        if resource is None:
            raise ResourceNotFoundError(
                f"Unable to update resource with key {key} for language {language.id}. No resource found.",
                {"key": key, "language_id": str(language.id)},
            )

        resource.resource_value = new_value
        self.repository.update_resource(resource)
        clear_resource_cache([resource.resource_key.name], [language.id])
        return resource

    def update_resource_value(self, language: Language, key: str, new_value: str) -> OperationResult:
        """Overwrite the value of a key in one language. Fails with NOT_FOUND if there is no row."""
        return self._run("Unable to update resource value", self._update_resource_value, language, key, new_value)

    # CSV

    def export_csv(self, language: Language) -> str:
        """
        Convert a language into CSV, one ``key,value`` line per resource key.

        There is no header row and neither keys nor values are quoted, so
        values containing commas or line breaks do not survive a round trip.
        """
        lines = []
        for resource in self.repository.all_language_resources(language.id):
            lines.append(f"{resource.resource_key.name},{resource.resource_value}\n")
        return "".join(lines)

    def import_csv(self, language_culture: str, all_lines: Optional[list[str]]) -> CsvReport:
        """
        Create a language from CSV lines and report on the import.

        Setup failures (no lines, unknown culture, language not creatable)
        stop the import with a single error. Problems on individual lines are
        reported and skipped. An unexpected fault abandons the remaining lines
        but keeps the ones already imported.

        Args:
            language_culture: Culture code of the language to create
            all_lines: Lines of ``key,value``

        Returns:
            A report of the errors and warnings
        """
        report = CsvReport()

        if not all_lines:
            report.add_error(CsvErrorWarningType.BAD_DATA_FORMAT, "No language keys or values found.")
            return report

        # Drop a UTF-8 byte-order mark left on the first line
        all_lines = list(all_lines)
        all_lines[0] = all_lines[0].removeprefix("\ufeff")

        # Look up the language and culture
        culture = get_culture(language_culture)
        if culture is None:
            report.add_error(CsvErrorWarningType.DOES_NOT_EXIST, f"The language culture '{language_culture}' does not exist.")
            return report

        try:
            result = self.add_language_from_culture(culture)
        except Exception as e:
            report.add_error(CsvErrorWarningType.ITEM_BAD, str(e))
            return report

        if not result.ok:
            error_type = CsvErrorWarningType.ALREADY_EXISTS if result.error_kind == ErrorKind.ALREADY_EXISTS else CsvErrorWarningType.ITEM_BAD
            report.add_error(error_type, result.message)
            return report

        language = result.value

        try:
            for line_number, line in enumerate(all_lines, start=1):
                key_value_pair = line.rstrip("\r\n").split(",", 1)

                if len(key_value_pair) < 2:
                    report.add_error(CsvErrorWarningType.MISSING_KEY_OR_VALUE, f"Line {line_number}: a key and a value are required.")
                    continue

                key, value = key_value_pair
                key = key.strip()
                if not key:
                    # Ignore empty keys
                    continue

                resource_key = self.repository.get_resource_key_by_name(key)

                # If key does not exist, it is a new one to be created
                if resource_key is None:
                    resource_key = self.add_resource_key(key).unwrap()
                    report.add_warning(
                        CsvErrorWarningType.NEW_KEY_CREATED,
                        f"A new key named '{key}' has been created, and will require a value in all languages.",
                    )

                # In the new language (only) set the value for the resource
                self.update_resource_value(language, resource_key.name, value).unwrap()
        except Exception as e:
            logger.error(f"CSV import for {language.language_culture} stopped: {e}")
            report.add_error(CsvErrorWarningType.GENERAL_ERROR, str(e))

        logger.info(
            f"Imported {language.language_culture} from CSV: {len(report.errors)} errors, {len(report.warnings)} warnings"
        )
        return report
