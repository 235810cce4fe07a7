"""Custom exceptions for the localization app."""

from typing import Dict, Optional


class LocalizationError(Exception):
    """Base exception for localization errors."""

    def __init__(self, message: str, code: str = "LOCALIZATION_ERROR", details: Optional[Dict] = None, cause: Optional[BaseException] = None):
        """
        Initialize localization error.

        Args:
            message: Human-readable error message
            code: Error code for programmatic handling
            details: Additional error details
            cause: Lower-level exception this error wraps, if any
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause
        super().__init__(message)


class LanguageOrCultureAlreadyExistsError(LocalizationError):
    """Raised when a language with the same culture code is already defined."""

    def __init__(self, language_culture: str):
        super().__init__(
            message=f"There is already a language defined for language-culture '{language_culture}'",
            code="ALREADY_EXISTS",
            details={"language_culture": language_culture},
        )


class ResourceKeyAlreadyExistsError(LocalizationError):
    """Raised when a resource key name is already taken."""

    def __init__(self, name: str):
        super().__init__(
            message=f"The resource key with name '{name}' already exists.",
            code="ALREADY_EXISTS",
            details={"name": name},
        )


class ResourceNotFoundError(LocalizationError):
    """Raised when a resource value or key cannot be found."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, "NOT_FOUND", details)


class DefaultLanguageDeletionError(LocalizationError):
    """Raised when deleting the configured default language."""

    def __init__(self):
        super().__init__("Deleting the default language is not allowed.", "DEFAULT_LANGUAGE")


class LocalizationStoreError(LocalizationError):
    """Raised when the underlying store fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, "STORE_ERROR", cause=cause)


class NoDefaultLanguageError(LocalizationError):
    """Raised when the forum settings do not point at a default language."""

    def __init__(self):
        super().__init__("There is no default language defined in the system.", "MISCONFIGURED")
