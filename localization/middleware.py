"""Request middleware resolving the visitor's forum language."""

import logging

from django.conf import settings
from django.utils.functional import SimpleLazyObject

from .services import LocalizationService

logger = logging.getLogger(__name__)


def get_request_language(request, service=None):
    """
    Resolve the language for a request.

    Uses the culture code stored in the session under
    LOCALIZATION["SESSION_KEY"] when it names a stored language, otherwise
    the default language.
    """
    service = service or LocalizationService()
    session_key = getattr(settings, "LOCALIZATION", {}).get("SESSION_KEY", "forum_language")

    session = getattr(request, "session", None)
    language_culture = session.get(session_key) if session is not None else None
    if language_culture:
        language = service.get_language_by_culture(language_culture)
        if language is not None:
            return language
        logger.debug(f"Session language '{language_culture}' is not defined, using default")

    return service.default_language


class LocalizationMiddleware:
    """Attach ``request.forum_language``, resolved lazily on first access."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.forum_language = SimpleLazyObject(lambda: get_request_language(request))
        return self.get_response(request)
