"""Template tags for localization app."""

import logging

from django import template
from django.template.context import Context

from ..exceptions import NoDefaultLanguageError
from ..services import LocalizationService

logger = logging.getLogger(__name__)

register = template.Library()


def _context_language(context: Context):
    request = context.get("request")
    return getattr(request, "forum_language", None) if request is not None else None


def _format_string(value: str, **kwargs) -> str:
    if not kwargs:
        return value

    try:
        return value.format(**kwargs)
    except (KeyError, ValueError) as e:
        logger.warning(f"String formatting error for '{value}': {e}")
        return value


@register.simple_tag(takes_context=True)
def resource(context: Context, key: str, **kwargs) -> str:
    """
    Look up a resource string in the request's forum language.

    Falls back to the default language when the request carries none, and to
    the key itself when nothing is translated.

    Usage:
        {% resource "Post.Quote" %}
        {% resource "Member.Greeting" name=user.username %}
    """
    try:
        value = LocalizationService().get_resource_string(key, _context_language(context))
    except NoDefaultLanguageError as e:
        logger.error(f"Cannot resolve resource '{key}': {e}")
        value = key
    return _format_string(value, **kwargs)


@register.simple_tag(takes_context=True)
def forum_language(context: Context):
    """
    The language the page is rendered in.

    Usage:
        {% forum_language as language %}
        <html lang="{{ language.language_culture }}" dir="{% if language.right_to_left %}rtl{% else %}ltr{% endif %}">
    """
    language = _context_language(context)
    if language is None:
        try:
            language = LocalizationService().default_language
        except NoDefaultLanguageError as e:
            logger.error(f"Cannot resolve forum language: {e}")
    return language
