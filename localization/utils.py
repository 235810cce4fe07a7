"""Utility functions for localization app."""

import hashlib
import logging
import re
from typing import Iterable
from uuid import UUID

from django.core.cache import cache
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


def _sanitize_cache_key(key: str) -> str:
    """
    Sanitize cache key for memcached compatibility.

    Memcached has restrictions on cache keys:
    - Max length: 250 characters
    - Valid characters: A-Z, a-z, 0-9, and some special chars
    - No spaces, newlines, or control characters

    Args:
        key: Raw cache key

    Returns:
        Sanitized cache key safe for memcached
    """
    # Replace invalid characters with underscores
    sanitized = re.sub(r"[^\w\-\.]", "_", key)

    # If the key is too long, use a hash
    if len(sanitized) > 200:
        prefix = sanitized[:150]
        key_hash = hashlib.md5(key.encode("utf-8")).hexdigest()[:8]
        sanitized = f"{prefix}_{key_hash}"

    return sanitized


def resource_cache_key(language_id: UUID, key_name: str) -> str:
    """
    Cache key for the value of a resource key in one language.

    The readable part is sanitized and may be shared by different names, the
    digest of the raw name keeps their keys apart.
    """
    key_hash = hashlib.md5(key_name.encode("utf-8")).hexdigest()
    return _sanitize_cache_key(f"localization:{language_id}:{key_name}"[:150] + f":{key_hash}")


def clear_resource_cache(key_names: Iterable[str], language_ids: Iterable[UUID]) -> None:
    """
    Drop cached values for every combination of key name and language.

    Args:
        key_names: Resource key names to clear
        language_ids: Languages to clear them in
    """
    language_ids = list(language_ids)
    cache_keys = [resource_cache_key(language_id, name) for name in key_names for language_id in language_ids]
    if not cache_keys:
        return

    try:
        cache.delete_many(cache_keys)
    except Exception as e:
        logger.warning(f"Error clearing localization cache: {e}")


def safe_plain_text(text: str) -> str:
    """Strip markup and surrounding whitespace from user input."""
    if not text:
        return ""
    return strip_tags(text).strip()
