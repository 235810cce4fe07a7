"""Culture code lookup backed by Babel's CLDR data."""

import logging
from functools import lru_cache
from typing import Optional

from babel import Locale
from babel.core import UnknownLocaleError
from babel.localedata import locale_identifiers

logger = logging.getLogger(__name__)


def culture_code(locale: Locale) -> str:
    """
    Return the dash separated culture code for a Babel locale.

    Examples: ``en-GB``, ``zh-Hans-CN``, ``fr``.
    """
    parts = [locale.language, locale.script, locale.territory, locale.variant]
    return "-".join(part for part in parts if part)


def get_culture(code: str) -> Optional[Locale]:
    """
    Resolve a culture code to a Babel locale.

    Accepts both ``en-GB`` and ``en_GB``. Returns None when the code is not a
    known culture instead of raising.
    """
    if not code or not code.strip():
        return None

    normalized = code.strip().replace("-", "_")
    try:
        return Locale.parse(normalized)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug(f"Unknown culture '{code}': {e}")
        return None


def is_right_to_left(locale: Locale) -> bool:
    """Return True when the locale's script is written right to left."""
    return locale.text_direction == "rtl"


@lru_cache(maxsize=1)
def all_cultures() -> tuple[Locale, ...]:
    """Every culture Babel knows about, sorted by English name."""
    cultures = []
    for identifier in locale_identifiers():
        if identifier == "root":
            continue
        try:
            cultures.append(Locale.parse(identifier))
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(f"Skipping unparseable locale '{identifier}': {e}")
    return tuple(sorted(cultures, key=lambda locale: locale.english_name or ""))
