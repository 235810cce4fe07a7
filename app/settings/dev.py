"""Development environment specific settings."""

from .core import INSTALLED_APPS, TESTING

# Dev-only apps
if not TESTING:
    INSTALLED_APPS += ("django_extensions",)

INTERNAL_IPS = [
    "127.0.0.1",
]
