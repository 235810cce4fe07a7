"""Forum Django project package."""

import logging

logger = logging.getLogger(__name__)

from .celery import app as celery_app

logger.debug(f"CELERY_INIT: Celery app imported: {celery_app}")

__all__ = ("celery_app",)
