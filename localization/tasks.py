"""Celery tasks for localization."""

import logging

from celery import shared_task

from .services import LocalizationService

logger = logging.getLogger(__name__)


@shared_task(bind=True)
def import_language_csv(self, language_culture: str, lines: list[str]) -> dict:
    """Import a language from CSV lines in the background and return the report."""
    logger.info(f"Importing language {language_culture} from {len(lines or [])} CSV lines (task {self.request.id})")

    report = LocalizationService().import_csv(language_culture, lines)

    if report.has_errors:
        logger.warning(f"Import of {language_culture} finished with {len(report.errors)} errors")
    return report.to_dict()
