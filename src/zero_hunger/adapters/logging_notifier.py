"""Notifier that writes user-facing messages to the application log."""

import logging

from zero_hunger.services.notifications import Notifier, Severity

logger = logging.getLogger(__name__)

_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class LoggingNotifier(Notifier):
    """Headless notification surface backed by the package logger."""

    async def notify(self, message: str, severity: Severity) -> None:
        logger.log(_LEVELS[severity], "[%s] %s", severity.value, message)
