"""Transient user notifications."""

from enum import Enum
from typing import Protocol


class Severity(str, Enum):
    """Semantic severity of a notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notifier(Protocol):
    """Surface that shows short confirmation or error messages."""

    async def notify(self, message: str, severity: Severity) -> None:
        """Show a message to the user."""
