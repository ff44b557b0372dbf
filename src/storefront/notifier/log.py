"""Logging notifier — writes each message to the structured log."""

import structlog

from storefront.notifier.port import NotifierPort

logger = structlog.get_logger(__name__)


class LoggingNotifier(NotifierPort):
    def notify(self, message: str) -> None:
        logger.info("notification", message=message)
