"""In-memory notifier — queues messages until the render boundary drains them."""

import structlog

from storefront.notifier.port import NotifierPort

logger = structlog.get_logger(__name__)


class InMemoryNotifier(NotifierPort):
    """Notifier that records messages in memory for the UI and for test assertions."""

    def __init__(self):
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        logger.debug("notification_queued", message=message)
        self.messages.append(message)

    def drain(self) -> list[str]:
        """Return the pending messages and forget them."""
        pending = list(self.messages)
        self.messages.clear()
        return pending

    def reset(self):
        """Clear recorded messages (useful between tests)."""
        self.messages.clear()
