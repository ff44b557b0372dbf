"""Notifier port — the toast channel the storefront core talks to."""

from abc import ABC, abstractmethod


class NotifierPort(ABC):
    """Fire-and-forget delivery of short user-facing messages."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Deliver a message. The core never inspects the outcome."""
        ...
