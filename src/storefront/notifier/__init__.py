"""Notifier registry — pluggable delivery for storefront toasts.

Provides singleton access to notifier adapters. The adapter used when none
is requested explicitly comes from the ``STOREFRONT_NOTIFIER`` environment
variable ("log" or "memory", default "log").
"""

import os

from storefront.notifier.port import NotifierPort

NOTIFIER_KINDS = ("log", "memory")

_notifier_instances: dict[str, NotifierPort] = {}


def get_notifier(kind: str | None = None) -> NotifierPort:
    """Return the configured notifier adapter (singleton per kind).

    Args:
        kind: One of NOTIFIER_KINDS; defaults to ``STOREFRONT_NOTIFIER``.
    """
    kind = (kind or os.getenv("STOREFRONT_NOTIFIER") or "log").lower()
    if kind not in NOTIFIER_KINDS:
        raise ValueError(f"Unknown notifier kind: {kind}; expected one of {NOTIFIER_KINDS}")

    if kind not in _notifier_instances:
        if kind == "log":
            from storefront.notifier.log import LoggingNotifier

            _notifier_instances[kind] = LoggingNotifier()
        else:
            from storefront.notifier.memory import InMemoryNotifier

            _notifier_instances[kind] = InMemoryNotifier()

    return _notifier_instances[kind]


def reset_notifiers():
    """Reset all notifier singletons (useful for testing)."""
    _notifier_instances.clear()
