"""
Prometheus metrics for notification lookups.

Module-level metric objects (singletons, thread-safe) shared by every
[NotificationRegistry][zwnotify.core.registry.NotificationRegistry] in the
process. Registries only record when ``RegistryConfig.metrics`` is enabled;
exposition is left to the host (e.g. ``prometheus_client.start_http_server``).

Architecture:
    LOOKUP_COUNTER:         Cumulative lookups by outcome.
    DEFINITIONS_LOADED:     Number of notification types currently loaded.
"""

from __future__ import annotations

from enum import StrEnum

from prometheus_client import Counter, Gauge


class LookupOutcome(StrEnum):
    """Label values for ``LOOKUP_COUNTER``."""

    EVENT = "event"
    STATE = "state"
    MISS = "miss"
    UNKNOWN_TYPE = "unknown_type"


LOOKUP_COUNTER = Counter(
    "notification_lookups",
    "Notification value lookups by outcome",
    ["outcome"],
)

# Reset to 0 when the definition file fails to load
DEFINITIONS_LOADED = Gauge(
    "notification_definitions_loaded",
    "Number of notification types loaded from the definition file",
)
