"""Pure frozen dataclasses with zero I/O for notification definitions.

The models layer is the foundation of the package. It has **no dependencies**
on any other zwnotify package -- only the Python standard library. Every
model uses ``@dataclass(frozen=True, slots=True)`` and read-only mappings, so
a built definition tree can be shared freely.

Attributes:
    Notification: One notification type with its variables and events, and
        the value lookup algorithm.
    NotificationVariable: Named sub-state axis holding a set of states.
    NotificationState: One discrete variable state.
    NotificationEvent: One momentary event.
    StateValue: Lookup result for a variable state.
    EventValue: Lookup result for an event.
    ValueKind: Discriminator of the two lookup result shapes.

See Also:
    [zwnotify.core.registry][]: Loads definition files into these models.
"""

from .constants import HEX_KEY_PATTERN, ValueKind
from .notification import (
    Notification,
    NotificationEvent,
    NotificationState,
    NotificationVariable,
)
from .value import EventValue, NotificationValue, StateValue


__all__ = [
    "HEX_KEY_PATTERN",
    "EventValue",
    "Notification",
    "NotificationEvent",
    "NotificationState",
    "NotificationValue",
    "NotificationVariable",
    "StateValue",
    "ValueKind",
]
