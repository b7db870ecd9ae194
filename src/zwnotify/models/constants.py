"""Shared constants for the models layer.

See Also:
    [zwnotify.models.notification][]: Uses [HEX_KEY_PATTERN][zwnotify.models.constants.HEX_KEY_PATTERN]
        to validate identifier keys and [ValueKind][zwnotify.models.constants.ValueKind]
        to tag resolved values.
"""

from __future__ import annotations

import re
from enum import StrEnum


# Identifier keys in definition files: "0x" followed by hex digits of either case
HEX_KEY_PATTERN: re.Pattern[str] = re.compile(r"^0x[a-fA-F0-9]+$")


class ValueKind(StrEnum):
    """Discriminator for resolved notification values.

    Attributes:
        STATE: The value is one discrete state of a notification variable.
        EVENT: The value is a momentary event of the notification.

    See Also:
        [StateValue][zwnotify.models.value.StateValue]: Carries ``STATE``.
        [EventValue][zwnotify.models.value.EventValue]: Carries ``EVENT``.
    """

    STATE = "state"
    EVENT = "event"
