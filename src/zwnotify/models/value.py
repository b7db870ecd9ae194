"""Resolved notification values.

A lookup against a [Notification][zwnotify.models.notification.Notification]
yields one of two shapes, discriminated by the ``kind`` class attribute:

* [StateValue][zwnotify.models.value.StateValue] -- the value is a state of
  one of the notification's variables.
* [EventValue][zwnotify.models.value.EventValue] -- the value is a momentary
  event of the notification.

Both carry ``label`` and ``description``; only states know their variable,
raw value, and idle capability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

from .constants import ValueKind


@dataclass(frozen=True, slots=True)
class StateValue:
    """A notification value resolved to a variable state.

    Attributes:
        value: The raw numeric value that was looked up.
        idle: Whether the owning variable may return to idle.
        label: Human-readable state label.
        variable_name: Name of the variable the state belongs to.
        description: Optional longer description of the state.

    Examples:
        ```python
        StateValue(value=1, idle=True, label="Leak", variable_name="Leak detected").to_dict()
        # {'type': 'state', 'value': 1, 'idle': True, 'label': 'Leak',
        #  'variableName': 'Leak detected'}
        ```
    """

    kind: ClassVar[ValueKind] = ValueKind.STATE

    value: int
    idle: bool
    label: str
    variable_name: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation, omitting an absent description."""
        result: dict[str, Any] = {
            "type": self.kind.value,
            "value": self.value,
            "idle": self.idle,
            "label": self.label,
            "variableName": self.variable_name,
        }
        if self.description is not None:
            result["description"] = self.description
        return result


@dataclass(frozen=True, slots=True)
class EventValue:
    """A notification value resolved to an event.

    The event id is the value that was looked up and is not repeated here.

    Attributes:
        label: Human-readable event label.
        description: Optional longer description of the event.
    """

    kind: ClassVar[ValueKind] = ValueKind.EVENT

    label: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation, omitting an absent description."""
        result: dict[str, Any] = {"type": self.kind.value, "label": self.label}
        if self.description is not None:
            result["description"] = self.description
        return result


NotificationValue: TypeAlias = StateValue | EventValue
