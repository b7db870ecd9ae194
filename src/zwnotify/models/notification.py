"""Notification definition records.

Immutable containment tree built from one entry of a notification definition
file:

```text
Notification
├── variables: tuple[NotificationVariable, ...]
│   └── states: Mapping[int, NotificationState]
└── events: Mapping[int, NotificationEvent]
```

Each record exposes a ``from_definition`` factory that copies fields from a
raw (already decoded) definition object. Factories raise ``TypeError`` or
``ValueError`` on structural violations; they never log.

Note:
    ``variables`` is parsed permissively (anything other than a list yields
    no variables) while ``states`` is mandatory. Definition files in the wild
    rely on this asymmetry, so it is kept as is.

See Also:
    [load_notifications()][zwnotify.core.registry.load_notifications]: Builds
        a full ``id -> Notification`` mapping from a definition resource.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ._validation import (
    freeze_mapping,
    parse_hex_entries,
    validate_identifier,
    validate_mapping,
)
from .value import EventValue, NotificationValue, StateValue


@dataclass(frozen=True, slots=True)
class NotificationState:
    """One discrete value a notification variable can take.

    Attributes:
        id: Numeric state value.
        label: Human-readable label.
        description: Optional longer description.
    """

    id: int
    label: str
    description: str | None = None

    def __post_init__(self) -> None:
        validate_identifier(self.id, "id")

    @classmethod
    def from_definition(cls, state_id: int, definition: Mapping[str, Any]) -> NotificationState:
        validate_mapping(definition, "state")
        return cls(
            id=state_id,
            label=definition.get("label"),
            description=definition.get("description"),
        )


@dataclass(frozen=True, slots=True)
class NotificationEvent:
    """A momentary occurrence reported under a notification type.

    Attributes:
        id: Numeric event value.
        label: Human-readable label.
        description: Optional longer description.
    """

    id: int
    label: str
    description: str | None = None

    def __post_init__(self) -> None:
        validate_identifier(self.id, "id")

    @classmethod
    def from_definition(cls, event_id: int, definition: Mapping[str, Any]) -> NotificationEvent:
        validate_mapping(definition, "event")
        return cls(
            id=event_id,
            label=definition.get("label"),
            description=definition.get("description"),
        )


@dataclass(frozen=True, slots=True)
class NotificationVariable:
    """A named sub-state axis of a notification type.

    Attributes:
        name: Variable name, e.g. ``"Sensor status"``.
        idle: Whether the variable may be reset to idle. Defaults to ``True``
            and is only ``False`` when the definition says exactly ``false``.
        states: Read-only mapping of state value to
            [NotificationState][zwnotify.models.notification.NotificationState].
    """

    name: str
    idle: bool = True
    states: Mapping[int, NotificationState] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", freeze_mapping(self.states))

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> NotificationVariable:
        """Build a variable from its raw definition object.

        Raises:
            TypeError: If the definition or its ``states`` is not an object.
            ValueError: If a state key is not a hexadecimal identifier.
        """
        validate_mapping(definition, "variable")
        return cls(
            name=definition.get("name"),
            # Any value other than an explicit false keeps the default
            idle=definition.get("idle") is not False,
            states=parse_hex_entries(
                definition.get("states"), "states", NotificationState.from_definition
            ),
        )


@dataclass(frozen=True, slots=True)
class Notification:
    """All variables and events known for one notification type.

    Attributes:
        id: Notification type (category) identifier.
        name: Category name, e.g. ``"Water Alarm"``.
        variables: Variables in definition order; lookups scan them in this
            order.
        events: Read-only mapping of event value to
            [NotificationEvent][zwnotify.models.notification.NotificationEvent].

    Examples:
        ```python
        notification = Notification.from_definition(
            0x05,
            {
                "name": "Water Alarm",
                "variables": [
                    {"name": "Sensor status", "states": {"0x02": {"label": "Leak"}}}
                ],
            },
        )
        notification.lookup_value(0x02)
        # StateValue(value=2, idle=True, label='Leak', variable_name='Sensor status')
        ```
    """

    id: int
    name: str
    variables: tuple[NotificationVariable, ...] = ()
    events: Mapping[int, NotificationEvent] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        validate_identifier(self.id, "id")
        object.__setattr__(self, "variables", tuple(self.variables))
        object.__setattr__(self, "events", freeze_mapping(self.events))

    @classmethod
    def from_definition(cls, notification_id: int, definition: Mapping[str, Any]) -> Notification:
        """Build a notification from its raw definition object.

        A ``variables`` field that is missing or not a list yields no
        variables; a missing or non-object ``events`` field yields no events.
        The definition itself must be an object: a bare string or number
        entry is rejected rather than read as a notification without a name.

        Raises:
            TypeError: If the definition or a nested required object has the
                wrong type.
            ValueError: If an event or state key is not a hexadecimal
                identifier.
        """
        validate_mapping(definition, "notification")

        raw_variables = definition.get("variables")
        variables = (
            tuple(NotificationVariable.from_definition(v) for v in raw_variables)
            if isinstance(raw_variables, list)
            else ()
        )

        raw_events = definition.get("events")
        events: Mapping[int, NotificationEvent] = (
            parse_hex_entries(raw_events, "events", NotificationEvent.from_definition)
            if isinstance(raw_events, Mapping)
            else MappingProxyType({})
        )

        return cls(
            id=notification_id,
            name=definition.get("name"),
            variables=variables,
            events=events,
        )

    def lookup_value(self, value: int) -> NotificationValue | None:
        """Resolve a reported value to an event or a variable state.

        Events take precedence: when *value* is both an event id and a state
        of some variable, the event is returned. Otherwise the first variable
        (in definition order) having *value* as a state wins.

        Returns:
            An [EventValue][zwnotify.models.value.EventValue], a
            [StateValue][zwnotify.models.value.StateValue], or ``None`` when
            the value is unknown.
        """
        event = self.events.get(value)
        if event is not None:
            return EventValue(label=event.label, description=event.description)

        for variable in self.variables:
            state = variable.states.get(value)
            if state is not None:
                return StateValue(
                    value=value,
                    idle=variable.idle,
                    label=state.label,
                    variable_name=variable.name,
                    description=state.description,
                )
        return None
