"""
Lazily loaded registry of notification definitions.

[NotificationRegistry][zwnotify.core.registry.NotificationRegistry] owns the
``notification type -> Notification`` mapping. The definition resource is
read and validated on the first lookup, never eagerly, and at most once per
registry:

```text
UNLOADED --load ok------------------------------> LOADED
UNLOADED --ResourceMissingError/MalformedConfig-> FAILED  (empty, final)
UNLOADED --any other error----------------------> UNLOADED (error raised)
```

A registry that reached ``FAILED`` reports the reason once through its
logger and behaves as if no notification types exist for the rest of its
lifetime, even if the resource appears later.

Construct one registry per process and hand it to the components that need
lookups.

Examples:
    ```python
    registry = NotificationRegistry.from_yaml("config/zwnotify.yaml")

    notification = await registry.lookup_notification(0x05)
    value = await registry.lookup_value(0x05, 0x02)
    if value is not None:
        print(value.to_dict())
    ```

See Also:
    [load_notifications()][zwnotify.core.registry.load_notifications]: The
        loader run on first use.
    [Notification.lookup_value()][zwnotify.models.notification.Notification.lookup_value]:
        The per-type lookup algorithm.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any

import json5
from pydantic import BaseModel, Field, field_validator

from zwnotify.models import Notification, NotificationValue, ValueKind
from zwnotify.models._validation import parse_hex_entries

from .exceptions import ConfigurationError, MalformedConfigError, ResourceMissingError
from .logger import Logger
from .metrics import DEFINITIONS_LOADED, LOOKUP_COUNTER, LookupOutcome
from .resources import DirectoryResourceProvider, ResourceProvider
from .yaml import load_yaml


DEFAULT_FILENAME = "notifications.json"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class RegistryConfig(BaseModel):
    """Where the definition file lives and how lookups are observed.

    See Also:
        [NotificationRegistry][zwnotify.core.registry.NotificationRegistry]:
            The registry that consumes this configuration.
    """

    config_dir: Path = Field(
        default=Path("config"),
        description="Directory containing the notification definition file",
    )
    filename: str = Field(
        default=DEFAULT_FILENAME,
        min_length=1,
        description="Definition file name inside config_dir",
    )
    metrics: bool = Field(
        default=False,
        description="Record Prometheus lookup metrics",
    )

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Ensure filename does not escape config_dir."""
        if Path(v).name != v:
            raise ValueError(f"filename must be a bare file name, got {v!r}")
        return v


class RegistryState(StrEnum):
    """Load state of a [NotificationRegistry][zwnotify.core.registry.NotificationRegistry]."""

    UNLOADED = "unloaded"
    LOADED = "loaded"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


async def load_notifications(
    provider: ResourceProvider,
    name: str = DEFAULT_FILENAME,
) -> Mapping[int, Notification]:
    """Read, parse, and validate a notification definition resource.

    The resource is parsed as JSON5, so comments and trailing commas are
    accepted. The root must be an object whose keys are ``0x``-prefixed
    hexadecimal notification types.

    Args:
        provider: Source of the definition text.
        name: Logical resource name.

    Returns:
        Read-only mapping of notification type to
        [Notification][zwnotify.models.notification.Notification].

    Raises:
        ResourceMissingError: If the resource does not exist.
        MalformedConfigError: If the resource cannot be read or parsed, or
            violates the definition format anywhere. No partial mapping is
            ever returned.
    """
    if not await provider.exists(name):
        raise ResourceMissingError()

    try:
        text = await provider.read_text(name)
        definition = json5.loads(text)
        return parse_hex_entries(definition, "notifications", Notification.from_definition)
    except ConfigurationError:
        raise
    except Exception as e:  # Intentionally broad: any parse/build failure means a bad file
        raise MalformedConfigError() from e


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class NotificationRegistry:
    """Process-scoped, load-once cache of notification definitions.

    Concurrent first lookups share a single load: an ``asyncio.Lock`` guards
    the transition out of ``UNLOADED``. Once loaded (or failed) lookups only
    read the immutable mapping.

    Attributes:
        _config: Registry configuration.
        _provider: Resource provider the definition file is read from.
        _notifications: Loaded mapping, ``None`` while unloaded.
        _logger: [Logger][zwnotify.core.logger.Logger] used for the load
            failure diagnostic.
    """

    def __init__(
        self,
        provider: ResourceProvider | None = None,
        config: RegistryConfig | None = None,
    ) -> None:
        """Initialize an unloaded registry.

        Args:
            provider: Source of the definition file. Defaults to a
                [DirectoryResourceProvider][zwnotify.core.resources.DirectoryResourceProvider]
                on ``config.config_dir``.
            config: Registry configuration. Defaults to
                [RegistryConfig][zwnotify.core.registry.RegistryConfig]().
        """
        self._config = config or RegistryConfig()
        self._provider = provider or DirectoryResourceProvider(self._config.config_dir)
        self._notifications: Mapping[int, Notification] | None = None
        self._state = RegistryState.UNLOADED
        self._load_lock = asyncio.Lock()
        self._logger = Logger("registry")

    @classmethod
    def from_yaml(cls, config_path: str) -> NotificationRegistry:
        """Create a registry from a YAML configuration file.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            pydantic.ValidationError: If the configuration is invalid.
        """
        return cls.from_dict(load_yaml(config_path))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> NotificationRegistry:
        """Create a registry from a dictionary matching ``RegistryConfig``."""
        return cls(config=RegistryConfig(**config_dict))

    @property
    def config(self) -> RegistryConfig:
        """The registry configuration (read-only)."""
        return self._config

    @property
    def state(self) -> RegistryState:
        """Current load state."""
        return self._state

    async def notifications(self) -> Mapping[int, Notification]:
        """Return the full mapping, loading it first if needed."""
        if self._notifications is not None:
            return self._notifications

        async with self._load_lock:
            if self._notifications is None:
                self._notifications = await self._load()
            return self._notifications

    async def _load(self) -> Mapping[int, Notification]:
        try:
            notifications = await load_notifications(self._provider, self._config.filename)
        except (ResourceMissingError, MalformedConfigError) as e:
            # A missing or invalid file is not looked for again
            extra: dict[str, Any] = {"error": str(e)}
            if e.__cause__ is not None:
                extra["cause"] = repr(e.__cause__)
            self._logger.error("notification_config_load_failed", **extra)
            notifications = MappingProxyType({})
            self._state = RegistryState.FAILED
        else:
            self._state = RegistryState.LOADED
            self._logger.debug("notification_config_loaded", count=len(notifications))

        if self._config.metrics:
            DEFINITIONS_LOADED.set(len(notifications))
        return notifications

    async def lookup_notification(self, notification_type: int) -> Notification | None:
        """Return the definition of *notification_type*, or ``None`` if unknown."""
        notifications = await self.notifications()
        return notifications.get(notification_type)

    async def lookup_value(self, notification_type: int, value: int) -> NotificationValue | None:
        """Resolve a reported value of a notification type.

        Args:
            notification_type: Notification type (category) identifier.
            value: Reported numeric value.

        Returns:
            A [StateValue][zwnotify.models.value.StateValue] or
            [EventValue][zwnotify.models.value.EventValue], or ``None`` when
            the type or the value is unknown.

        Raises:
            Exception: Any unexpected (non-configuration) error raised while
                loading; the registry stays unloaded and the next call
                retries.
        """
        notification = await self.lookup_notification(notification_type)
        if notification is None:
            self._record(LookupOutcome.UNKNOWN_TYPE)
            return None

        result = notification.lookup_value(value)
        if result is None:
            self._record(LookupOutcome.MISS)
        elif result.kind is ValueKind.EVENT:
            self._record(LookupOutcome.EVENT)
        else:
            self._record(LookupOutcome.STATE)
        return result

    def _record(self, outcome: LookupOutcome) -> None:
        if self._config.metrics:
            LOOKUP_COUNTER.labels(outcome=outcome).inc()
