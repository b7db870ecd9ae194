"""Core layer: definition loading, the registry, and ambient infrastructure.

Depends only on ``zwnotify.models``.

Attributes:
    NotificationRegistry: Lazily loaded, load-once cache of notification
        definitions. See [NotificationRegistry][zwnotify.core.registry.NotificationRegistry].
    RegistryConfig: Pydantic configuration of the registry.
    ResourceProvider: Abstract source of named text resources;
        [DirectoryResourceProvider][zwnotify.core.resources.DirectoryResourceProvider]
        reads them from a configuration directory.
    Logger: Structured logger supporting key=value and JSON output modes.
    YAML: Safe YAML loading for registry configuration.
        See [load_yaml()][zwnotify.core.yaml.load_yaml].

Examples:
    ```python
    from zwnotify.core import NotificationRegistry

    registry = NotificationRegistry.from_dict({"config_dir": "config"})
    value = await registry.lookup_value(0x05, 0x02)
    ```
"""

from .exceptions import (
    ConfigurationError,
    MalformedConfigError,
    ResourceMissingError,
    ZwNotifyError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .metrics import DEFINITIONS_LOADED, LOOKUP_COUNTER, LookupOutcome
from .registry import (
    DEFAULT_FILENAME,
    NotificationRegistry,
    RegistryConfig,
    RegistryState,
    load_notifications,
)
from .resources import DirectoryResourceProvider, ResourceProvider
from .yaml import load_yaml


__all__ = [
    "DEFAULT_FILENAME",
    "DEFINITIONS_LOADED",
    "LOOKUP_COUNTER",
    "ConfigurationError",
    "DirectoryResourceProvider",
    "Logger",
    "LookupOutcome",
    "MalformedConfigError",
    "NotificationRegistry",
    "RegistryConfig",
    "RegistryState",
    "ResourceMissingError",
    "ResourceProvider",
    "StructuredFormatter",
    "ZwNotifyError",
    "format_kv_pairs",
    "load_notifications",
    "load_yaml",
]
