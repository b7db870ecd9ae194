r"""zwnotify -- Human-readable metadata for device notification codes.

Resolves the numeric ``(notification type, value)`` pairs reported by
smart-home devices into category names, variable states, and events, using a
declarative JSON5 definition file.

Imports flow strictly downward:

```text
          __main__         CLI
             |
            core           Registry, loader, config, logging, metrics
             |
           models          Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from zwnotify import NotificationRegistry``) use
    lazy loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("zwnotify")

__all__ = [
    "EventValue",
    "Logger",
    "MalformedConfigError",
    "Notification",
    "NotificationEvent",
    "NotificationRegistry",
    "NotificationState",
    "NotificationVariable",
    "RegistryConfig",
    "ResourceMissingError",
    "StateValue",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Logger": ("zwnotify.core", "Logger"),
    "MalformedConfigError": ("zwnotify.core", "MalformedConfigError"),
    "NotificationRegistry": ("zwnotify.core", "NotificationRegistry"),
    "RegistryConfig": ("zwnotify.core", "RegistryConfig"),
    "ResourceMissingError": ("zwnotify.core", "ResourceMissingError"),
    "EventValue": ("zwnotify.models", "EventValue"),
    "Notification": ("zwnotify.models", "Notification"),
    "NotificationEvent": ("zwnotify.models", "NotificationEvent"),
    "NotificationState": ("zwnotify.models", "NotificationState"),
    "NotificationVariable": ("zwnotify.models", "NotificationVariable"),
    "StateValue": ("zwnotify.models", "StateValue"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'zwnotify' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
