"""zwnotify exception hierarchy.

Exception hierarchy:

```text
ZwNotifyError (base -- never raised directly)
└── ConfigurationError          -- definition resource cannot be used
    ├── ResourceMissingError    -- resource does not exist
    └── MalformedConfigError    -- resource violates the definition format
```

Both concrete configuration errors are *recognized* load failures:
[NotificationRegistry][zwnotify.core.registry.NotificationRegistry] reports
them once and then treats the definition set as permanently empty. Anything
outside this hierarchy propagates to the caller.

See Also:
    [load_notifications()][zwnotify.core.registry.load_notifications]:
        Raises both concrete errors, converting the ``TypeError``/``ValueError``
        raised by the model factories into
        [MalformedConfigError][zwnotify.core.exceptions.MalformedConfigError].
"""

from __future__ import annotations


class ZwNotifyError(Exception):
    """Base exception for all zwnotify errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(ZwNotifyError):
    """The notification definition resource cannot be used.

    See Also:
        [ResourceMissingError][zwnotify.core.exceptions.ResourceMissingError]:
            The resource does not exist.
        [MalformedConfigError][zwnotify.core.exceptions.MalformedConfigError]:
            The resource exists but is invalid.
    """


class ResourceMissingError(ConfigurationError):
    """The definition resource does not exist at load time."""

    def __init__(self, message: str = "The config file does not exist!") -> None:
        super().__init__(message)


class MalformedConfigError(ConfigurationError):
    """The definition resource exists but violates the structural contract.

    Raised for a non-object root, a key that is not a ``0x``-prefixed
    hexadecimal string, a variable without a ``states`` object, or any
    other failure while parsing or building the definitions.
    """

    def __init__(self, message: str = "The config file is malformed!") -> None:
        super().__init__(message)
