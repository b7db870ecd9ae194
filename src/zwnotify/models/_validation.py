"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by the ``from_definition``
factories and ``__post_init__`` methods in sibling model modules. Helpers
raise plain ``TypeError``/``ValueError``; the loader in
[zwnotify.core.registry][] turns them into configuration errors.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from .constants import HEX_KEY_PATTERN


T = TypeVar("T")


def validate_mapping(value: Any, name: str) -> None:
    """Raise ``TypeError`` if *value* is not a ``Mapping``."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a Mapping, got {type(value).__name__}")


def validate_identifier(value: Any, name: str) -> None:
    """Raise if *value* is not a non-negative ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def parse_hex_key(key: Any, name: str) -> int:
    """Convert a ``0x``-prefixed hexadecimal key to an integer identifier.

    Args:
        key: Raw key from a definition object, e.g. ``"0x0A"``.
        name: Field name for error messages.

    Returns:
        The integer value of the hexadecimal digits.

    Raises:
        ValueError: If *key* is not a string matching
            [HEX_KEY_PATTERN][zwnotify.models.constants.HEX_KEY_PATTERN].
    """
    if not isinstance(key, str) or not HEX_KEY_PATTERN.fullmatch(key):
        raise ValueError(f"{name} key {key!r} is not a hexadecimal identifier")
    return int(key[2:], 16)


def parse_hex_entries(
    definition: Any,
    name: str,
    factory: Callable[[int, Mapping[str, Any]], T],
) -> MappingProxyType[int, T]:
    """Build a read-only ``id -> record`` mapping from a hex-keyed object.

    Every key must pass [parse_hex_key][zwnotify.models._validation.parse_hex_key]
    and every value is handed to *factory* together with its parsed id. The
    first invalid key aborts the whole conversion; no partial result is
    returned.

    Args:
        definition: Raw object keyed by hexadecimal strings.
        name: Field name for error messages.
        factory: Callable building one record from ``(id, definition)``.

    Raises:
        TypeError: If *definition* is not a mapping.
        ValueError: If any key is not a hexadecimal identifier.
    """
    validate_mapping(definition, name)
    entries: dict[int, T] = {}
    for key, entry in definition.items():
        entry_id = parse_hex_key(key, name)
        entries[entry_id] = factory(entry_id, entry)
    return MappingProxyType(entries)


def freeze_mapping(value: Mapping[int, T]) -> MappingProxyType[int, T]:
    """Wrap *value* with ``MappingProxyType`` unless it already is one."""
    if isinstance(value, MappingProxyType):
        return value
    return MappingProxyType(dict(value))
