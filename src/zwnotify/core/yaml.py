"""YAML configuration loading for zwnotify.

Used by [NotificationRegistry.from_yaml()][zwnotify.core.registry.NotificationRegistry.from_yaml]
to read the registry settings (where the definition file lives, whether
metrics are recorded). The definition file itself is JSON5 and is read
through a [ResourceProvider][zwnotify.core.resources.ResourceProvider].
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str) -> dict[str, Any]:
    """Load and parse a YAML configuration file with ``yaml.safe_load``.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary, or an empty dict if the
        file contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.

    Warning:
        The structure is not validated here. Pass the result to
        [RegistryConfig][zwnotify.core.registry.RegistryConfig].
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
