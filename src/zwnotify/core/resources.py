"""Text resource access for definition files.

The registry never touches the filesystem directly. It asks a
[ResourceProvider][zwnotify.core.resources.ResourceProvider] whether a
logical resource (e.g. ``"notifications.json"``) exists and for its text.
[DirectoryResourceProvider][zwnotify.core.resources.DirectoryResourceProvider]
resolves names inside a configuration directory; tests and embedding hosts
can supply their own provider.

Examples:
    ```python
    provider = DirectoryResourceProvider("config")
    if await provider.exists("notifications.json"):
        text = await provider.read_text("notifications.json")
    ```
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path


class ResourceProvider(ABC):
    """Source of named text resources."""

    @abstractmethod
    async def exists(self, name: str) -> bool:
        """Return whether the resource *name* exists."""
        ...

    @abstractmethod
    async def read_text(self, name: str) -> str:
        """Return the full text of the resource *name*.

        Raises:
            FileNotFoundError: If the resource does not exist.
        """
        ...


class DirectoryResourceProvider(ResourceProvider):
    """Reads resources as UTF-8 files from a configuration directory.

    Blocking filesystem calls are offloaded with ``asyncio.to_thread()`` so
    a slow disk does not stall the event loop.

    Attributes:
        config_dir: Directory the resource names are resolved against.
    """

    def __init__(self, config_dir: str | Path) -> None:
        self.config_dir = Path(config_dir)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.config_dir)!r})"

    def path_for(self, name: str) -> Path:
        """Resolve *name* to a path inside the configuration directory.

        Raises:
            ValueError: If *name* is not a bare file name.
        """
        if not name or Path(name).name != name:
            raise ValueError(f"resource name must be a bare file name, got {name!r}")
        return self.config_dir / name

    async def exists(self, name: str) -> bool:
        return await asyncio.to_thread(self.path_for(name).is_file)

    async def read_text(self, name: str) -> str:
        return await asyncio.to_thread(self.path_for(name).read_text, encoding="utf-8")
