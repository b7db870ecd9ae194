"""
Pytest configuration and shared fixtures for zwnotify tests.

Provides:
- An in-memory ResourceProvider for registry tests
- Sample definition documents and files
"""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from zwnotify.core.resources import ResourceProvider


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Resource Providers
# ============================================================================


class MemoryResourceProvider(ResourceProvider):
    """ResourceProvider backed by a dict, counting every read."""

    def __init__(self, resources: dict[str, str] | None = None) -> None:
        self.resources = dict(resources or {})
        self.reads = 0

    async def exists(self, name: str) -> bool:
        return name in self.resources

    async def read_text(self, name: str) -> str:
        self.reads += 1
        return self.resources[name]


@pytest.fixture
def memory_provider() -> type[MemoryResourceProvider]:
    """The in-memory provider class (instantiate with a resources dict)."""
    return MemoryResourceProvider


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def water_definition() -> dict[str, Any]:
    """Single water notification with one variable and no events."""
    return {
        "0x6": {
            "name": "Water",
            "variables": [
                {
                    "name": "Leak detected",
                    "states": {"0x1": {"label": "Leak"}, "0x2": {"label": "No leak"}},
                }
            ],
        }
    }


@pytest.fixture
def alarm_definition() -> dict[str, Any]:
    """Notification with overlapping event/state ids and several variables."""
    return {
        "0x07": {
            "name": "Home Security",
            "variables": [
                {
                    "name": "Sensor status",
                    "states": {
                        "0x02": {"label": "Intrusion"},
                        "0x05": {"label": "Glass breakage"},
                    },
                },
                {
                    "name": "Cover status",
                    "idle": False,
                    "states": {
                        "0x03": {
                            "label": "Tampering",
                            "description": "Product cover removed",
                        },
                        "0x02": {"label": "Shadowed by first variable"},
                    },
                },
            ],
            "events": {
                "0x05": {"label": "Impact detected", "description": "Something hit the sensor"},
                "0x0A": {"label": "Unknown event"},
            },
        }
    }


@pytest.fixture
def water_json(water_definition: dict[str, Any]) -> str:
    """The water definition serialized as JSON text."""
    return json.dumps(water_definition)


@pytest.fixture
def definition_dir(tmp_path: Path, water_json: str) -> Path:
    """A config directory holding notifications.json with the water definition."""
    (tmp_path / "notifications.json").write_text(water_json, encoding="utf-8")
    return tmp_path
