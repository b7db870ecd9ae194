"""Unit tests for core.resources module."""

from pathlib import Path

import pytest

from zwnotify.core.resources import DirectoryResourceProvider, ResourceProvider


class TestResourceProvider:
    """ResourceProvider is abstract."""

    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            ResourceProvider()  # type: ignore[abstract]


class TestDirectoryResourceProvider:
    """Filesystem-backed provider."""

    def test_config_dir_is_path(self) -> None:
        provider = DirectoryResourceProvider("config")
        assert provider.config_dir == Path("config")
        assert repr(provider) == "DirectoryResourceProvider('config')"

    def test_path_for(self, tmp_path: Path) -> None:
        provider = DirectoryResourceProvider(tmp_path)
        assert provider.path_for("notifications.json") == tmp_path / "notifications.json"

    @pytest.mark.parametrize("name", ["", "../secret.json", "nested/defs.json"])
    def test_path_for_rejects_non_bare_names(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(ValueError, match="bare file name"):
            DirectoryResourceProvider(tmp_path).path_for(name)

    async def test_exists(self, definition_dir: Path) -> None:
        provider = DirectoryResourceProvider(definition_dir)
        assert await provider.exists("notifications.json") is True
        assert await provider.exists("missing.json") is False

    async def test_directory_is_not_a_resource(self, tmp_path: Path) -> None:
        (tmp_path / "notifications.json").mkdir()
        assert await DirectoryResourceProvider(tmp_path).exists("notifications.json") is False

    async def test_read_text(self, definition_dir: Path, water_json: str) -> None:
        provider = DirectoryResourceProvider(definition_dir)
        assert await provider.read_text("notifications.json") == water_json

    async def test_read_text_utf8(self, tmp_path: Path) -> None:
        (tmp_path / "defs.json").write_text('{"label": "Température"}', encoding="utf-8")
        text = await DirectoryResourceProvider(tmp_path).read_text("defs.json")
        assert "Température" in text

    async def test_read_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await DirectoryResourceProvider(tmp_path).read_text("missing.json")
