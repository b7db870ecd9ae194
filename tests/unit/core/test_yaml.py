"""Unit tests for core.yaml.load_yaml()."""

from pathlib import Path

import pytest
import yaml

from zwnotify.core.yaml import load_yaml


class TestLoadYaml:
    """load_yaml() with registry configuration files."""

    def test_registry_config(self, tmp_path: Path):
        yaml_file = tmp_path / "zwnotify.yaml"
        yaml_file.write_text("config_dir: /etc/zwnotify\nfilename: defs.json\nmetrics: true\n")

        assert load_yaml(str(yaml_file)) == {
            "config_dir": "/etc/zwnotify",
            "filename": "defs.json",
            "metrics": True,
        }

    def test_empty_file(self, tmp_path: Path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert load_yaml(str(yaml_file)) == {}

    def test_comments_only(self, tmp_path: Path):
        yaml_file = tmp_path / "comments.yaml"
        yaml_file.write_text("# nothing here\n")
        assert load_yaml(str(yaml_file)) == {}

    def test_file_not_found(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path: Path):
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("key: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(str(yaml_file))

    def test_python_tags_rejected(self, tmp_path: Path):
        yaml_file = tmp_path / "unsafe.yaml"
        yaml_file.write_text("value: !!python/object/apply:os.system ['true']\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(str(yaml_file))
