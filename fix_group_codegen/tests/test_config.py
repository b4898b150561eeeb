"""
Tests for configuration loading and SRC_DIR resolution.
"""

from __future__ import annotations

import json

import pytest

from fix_group_codegen.pipeline.config import (
    CodeGeneratorConfig,
    ConfigError,
    ConfigOrigin,
    SourceDirSetting,
    load_config,
    resolve_source_dir,
)


class TestResolveSourceDir:
    def test_environment_wins(self):
        setting = resolve_source_dir({"SRC_DIR": "/env"}, {"SRC_DIR": "/prop"})
        assert setting == SourceDirSetting("/env", ConfigOrigin.ENVIRONMENT)

    def test_property_when_environment_missing(self):
        setting = resolve_source_dir({}, {"SRC_DIR": "/prop"})
        assert setting.value == "/prop"
        assert setting.origin is ConfigOrigin.PROPERTY

    def test_unset(self):
        setting = resolve_source_dir({}, {})
        assert not setting.is_set
        assert setting.origin is ConfigOrigin.UNSET

    def test_empty_values_count_as_unset(self):
        setting = resolve_source_dir({"SRC_DIR": ""}, {"SRC_DIR": None})
        assert not setting.is_set

    def test_no_arguments(self):
        assert resolve_source_dir() == SourceDirSetting()


class TestCodeGeneratorConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.package_root == "com.globalforge.infix.qfix"
        assert config.file_extension == "java"
        assert config.encoding == "UTF-8"
        assert not config.source_dir.is_set

    def test_from_dict_treats_source_dir_as_property(self):
        config = CodeGeneratorConfig.from_dict({"source_dir": "/out", "package_root": "org.example", "unknown": 1})
        assert config.source_dir == SourceDirSetting("/out", ConfigOrigin.PROPERTY)
        assert config.package_root == "org.example"
        assert not hasattr(config, "unknown")

    def test_to_dict_roundtrip(self):
        config = CodeGeneratorConfig.from_dict({"source_dir": "/out", "file_extension": "txt"})
        again = CodeGeneratorConfig.from_dict(config.to_dict())
        assert again == config


class TestLoadConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"source_dir": str(tmp_path), "group_manager_base": "GroupMgr"}))

        config = load_config(path)
        assert config.source_dir.value == str(tmp_path)
        assert config.group_manager_base == "GroupMgr"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(path)
