"""Tests for config module."""

from pathlib import Path
import sys

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lcrparams.config import Config, RuntimeConfig, load_config, save_config
from lcrparams.exceptions import ConfigurationError
from lcrparams.resources import get_default_config


class TestRuntimeConfig:
    """Test cases for RuntimeConfig."""

    def test_runtime_config_defaults(self):
        config = RuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_log_level_value(self):
        import logging

        assert RuntimeConfig(log_level="debug").log_level_value == logging.DEBUG


class TestConfig:
    """Test cases for main Config class."""

    def test_config_defaults(self):
        config = Config()
        assert config.default_target_length == 15
        assert config.missing_length == "default"
        assert isinstance(config.runtime, RuntimeConfig)

    def test_defaults_validate(self):
        Config().validate()

    def test_invalid_missing_length(self):
        with pytest.raises(ConfigurationError, match="missing_length"):
            Config(missing_length="guess").validate()

    @pytest.mark.parametrize("length", [4, 301, -1])
    def test_default_length_out_of_range(self, length):
        with pytest.raises(ConfigurationError, match="default_target_length"):
            Config(default_target_length=length).validate()

    def test_default_length_must_be_integer(self):
        with pytest.raises(ConfigurationError, match="integer"):
            Config(default_target_length="15").validate()

    def test_invalid_log_level(self):
        config = Config()
        config.runtime.log_level = "LOUD"
        with pytest.raises(ConfigurationError, match="log_level"):
            config.validate()

    def test_to_dict(self):
        config = Config()
        config.runtime.log_file = Path("/tmp/lcr.log")
        data = config.to_dict()
        assert data["default_target_length"] == 15
        assert data["runtime"]["log_file"] == "/tmp/lcr.log"


class TestLoadConfig:
    """Test cases for load_config / save_config."""

    def test_load_partial(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("missing_length: sentinel\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.missing_length == "sentinel"
        assert cfg.default_target_length == 15

    def test_load_runtime(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text(
            "default_target_length: 30\nruntime:\n  log_level: INFO\n  log_file: run.log\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.default_target_length == 30
        assert cfg.runtime.log_level == "INFO"
        assert cfg.runtime.log_file == Path("run.log")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == Config()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("threads: 8\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="threads"):
            load_config(path)

    def test_unknown_runtime_key(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("runtime:\n  colour: true\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="runtime.colour"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("runtime: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(tmp_path / "nope.yaml")

    def test_save_then_load(self, tmp_path):
        cfg = Config(default_target_length=40, missing_length="sentinel")
        path = tmp_path / "saved.yaml"
        save_config(cfg, path)
        assert yaml.safe_load(path.read_text(encoding="utf-8"))["missing_length"] == "sentinel"
        assert load_config(path) == cfg

    def test_default_template_loads_as_defaults(self, tmp_path):
        path = tmp_path / "template.yaml"
        path.write_text(get_default_config(), encoding="utf-8")
        cfg = load_config(path)
        assert cfg == Config()
        cfg.validate()

    def test_template_with_overrides(self, tmp_path):
        path = tmp_path / "template.yaml"
        path.write_text(get_default_config(120, "sentinel"), encoding="utf-8")
        assert load_config(path) == Config(default_target_length=120, missing_length="sentinel")
