"""Tests for bidsort.core.config."""

import json
import os

import pytest
import yaml

from bidsort.core.config import Config
from bidsort.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    """Keep stray BIDSORT_* variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("BIDSORT_"):
            monkeypatch.delenv(key)


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("paths.csv_path") == "eBid_Monthly_Sales.csv"
        assert config.get("loader.currency_symbol") == "$"
        assert config.get("loader.delimiter") == ","
        assert config.get("logging.level") == "WARNING"
        assert config.get("logging.file") is None

    def test_default_columns(self):
        assert Config().get_columns() == {"title": 0, "bid_id": 1, "amount": 4, "fund": 8}

    def test_yaml_config_file(self, tmp_config_file, tmp_dir):
        config = Config(config_file=tmp_config_file)
        assert config.get("paths.csv_path") == os.path.join(tmp_dir, "bids.csv")
        assert config.get("logging.level") == "ERROR"
        # untouched defaults survive the merge
        assert config.get("loader.encoding") == "utf-8"

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"loader": {"delimiter": ";"}}, f)

        config = Config(config_file=config_path)
        assert config.get("loader.delimiter") == ";"

    def test_missing_config_file_raises(self, tmp_dir):
        with pytest.raises(ConfigurationError, match="not found"):
            Config(config_file=os.path.join(tmp_dir, "nope.yaml"))

    def test_invalid_yaml_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "broken.yaml")
        with open(config_path, "w") as f:
            f.write("loader: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            Config(config_file=config_path)

    def test_non_mapping_file_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "list.yaml")
        with open(config_path, "w") as f:
            yaml.dump(["a", "b"], f)
        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_file=config_path)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BIDSORT_LOADER__CURRENCY_SYMBOL", "€")
        config = Config()
        assert config.get("loader.currency_symbol") == "€"

    def test_env_overrides_file(self, tmp_config_file, monkeypatch):
        monkeypatch.setenv("BIDSORT_LOGGING__LEVEL", "DEBUG")
        config = Config(config_file=tmp_config_file)
        assert config.get("logging.level") == "DEBUG"

    def test_custom_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_PATHS__CSV_PATH", "other.csv")
        config = Config(env_prefix="MYAPP_")
        assert config.get("paths.csv_path") == "other.csv"

    def test_get_missing_key(self):
        config = Config()
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self):
        config = Config()
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_extra_defaults(self):
        config = Config(defaults={"custom": {"key": "value"}})
        assert config.get("custom.key") == "value"


class TestGetColumns:
    def test_env_values_coerced_to_int(self, monkeypatch):
        monkeypatch.setenv("BIDSORT_LOADER__COLUMNS__FUND", "7")
        assert Config().get_columns()["fund"] == 7

    def test_non_integer_raises(self):
        config = Config()
        config.set("loader.columns.title", "first")
        with pytest.raises(ConfigurationError, match="must be an integer"):
            config.get_columns()

    def test_negative_raises(self):
        config = Config()
        config.set("loader.columns.amount", -1)
        with pytest.raises(ConfigurationError, match="must not be negative"):
            config.get_columns()

    def test_missing_field_raises(self):
        config = Config()
        config.set("loader.columns", {"title": 0, "bid_id": 1, "amount": 4})
        with pytest.raises(ConfigurationError, match="missing 'fund'"):
            config.get_columns()

    def test_not_a_mapping_raises(self):
        config = Config()
        config.set("loader.columns", "0,1,4,8")
        with pytest.raises(ConfigurationError, match="mapping"):
            config.get_columns()
