#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests configuration loading from environment variables and path resolution.
"""

import logging
from pathlib import Path

import pytest

from wallet.core.config import (
    DEFAULT_LEDGER_FILE,
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_ledger_path,
    is_development,
    is_production,
    is_test,
    reload_config,
)


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_config_loads_test_environment(self, data_dir):
        config = get_config()

        assert config.environment == Environment.TEST
        assert config.data_dir == data_dir
        assert config.ledger_file == DEFAULT_LEDGER_FILE

    def test_ledger_path_is_inside_data_dir(self, ledger_path):
        assert get_ledger_path() == ledger_path
        assert get_data_dir() == ledger_path.parent

    def test_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_picks_up_environment_changes(self, monkeypatch):
        get_config()
        monkeypatch.setenv("WALLET_LEDGER_FILE", "ledger.txt")

        config = reload_config()

        assert config.ledger_file == "ledger.txt"
        assert config.ledger_path.name == "ledger.txt"

    def test_environment_detection_functions(self):
        assert is_test() is True
        assert is_development() is False
        assert is_production() is False

    def test_data_dir_is_not_created_by_loading_config(self, tmp_path, monkeypatch):
        target = tmp_path / "nested" / "wallet"
        monkeypatch.setenv("WALLET_DATA_DIR", str(target))

        config = get_config()

        assert config.data_dir == target
        assert not target.exists()

    def test_log_level_and_debug(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("DEBUG", "true")

        config = get_config()

        assert config.log_level == "WARNING"
        assert config.debug is True
        assert logging.getLogger("wallet").level == logging.DEBUG


@pytest.mark.integration
class TestConfigValidation:
    """Test validation errors."""

    def test_valid_config_has_no_errors(self, data_dir):
        config = Config(environment=Environment.TEST, data_dir=data_dir)
        assert config.validate() == []

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            get_config()

    def test_empty_ledger_file(self, monkeypatch):
        monkeypatch.setenv("WALLET_LEDGER_FILE", "  ")

        with pytest.raises(ValueError, match="WALLET_LEDGER_FILE"):
            get_config()

    def test_ledger_file_must_not_be_a_path(self, data_dir):
        config = Config(environment=Environment.TEST, data_dir=data_dir, ledger_file="sub/ledger.txt")

        errors = config.validate()

        assert len(errors) == 1
        assert "not a path" in errors[0]

    def test_missing_data_dir_is_valid(self, tmp_path):
        config = Config(environment=Environment.TEST, data_dir=tmp_path / "missing")
        assert config.validate() == []

    def test_data_dir_that_is_a_file(self, tmp_path):
        not_a_dir = tmp_path / "wallet_data"
        not_a_dir.write_text("")
        config = Config(environment=Environment.TEST, data_dir=not_a_dir)

        assert any("data_dir is not a directory" in error for error in config.validate())

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("WALLET_ENV", "staging")

        with pytest.raises(ValueError):
            get_config()

    def test_to_dict(self, data_dir):
        config = Config(environment=Environment.PRODUCTION, data_dir=data_dir)

        result = config.to_dict()

        assert result["environment"] == "production"
        assert result["data_dir"] == str(data_dir)
        assert result["ledger_path"] == str(Path(data_dir) / DEFAULT_LEDGER_FILE)
