"""Tests for settings and logging setup."""

import logging

import pytest

from src.config import Settings, settings, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    def test_list_properties_split_and_strip(self):
        s = Settings(cors_origins="https://a.com, https://b.com,", trusted_hosts="api.example.com")
        assert s.cors_origins_list == ["https://a.com", "https://b.com"]
        assert s.trusted_hosts_list == ["api.example.com"]

    def test_defaults_allow_any_origin_and_host(self):
        s = Settings(_env_file=None)
        assert s.cors_origins_list == ["*"]
        assert s.trusted_hosts_list == ["*"]
        assert s.rate_limit_validate == "20/minute"


class TestSetupLogging:
    def test_creates_rotating_log_files(self, tmp_path, monkeypatch, restore_root_logger):
        monkeypatch.setattr(settings, "log_dir", str(tmp_path / "logs"))
        monkeypatch.setattr(settings, "log_level", "debug")

        setup_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 3
        assert (tmp_path / "logs" / "app.log").exists()
        assert (tmp_path / "logs" / "error.log").exists()

    def test_unknown_level_falls_back_to_info(self, tmp_path, monkeypatch, restore_root_logger):
        monkeypatch.setattr(settings, "log_dir", str(tmp_path))
        monkeypatch.setattr(settings, "log_level", "chatty")

        setup_logging()

        assert logging.getLogger().level == logging.INFO
