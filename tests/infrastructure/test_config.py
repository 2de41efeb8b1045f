"""Tests for configuration, logging setup and metrics exposure."""

import logging
from unittest.mock import patch

import pytest

from rocketchat_notifications.config import configure_logging
from rocketchat_notifications.config import settings
from rocketchat_notifications.infrastructure import metrics


class CompleteConfig(settings.Config):
    ROCKETCHAT_URL = "https://chat.example.com"
    ROCKETCHAT_TOKEN = "secret"
    ROCKETCHAT_USER_ID = "bot-id"


class EmptyConfig(settings.Config):
    ROCKETCHAT_URL = ""
    ROCKETCHAT_TOKEN = ""
    ROCKETCHAT_USER_ID = ""


class TestConfig:
    def test_validate_passes_when_complete(self):
        CompleteConfig.validate()

    def test_validate_lists_missing_variables(self):
        with pytest.raises(ValueError) as exc_info:
            EmptyConfig.validate()
        message = str(exc_info.value)
        assert "ROCKETCHAT_URL" in message
        assert "ROCKETCHAT_TOKEN" in message
        assert "ROCKETCHAT_USER_ID" in message

    def test_channel_is_optional(self):
        class NoChannel(CompleteConfig):
            ROCKETCHAT_CHANNEL = ""

        NoChannel.validate()

    @pytest.mark.parametrize("env,expected", [
        ("development", settings.DevelopmentConfig),
        ("production", settings.ProductionConfig),
        ("testing", settings.TestingConfig),
        ("TESTING", settings.TestingConfig),
        ("unknown", settings.DevelopmentConfig),
    ])
    def test_get_config(self, env, expected):
        assert settings.get_config(env) is expected

    def test_get_config_reads_app_env(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        assert settings.get_config() is settings.ProductionConfig


class TestLogging:
    def test_configure_logging_sets_level(self):
        configure_logging(logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_accepts_level_name(self):
        configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG


class TestMetricsServer:
    def test_disabled_by_default_in_testing(self):
        with patch.object(metrics, "Config", settings.TestingConfig), \
                patch.object(metrics, "start_http_server") as start:
            assert metrics.start_metrics_server() is False
        start.assert_not_called()

    def test_started_when_enabled(self):
        class MetricsConfig(settings.Config):
            ENABLE_METRICS = True
            METRICS_PORT = 9200

        with patch.object(metrics, "Config", MetricsConfig), \
                patch.object(metrics, "start_http_server") as start:
            assert metrics.start_metrics_server() is True
        start.assert_called_once_with(9200)
