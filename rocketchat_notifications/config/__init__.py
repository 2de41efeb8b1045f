"""Configuration module."""
from rocketchat_notifications.config.settings import Config, get_config, DevelopmentConfig, ProductionConfig, TestingConfig
from rocketchat_notifications.config.logging_config import configure_logging

__all__ = ["Config", "get_config", "DevelopmentConfig", "ProductionConfig", "TestingConfig", "configure_logging"]
