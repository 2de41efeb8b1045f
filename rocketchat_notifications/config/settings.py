"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # RocketChat API Configuration
    ROCKETCHAT_URL: str = os.getenv("ROCKETCHAT_URL", "")
    ROCKETCHAT_TOKEN: str = os.getenv("ROCKETCHAT_TOKEN", "")
    ROCKETCHAT_USER_ID: str = os.getenv("ROCKETCHAT_USER_ID", "")
    ROCKETCHAT_CHANNEL: str = os.getenv("ROCKETCHAT_CHANNEL", "")
    ROCKETCHAT_EMOJI: str = os.getenv("ROCKETCHAT_EMOJI", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Monitoring
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "false").lower() == "true"
    METRICS_PORT: int = int(os.getenv("METRICS_PORT", "9100"))

    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        required_vars = [
            ("ROCKETCHAT_URL", cls.ROCKETCHAT_URL),
            ("ROCKETCHAT_TOKEN", cls.ROCKETCHAT_TOKEN),
            ("ROCKETCHAT_USER_ID", cls.ROCKETCHAT_USER_ID),
        ]

        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    ROCKETCHAT_URL = "http://localhost:3000"
    ENABLE_METRICS = False


def get_config(env: Optional[str] = None) -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = (env or os.getenv("APP_ENV", "development")).lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
