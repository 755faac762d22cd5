import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_PATH_ENV = "RECEIPT_POINTS_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseModel):
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    config_path = config_path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH

    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", os.path.basename(config_path))

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            # A list or scalar document is reported by pydantic like any bad value
            return AppConfig.model_validate(data)
        # Treat empty sections ("web:" with no keys) as absent
        data = {key: value for key, value in data.items() if value is not None}

    # Allow env var overrides for the web server
    env_host = os.environ.get("WEB_HOST")
    if env_host:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['host'] = env_host

    env_port = os.environ.get("WEB_PORT")
    if env_port:
        if data.get('web') is None:
            data['web'] = {}
        data['web']['port'] = env_port

    # Allow env var override for log level
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if data.get('logging') is None:
            data['logging'] = {}
        data['logging']['level'] = env_log_level

    return AppConfig(**data)
