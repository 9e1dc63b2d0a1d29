import os
from pathlib import Path

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    YamlConfigSettingsSource,
)
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)

# Environment variable naming the YAML file with deployment overrides
CONFIG_FILE_ENV = "MYBLOG_CONFIG"
DEFAULT_CONFIG_FILE = "config.yml"


class Settings(BaseSettings):
    """Application settings.

    Sources, highest priority first: init kwargs, environment, .env files,
    the YAML file named by ``MYBLOG_CONFIG`` (default ``config.yml``, skipped
    when absent), then the defaults below. Every source goes through field
    validation, so ``port: "9000"`` in YAML still yields an int.
    """

    app_title: str = "MyBlog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False                     # uvicorn auto-reload, for local development only

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "myblog"
    mongodb_timeout_ms: int = 5000

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_mongodb: str = "WARNING"       # pymongo driver internals
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # CRUD repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE),
            yaml_file_encoding="utf-8",
        )
        return init_settings, env_settings, dotenv_settings, yaml_settings, file_secret_settings


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads the environment and the config file once."""
    return Settings()
