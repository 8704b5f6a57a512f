"""
Application Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from recommender.errors import ConfigError
from recommender.models.config import DEFAULT_CONFIG, RecommenderConfig

BASE_DIR = Path(__file__).resolve().parent.parent

# Single .env at the project root
_root_env = BASE_DIR / ".env"
if _root_env.exists():
    load_dotenv(_root_env)


@dataclass
class AppConfig:
    """Application configuration."""

    # Catalog: header line + "device name, charging time, OS" lines
    catalog_path: Path = BASE_DIR / "data" / "smartphones.csv"

    # Optional JSON file with classifier and session settings (see RecommenderConfig.from_dict)
    recommender_config_path: Optional[Path] = None

    # Root logger level name
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables."""

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        log_level = os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Unknown LOG_LEVEL: {log_level!r}")

        return cls(
            catalog_path=_path_env("CATALOG_PATH", BASE_DIR / "data" / "smartphones.csv"),
            recommender_config_path=_path_env("RECOMMENDER_CONFIG_PATH"),
            log_level=log_level,
        )

    def load_recommender_config(self) -> RecommenderConfig:
        """
        Recommender settings from recommender_config_path, or defaults when unset.

        Raises:
            ConfigError: If the file can't be read, isn't JSON, or has invalid values
        """
        if self.recommender_config_path is None:
            return DEFAULT_CONFIG
        try:
            with open(self.recommender_config_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(
                f"Cannot read recommender settings {self.recommender_config_path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(
                f"Recommender settings {self.recommender_config_path} must be a JSON object"
            )
        try:
            return RecommenderConfig.from_dict(data)
        except (ValidationError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid recommender settings: {e}") from e


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
