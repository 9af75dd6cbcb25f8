"""
Configuration for the superheroes services.

Defaults live on the Settings dataclass; environment variables prefixed with
SUPERHEROES_ override them (e.g. SUPERHEROES_PORT=8080).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

ENV_PREFIX = "SUPERHEROES_"

PROJECT_ROOT = Path(__file__).parent.parent


def default_data_file() -> Path:
    """Bundled dataset, relative to the project root."""
    return PROJECT_ROOT / "data" / "superheroes.json"


@dataclass
class Settings:
    """Service configuration."""

    # Dataset
    DATA_FILE: Path = field(default_factory=default_data_file)

    # HTTP server
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    DEBUG: bool = False
    CORS_ORIGINS: list[str] = field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        """Load overrides from environment variables."""
        for key, field_def in self.__dataclass_fields__.items():
            env_value = os.getenv(f"{ENV_PREFIX}{key}")
            if env_value is None:
                continue
            field_type = field_def.type
            if field_type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif field_type == int:
                setattr(self, key, int(env_value))
            elif field_type == Path:
                setattr(self, key, Path(env_value))
            elif field_type == list[str]:
                setattr(self, key, [item.strip() for item in env_value.split(",") if item.strip()])
            else:
                setattr(self, key, env_value)


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()


def get_data_file() -> Path:
    """Get the dataset path."""
    return get_settings().DATA_FILE
