"""Configuration management for inkcheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from inkcheck.errors import ConfigError

CONFIG_FILE_NAME = ".inkcheck.json"
SUPPORTED_LANGUAGES = ("en", "ja")


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidatorConfig(BaseModel):
    """A single configured validator and its string attributes."""
    name: str
    attributes: dict[str, str] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("validator name must not be empty")
        return v

    @field_validator("attributes", mode="before")
    @classmethod
    def stringify_attributes(cls, v):
        if isinstance(v, dict):
            return {str(key): str(value) for key, value in v.items()}
        return v

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def get_int(self, name: str, default: int) -> int:
        value = self.attributes.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigError(f"Attribute '{name}' of validator {self.name} must be an integer, got: {value}")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class InkcheckConfig(BaseModel):
    """Complete inkcheck configuration model."""
    lang: str = "en"
    validators: list[ValidatorConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("lang")
    @classmethod
    def validate_lang(cls, v):
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"lang must be one of {list(SUPPORTED_LANGUAGES)}, got: {v}")
        return v

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def get_validator(self, name: str) -> ValidatorConfig | None:
        """Return the first validator configured under ``name``."""
        for validator in self.validators:
            if validator.name == name:
                return validator
        return None


def load_config(config_path: str | Path | None = None) -> InkcheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .inkcheck.json

    Returns:
        InkcheckConfig: Loaded and validated configuration

    Raises:
        ConfigError: If the file specified cannot be read or is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

    if config_path is None:
        return create_default_config()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}")

    try:
        return InkcheckConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .inkcheck.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> InkcheckConfig:
    """Create the zero-config validator set.

    Script plugins are opt-in so that running inkcheck in an arbitrary
    directory never creates a plugin directory there.
    """
    return InkcheckConfig(
        validators=[
            ValidatorConfig(name="SentenceLength"),
            ValidatorConfig(name="EndOfSentence"),
            ValidatorConfig(name="EmptySection"),
        ]
    )
