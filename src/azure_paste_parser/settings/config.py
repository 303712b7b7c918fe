"""Azure configuration record and its YAML persistence."""

import logging
from datetime import date
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, model_validator

logger = logging.getLogger(__name__)

DEFAULT_CHAT_DEPLOYMENT = "gpt-4.1"
DEFAULT_SUMMARY_DEPLOYMENT = "gpt-4.1"
DEFAULT_TRANSCRIPTION_DEPLOYMENT = "whisper"
DEFAULT_CHAT_API_VERSION = "2025-01-01-preview"
DEFAULT_TRANSCRIPTION_API_VERSION = "2024-06-01"
DEFAULT_API_KEY_REF = "azure-openai-api-key"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""


class AzureConfig(BaseModel):
    """Connection settings for an Azure OpenAI resource."""

    endpoint: str = ""
    chat_api_version: str = DEFAULT_CHAT_API_VERSION
    transcription_api_version: str = DEFAULT_TRANSCRIPTION_API_VERSION
    api_key_ref: str = DEFAULT_API_KEY_REF  # keychain item name, never the key
    transcription_deployment: str = DEFAULT_TRANSCRIPTION_DEPLOYMENT
    summary_deployment: str = DEFAULT_SUMMARY_DEPLOYMENT
    chat_deployment: str = DEFAULT_CHAT_DEPLOYMENT

    @model_validator(mode="before")
    @classmethod
    def _normalize_input(cls, data):
        if not isinstance(data, dict):
            return data
        # YAML reads unquoted 2024-06-01 as a date.
        data = {k: v.isoformat() if isinstance(v, date) else v for k, v in data.items()}
        # Older files carried one api_version for both call types.
        legacy = data.pop("api_version", None)
        if legacy:
            data.setdefault("chat_api_version", legacy)
            data.setdefault("transcription_api_version", legacy)
        return data


def load_config(path: Path) -> AzureConfig:
    """Load an AzureConfig from YAML, falling back to defaults if missing."""
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return AzureConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return AzureConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    try:
        return AzureConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def save_config(config: AzureConfig, path: Path) -> None:
    """Write an AzureConfig to YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(config.model_dump(), sort_keys=False), encoding="utf-8")
    logger.debug("Saved config to %s", path)
