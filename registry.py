"""
registry.py

Immutable view over the pipeline configuration in config.py. Components take a
PipelineConfig instead of importing the module globals, so the values they see
cannot change after start-up.
"""

from __future__ import annotations

from dataclasses import dataclass

import config
from config import CONFIG_KEYS, REQUIRED_KEYS


class ConfigurationError(Exception):
    """Base class for configuration problems."""


class MissingConfigurationError(ConfigurationError):
    """A required identifier is empty or absent."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing required configuration: {', '.join(self.missing)}. "
            "Set them in config.py or as environment variables before deploying."
        )


class UnknownConfigurationKeyError(ConfigurationError, KeyError):
    """A key outside CONFIG_KEYS was requested."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown configuration key {key!r}. Known keys: {', '.join(CONFIG_KEYS)}")

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class PipelineConfig:
    project_id: str
    schema_name: str
    remote_connection: str
    translation_remote_service_type: str
    text_llm_endpoint: str
    embedding_remote_service_type: str
    sentiment_analysis_prompt: str

    def get(self, key: str) -> str:
        """Returns the value stored under an upper-case key such as 'PROJECT_ID'."""
        if key not in CONFIG_KEYS:
            raise UnknownConfigurationKeyError(key)
        return getattr(self, key.lower())

    def as_dict(self) -> dict[str, str]:
        return {key: self.get(key) for key in CONFIG_KEYS}

    def missing_keys(self) -> list[str]:
        return [key for key in REQUIRED_KEYS if not self.get(key).strip()]

    def validate(self) -> "PipelineConfig":
        """
        Fails fast when a required identifier is still an empty placeholder,
        so empty ids never reach a BigQuery or Vertex AI call.
        """
        missing = self.missing_keys()
        if missing:
            raise MissingConfigurationError(missing)
        return self


def load_config(validate: bool = False) -> PipelineConfig:
    """Builds a PipelineConfig from the values config.py was loaded with."""
    cfg = PipelineConfig(**{key.lower(): getattr(config, key) for key in CONFIG_KEYS})
    if validate:
        cfg.validate()
    return cfg


def get(key: str) -> str:
    return load_config().get(key)
