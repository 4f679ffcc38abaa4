"""
streamtopics - configuration validation

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from streamtopics.constants import DEFAULT_ADDITIONAL_RETENTION_MS
from streamtopics.errors import InvalidConfiguration

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
LOG_HANDLERS = ("stderr", "stdout", "systemd")


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="streamtopics_", env_ignore_empty=True, env_nested_delimiter="__")

    # Extra time changelog records of windowed stores are kept after their window closes.
    additional_retention_ms: int = DEFAULT_ADDITIONAL_RETENTION_MS
    topic_defaults: dict[str, str] = Field(default_factory=dict)
    # Planned properties are written to stdout, so logs go to stderr unless told otherwise.
    log_handler: str | None = "stderr"
    log_level: str = "INFO"
    log_format: str = "%(name)-20s\t%(threadName)s\t%(levelname)-8s\t%(message)s"

    def set_config_defaults(self, new_config: Mapping[str, object] | None = None) -> Config:
        config = deepcopy(self)
        if new_config:
            for key, value in new_config.items():
                setattr(config, key, value)

        validate_config(config)
        return config


def validate_config(config: Config) -> None:
    if config.additional_retention_ms < 0:
        raise InvalidConfiguration(
            f"Invalid additional_retention_ms {config.additional_retention_ms}, must not be negative"
        )
    if config.log_level.upper() not in LOG_LEVELS:
        raise InvalidConfiguration(f"Invalid log_level {config.log_level!r}, must be one of {', '.join(LOG_LEVELS)}")
    if config.log_handler is not None and config.log_handler not in LOG_HANDLERS:
        raise InvalidConfiguration(
            f"Invalid log_handler {config.log_handler!r}, must be one of {', '.join(LOG_HANDLERS)}"
        )
