"""
streamtopics - internal topic planning cli

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic_settings import BaseSettings, JsonConfigSettingsSource, PydanticBaseSettingsSource
from streamtopics.config import Config, validate_config
from streamtopics.errors import InternalTopicError
from streamtopics.logging_setup import configure_logging, log_config
from streamtopics.planning import topic_properties
from streamtopics.topic_config import (
    InternalTopicConfig,
    InternalTopicConfigType,
    RepartitionTopicConfig,
    UnwindowedUnversionedChangelogTopicConfig,
    VersionedChangelogTopicConfig,
    WindowedChangelogTopicConfig,
)

import argparse
import contextlib
import json
import logging
import sys

logger = logging.getLogger(__name__)


class TopicDefinition(BaseModel):
    """One entry of the topics file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    type: InternalTopicConfigType
    overrides: dict[str, str] = Field(default_factory=dict)
    window_size_ms: int | None = None
    history_retention_ms: int | None = None
    number_of_partitions: int | None = None
    enforce_number_of_partitions: bool = False

    def to_topic_config(self) -> InternalTopicConfig:
        partitions = {
            "number_of_partitions": self.number_of_partitions,
            "enforce_number_of_partitions": self.enforce_number_of_partitions,
        }
        match self.type:
            case InternalTopicConfigType.REPARTITION:
                return RepartitionTopicConfig(self.name, self.overrides, **partitions)
            case InternalTopicConfigType.UNWINDOWED_UNVERSIONED_CHANGELOG:
                return UnwindowedUnversionedChangelogTopicConfig(self.name, self.overrides, **partitions)
            case InternalTopicConfigType.WINDOWED_CHANGELOG:
                return WindowedChangelogTopicConfig(self.name, self.overrides, self.window_size_ms, **partitions)
            case InternalTopicConfigType.VERSIONED_CHANGELOG:
                return VersionedChangelogTopicConfig(self.name, self.overrides, self.history_retention_ms, **partitions)
        raise NotImplementedError(f"Unknown topic type: {self.type!r}")


_TOPIC_DEFINITIONS = TypeAdapter(list[TopicDefinition])


def load_topic_configs(location: Path) -> list[InternalTopicConfig]:
    definitions = _TOPIC_DEFINITIONS.validate_json(location.read_bytes())
    return [definition.to_topic_config() for definition in definitions]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the broker configuration of internal topics")
    parser.add_argument("--topics", type=Path, required=True, help="JSON file listing the internal topics")
    parser.add_argument("--config", type=Path, help="Configuration file path, environment variables are used if omitted")
    parser.add_argument("--verbose", default=False, action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def get_config(args: argparse.Namespace) -> Config:
    """Configuration from environment variables, overridden by `--config` when given."""
    if args.config is None:
        config = Config()
    else:

        class FileConfig(Config):
            @classmethod
            def settings_customise_sources(
                cls,
                settings_cls: type[BaseSettings],
                init_settings: PydanticBaseSettingsSource,
                env_settings: PydanticBaseSettingsSource,
                dotenv_settings: PydanticBaseSettingsSource,
                file_secret_settings: PydanticBaseSettingsSource,
            ) -> tuple[PydanticBaseSettingsSource, ...]:
                return (
                    JsonConfigSettingsSource(settings_cls=settings_cls, json_file=args.config),
                    init_settings,
                    env_settings,
                    dotenv_settings,
                    file_secret_settings,
                )

        config = FileConfig()

    validate_config(config)
    return config


def dispatch(args: argparse.Namespace) -> None:
    config = get_config(args)
    configure_logging(config=config, verbose=args.verbose)
    log_config(config)

    properties = topic_properties(load_topic_configs(args.topics), config)
    json.dump(properties, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


@contextlib.contextmanager
def handle_keyboard_interrupt() -> Iterator[None]:
    try:
        yield
    except KeyboardInterrupt as e:
        raise SystemExit(2) from e


@handle_keyboard_interrupt()
def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        dispatch(args)
    except (InternalTopicError, ValueError, OSError) as e:
        logger.error("Planning internal topics failed: %s", e)
        raise SystemExit(1) from e
