"""
streamtopics - internal topic configurations

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from streamtopics import topic_name
from streamtopics.constants import (
    CREATE_TIME,
    MAX_LONG,
    MESSAGE_TIMESTAMP_TYPE_CONFIG,
    MIN_COMPACTION_LAG_MS_CONFIG,
    ONE_DAY_MS,
    RETENTION_MS_CONFIG,
)
from streamtopics.errors import ArithmeticOverflowError, NullArgumentError
from streamtopics.typing import ArgTopicProperties, StrEnum, TopicProperties
from types import MappingProxyType
from typing import ClassVar
from typing_extensions import Self

import enum
import logging

LOG = logging.getLogger(__name__)


@enum.unique
class InternalTopicConfigType(StrEnum):
    REPARTITION = "repartition"
    UNWINDOWED_UNVERSIONED_CHANGELOG = "unwindowed_unversioned_changelog"
    WINDOWED_CHANGELOG = "windowed_changelog"
    VERSIONED_CHANGELOG = "versioned_changelog"


def checked_add(left: int, right: int, *, saturate: bool = True) -> int:
    """Add two millisecond values within the range of the broker's long type.

    With `saturate` the result is clamped to the maximum long, otherwise
    `ArithmeticOverflowError` is raised.
    """
    result = left + right
    if result > MAX_LONG:
        if saturate:
            return MAX_LONG
        raise ArithmeticOverflowError(f"{left} + {right} overflows the maximum value {MAX_LONG}")
    return result


def _require_non_negative_int(value: int | None, value_name: str) -> int:
    if value is None:
        raise NullArgumentError(f"{value_name} must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{value_name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{value_name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class InternalTopicConfig(ABC):
    """Name and configuration overrides of a topic managed by the stream processing engine.

    Instances are immutable. `get_properties` merges, in increasing precedence,
    the broker defaults given by the caller, the defaults of the topic kind
    together with any computed retention values, and the overrides given at
    construction.
    """

    topic_type: ClassVar[InternalTopicConfigType]

    name: str
    overrides: Mapping[str, str] = field(hash=False)
    number_of_partitions: int | None = field(default=None, kw_only=True)
    enforce_number_of_partitions: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if self.name is None:
            raise NullArgumentError("Topic name must not be None")
        if self.overrides is None:
            raise NullArgumentError(f"Topic configuration overrides of '{self.name}' must not be None")
        topic_name.validate(self.name)
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

        if self.number_of_partitions is not None:
            if isinstance(self.number_of_partitions, bool) or not isinstance(self.number_of_partitions, int):
                raise TypeError(f"Number of partitions must be an integer, got {self.number_of_partitions!r}")
            if self.number_of_partitions < 1:
                raise ValueError(f"Number of partitions must be at least 1, got {self.number_of_partitions}")
        elif self.enforce_number_of_partitions:
            raise ValueError(f"Can not enforce the number of partitions of '{self.name}' without a partition count")

    def with_number_of_partitions(self, number_of_partitions: int, *, enforce: bool = False) -> Self:
        return replace(self, number_of_partitions=number_of_partitions, enforce_number_of_partitions=enforce)

    def has_enforced_number_of_partitions(self) -> bool:
        return self.enforce_number_of_partitions

    @abstractmethod
    def computed_properties(self, additional_retention_ms: int) -> TopicProperties:
        """Properties derived from the topic kind, applied before the overrides."""

    def get_properties(self, default_properties: ArgTopicProperties, additional_retention_ms: int) -> TopicProperties:
        if default_properties is None:
            raise NullArgumentError("Default topic properties must not be None")
        _require_non_negative_int(additional_retention_ms, "Additional retention")

        properties: TopicProperties = dict(default_properties)
        properties[MESSAGE_TIMESTAMP_TYPE_CONFIG] = CREATE_TIME
        properties.update(self.computed_properties(additional_retention_ms))
        properties.update(self.overrides)
        LOG.debug("Properties of %s topic '%s': %s", self.topic_type, self.name, properties)
        return properties


@dataclass(frozen=True)
class RepartitionTopicConfig(InternalTopicConfig):
    topic_type: ClassVar[InternalTopicConfigType] = InternalTopicConfigType.REPARTITION

    def computed_properties(self, additional_retention_ms: int) -> TopicProperties:
        return {}


@dataclass(frozen=True)
class UnwindowedUnversionedChangelogTopicConfig(InternalTopicConfig):
    topic_type: ClassVar[InternalTopicConfigType] = InternalTopicConfigType.UNWINDOWED_UNVERSIONED_CHANGELOG

    def computed_properties(self, additional_retention_ms: int) -> TopicProperties:
        return {}


@dataclass(frozen=True)
class WindowedChangelogTopicConfig(InternalTopicConfig):
    """Changelog of a windowed store.

    Records must outlive the window by the additional retention, so
    `retention.ms` is the window size plus `additional_retention_ms`.
    """

    topic_type: ClassVar[InternalTopicConfigType] = InternalTopicConfigType.WINDOWED_CHANGELOG

    window_size_ms: int

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_non_negative_int(self.window_size_ms, "Window size")

    def retention_ms(self, additional_retention_ms: int) -> int:
        return checked_add(self.window_size_ms, additional_retention_ms)

    def computed_properties(self, additional_retention_ms: int) -> TopicProperties:
        return {RETENTION_MS_CONFIG: str(self.retention_ms(additional_retention_ms))}


@dataclass(frozen=True)
class VersionedChangelogTopicConfig(InternalTopicConfig):
    """Changelog of a versioned store.

    Compaction must not remove a version while it is still within the history
    retention, so `min.compaction.lag.ms` is the history retention plus one day.
    The additional retention does not take part.
    """

    topic_type: ClassVar[InternalTopicConfigType] = InternalTopicConfigType.VERSIONED_CHANGELOG

    history_retention_ms: int

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_non_negative_int(self.history_retention_ms, "History retention")

    def min_compaction_lag_ms(self) -> int:
        return checked_add(self.history_retention_ms, ONE_DAY_MS)

    def computed_properties(self, additional_retention_ms: int) -> TopicProperties:
        return {MIN_COMPACTION_LAG_MS_CONFIG: str(self.min_compaction_lag_ms())}
