"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from _pytest.logging import LogCaptureFixture
from streamtopics.config import Config
from streamtopics.planning import plan_topic, plan_topics, topic_properties
from streamtopics.topic_config import (
    InternalTopicConfigType,
    RepartitionTopicConfig,
    VersionedChangelogTopicConfig,
    WindowedChangelogTopicConfig,
)

import logging
import pytest


def test_plan_topic(config: Config) -> None:
    topic_config = WindowedChangelogTopicConfig("app-store-changelog", {}, 10).with_number_of_partitions(3, enforce=True)

    plan = plan_topic(topic_config, config)

    assert plan.name == "app-store-changelog"
    assert plan.topic_type is InternalTopicConfigType.WINDOWED_CHANGELOG
    assert plan.number_of_partitions == 3
    assert plan.enforce_number_of_partitions
    assert plan.properties == {"message.timestamp.type": "CreateTime", "retention.ms": "30"}


def test_topic_properties_uses_configured_defaults(config: Config) -> None:
    config = config.set_config_defaults({"topic_defaults": {"segment.bytes": "1024"}})
    topic_configs = [
        RepartitionTopicConfig("app-repartition", {"retention.ms": "-1"}),
        VersionedChangelogTopicConfig("app-versioned-changelog", {}, 12),
    ]

    assert topic_properties(topic_configs, config) == {
        "app-repartition": {
            "segment.bytes": "1024",
            "message.timestamp.type": "CreateTime",
            "retention.ms": "-1",
        },
        "app-versioned-changelog": {
            "segment.bytes": "1024",
            "message.timestamp.type": "CreateTime",
            "min.compaction.lag.ms": "86400012",
        },
    }


def test_duplicate_topics_are_rejected(config: Config) -> None:
    topic_configs = [
        RepartitionTopicConfig("app-repartition", {}),
        RepartitionTopicConfig("app-repartition", {"retention.ms": "1"}),
    ]
    with pytest.raises(ValueError):
        plan_topics(topic_configs, config)


def test_planned_topics_are_logged(caplog: LogCaptureFixture, config: Config) -> None:
    with caplog.at_level(logging.INFO, logger="streamtopics.planning"):
        plan_topics([RepartitionTopicConfig("app-repartition", {})], config)

    (log,) = caplog.records
    assert log.name == "streamtopics.planning"
    assert log.levelname == "INFO"
    assert log.message == (
        "Planned repartition topic 'app-repartition' with default partitions and properties "
        "{'message.timestamp.type': 'CreateTime'}"
    )


def test_colliding_topics_are_rejected(config: Config) -> None:
    topic_configs = [
        RepartitionTopicConfig("app.store-repartition", {}),
        RepartitionTopicConfig("app_store-repartition", {}),
    ]
    with pytest.raises(ValueError, match="collides with 'app.store-repartition'"):
        plan_topics(topic_configs, config)
