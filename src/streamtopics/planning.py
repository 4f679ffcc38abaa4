"""
streamtopics - topic properties for topic creation

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from streamtopics import topic_name
from streamtopics.config import Config
from streamtopics.topic_config import InternalTopicConfig, InternalTopicConfigType
from streamtopics.typing import TopicName, TopicProperties

import logging

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class InternalTopicPlan:
    name: TopicName
    topic_type: InternalTopicConfigType
    number_of_partitions: int | None
    enforce_number_of_partitions: bool
    properties: Mapping[str, str]


def plan_topic(topic_config: InternalTopicConfig, config: Config) -> InternalTopicPlan:
    properties = topic_config.get_properties(config.topic_defaults, config.additional_retention_ms)
    return InternalTopicPlan(
        name=TopicName(topic_config.name),
        topic_type=topic_config.topic_type,
        number_of_partitions=topic_config.number_of_partitions,
        enforce_number_of_partitions=topic_config.has_enforced_number_of_partitions(),
        properties=properties,
    )


def plan_topics(topic_configs: Iterable[InternalTopicConfig], config: Config) -> list[InternalTopicPlan]:
    plans: list[InternalTopicPlan] = []
    seen: list[str] = []
    for topic_config in topic_configs:
        if topic_config.name in seen:
            raise ValueError(f"Internal topic '{topic_config.name}' is configured more than once")
        for other in seen:
            if topic_name.collides_with(topic_config.name, other):
                raise ValueError(f"Internal topic '{topic_config.name}' collides with '{other}' in metric names")
        seen.append(topic_config.name)
        plan = plan_topic(topic_config, config)
        LOG.info(
            "Planned %s topic '%s' with %s partitions and properties %s",
            plan.topic_type,
            plan.name,
            plan.number_of_partitions if plan.number_of_partitions is not None else "default",
            plan.properties,
        )
        plans.append(plan)
    return plans


def topic_properties(topic_configs: Iterable[InternalTopicConfig], config: Config) -> dict[TopicName, TopicProperties]:
    """Effective broker configuration of each topic, keyed by topic name.

    The result is meant to be handed to whatever creates or verifies the topics,
    e.g. `KafkaAdminClient.new_topic(name, config=...)`.
    """
    return {plan.name: dict(plan.properties) for plan in plan_topics(topic_configs, config)}
