"""
streamtopics - internal topic configuration

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from streamtopics.topic_config import (
    InternalTopicConfig,
    InternalTopicConfigType,
    RepartitionTopicConfig,
    UnwindowedUnversionedChangelogTopicConfig,
    VersionedChangelogTopicConfig,
    WindowedChangelogTopicConfig,
)

__all__ = [
    "InternalTopicConfig",
    "InternalTopicConfigType",
    "RepartitionTopicConfig",
    "UnwindowedUnversionedChangelogTopicConfig",
    "VersionedChangelogTopicConfig",
    "WindowedChangelogTopicConfig",
]
