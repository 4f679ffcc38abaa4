"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import NewType, TypeAlias

TopicName = NewType("TopicName", str)
TopicProperties: TypeAlias = dict[str, str]
ArgTopicProperties: TypeAlias = Mapping[str, str]


class StrEnum(str, Enum):
    def __str__(self) -> str:
        return str(self.value)
