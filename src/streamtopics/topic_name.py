"""
streamtopics - topic name validation

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from streamtopics.errors import InvalidTopicNameError, NullArgumentError
from typing import Final

import re

LEGAL_CHARS: Final = "[a-zA-Z0-9._-]"
MAX_NAME_LENGTH: Final = 249

_LEGAL_CHARS_PATTERN: Final = re.compile(f"{LEGAL_CHARS}+")


def has_valid_length(name: str) -> bool:
    return 0 < len(name) <= MAX_NAME_LENGTH


def contains_valid_pattern(name: str) -> bool:
    return _LEGAL_CHARS_PATTERN.fullmatch(name) is not None


def has_collision_chars(name: str) -> bool:
    """Periods and underscores map to the same character in broker metric names,
    so `a.b` and `a_b` can not be told apart once the topics exist.
    """
    return "." in name or "_" in name


def unify_collision_chars(name: str) -> str:
    return name.replace(".", "_")


def collides_with(name: str, other: str) -> bool:
    return name != other and unify_collision_chars(name) == unify_collision_chars(other)


def validate(name: str | None) -> None:
    if name is None:
        raise NullArgumentError("Topic name must not be None")
    if not isinstance(name, str):
        raise InvalidTopicNameError(str(name), f"Topic name must be a string, got {type(name).__name__}")
    if not name:
        raise InvalidTopicNameError(name, "Topic name is illegal, it can't be empty")
    if not has_valid_length(name):
        raise InvalidTopicNameError(
            name,
            f"Topic name is illegal, it can't be longer than {MAX_NAME_LENGTH} characters, topic name: {name}",
        )
    if not contains_valid_pattern(name):
        raise InvalidTopicNameError(
            name,
            f"Topic name '{name}' is illegal, it contains a character other than "
            "ASCII alphanumerics, '.', '_' and '-'",
        )
