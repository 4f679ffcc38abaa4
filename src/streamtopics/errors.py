"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""


class InternalTopicError(Exception):
    pass


class NullArgumentError(InternalTopicError, TypeError):
    pass


class InvalidTopicNameError(InternalTopicError, ValueError):
    def __init__(self, topic_name: str, message: str) -> None:
        super().__init__(message)
        self.topic_name = topic_name


class ArithmeticOverflowError(InternalTopicError, OverflowError):
    pass


class InvalidConfiguration(InternalTopicError):
    pass
