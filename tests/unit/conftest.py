"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from collections.abc import Iterator
from streamtopics.config import Config
from streamtopics.logging_setup import HANDLER_NAME

import logging
import pytest


@pytest.fixture(name="config")
def fixture_config() -> Config:
    return Config(additional_retention_ms=20, topic_defaults={})


@pytest.fixture(autouse=True)
def fixture_restore_root_logging() -> Iterator[None]:
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler.get_name() == HANDLER_NAME:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
