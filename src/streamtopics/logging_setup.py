"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from streamtopics.config import Config

import logging
import sys

LOG = logging.getLogger(__name__)

HANDLER_NAME = "streamtopics"


def _create_handler(log_handler: str | None) -> logging.Handler:
    match log_handler:
        case "stderr" | None:
            return logging.StreamHandler(stream=sys.stderr)
        case "stdout":
            return logging.StreamHandler(stream=sys.stdout)
        case "systemd":
            from systemd import journal

            return journal.JournalHandler(SYSLOG_IDENTIFIER="streamtopics")
        case _:
            raise ValueError(f"Unknown log handler {log_handler!r}")


def configure_logging(*, config: Config, verbose: bool = False) -> logging.Handler:
    """Install the root handler described by `config`.

    A handler installed by an earlier call is replaced, so configuring twice
    does not duplicate output. `verbose` forces DEBUG regardless of `log_level`.
    """
    level = "DEBUG" if verbose else config.log_level.upper()

    root_handler = _create_handler(config.log_handler)
    root_handler.setFormatter(logging.Formatter(config.log_format))
    root_handler.setLevel(level)
    root_handler.set_name(HANDLER_NAME)

    for handler in list(logging.root.handlers):
        if handler.get_name() == HANDLER_NAME:
            logging.root.removeHandler(handler)
    logging.root.addHandler(root_handler)
    logging.root.setLevel(level)
    return root_handler


def log_config(config: Config) -> None:
    LOG.debug("Config %r", config.model_dump())
