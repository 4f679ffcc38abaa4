"""
streamtopics - constants

Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""
from typing import Final

SECOND: Final = 1000
MINUTE: Final = 60 * SECOND
HOUR: Final = 60 * MINUTE
ONE_DAY_MS: Final = 24 * HOUR

# Brokers store millisecond values in a signed 64-bit long.
MAX_LONG: Final = 2**63 - 1

MESSAGE_TIMESTAMP_TYPE_CONFIG: Final = "message.timestamp.type"
RETENTION_MS_CONFIG: Final = "retention.ms"
RETENTION_BYTES_CONFIG: Final = "retention.bytes"
MIN_COMPACTION_LAG_MS_CONFIG: Final = "min.compaction.lag.ms"

CREATE_TIME: Final = "CreateTime"

DEFAULT_ADDITIONAL_RETENTION_MS: Final = ONE_DAY_MS
