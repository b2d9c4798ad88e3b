"""
TPGM Core Utilities

Configuration, logging and epoch-millisecond time helpers.
"""

from .config import Settings, SETTINGS
from .logging_config import setup_logging, get_logger
from .time_utils import (
    EPOCH,
    millis_to_datetime,
    millis_to_fields,
    datetime_to_millis,
    now_millis,
    parse_time_string,
    format_millis,
)

__all__ = [
    'Settings',
    'SETTINGS',
    'setup_logging',
    'get_logger',
    'EPOCH',
    'millis_to_datetime',
    'millis_to_fields',
    'datetime_to_millis',
    'now_millis',
    'parse_time_string',
    'format_millis',
]
