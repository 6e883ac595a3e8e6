"""Numeric code decoders for priority, category, and event type.

Priority and category are strict: a code FogBugz does not define is a
decode failure. Event types are informational history, so an unexpected
code becomes :attr:`EventType.UNKNOWN` instead of failing the whole case.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from .errors import DecodeError

logger = logging.getLogger(__name__)


class Priority(IntEnum):
    BLOCKER = 1
    MUY_IMPORTANTE = 2
    SHOULD_DO = 3
    FIX_IF_TIME = 4
    OH_WELL = 5
    WHO_CARES = 6
    DONT_FIX = 7


class Category(IntEnum):
    BUG = 1
    FEATURE = 2
    INQUIRY = 3
    SCHEDULE = 4
    REPORT = 5
    EMERGENCY = 6


class EventType(IntEnum):
    OPENED = 1
    EDITED = 2
    ASSIGNED = 3
    REACTIVATED = 4
    REOPENED = 5
    CLOSED = 6
    MOVED = 7
    UNKNOWN = 8
    REPLIED = 9
    FORWARDED = 10
    RECEIVED = 11
    SORTED = 12
    NOT_SORTED = 13
    RESOLVED = 14
    EMAILED = 15
    RELEASE_NOTED = 16
    DELETED_ATTACHMENT = 17


def require_code(value: Any, field: str) -> int:
    """Return ``value`` if it is a JSON integer, else raise DecodeError.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"expected integer code, got {type(value).__name__}", field=field)
    return value


def decode_priority(value: Any, field: str = "ixPriority") -> Priority:
    code = require_code(value, field)
    try:
        return Priority(code)
    except ValueError:
        raise DecodeError(f"unknown priority {code}", field=field) from None


def decode_category(value: Any, field: str = "ixCategory") -> Category:
    code = require_code(value, field)
    try:
        return Category(code)
    except ValueError:
        raise DecodeError(f"unknown category {code}", field=field) from None


def decode_event_type(value: Any, field: str = "evt") -> EventType:
    code = require_code(value, field)
    try:
        return EventType(code)
    except ValueError:
        logger.debug("Unrecognized event type %s; decoding as UNKNOWN", code)
        return EventType.UNKNOWN
