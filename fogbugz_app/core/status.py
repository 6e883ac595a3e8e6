"""Status decoding and categorization utilities.

FogBugz reports status as a numeric id. Installations can define their own
ids inside a fixed set of categories, so many ids collapse onto one
:class:`Status` bucket. The table lives in config.py (``*_STATUS_CODES``).
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from .codes import require_code
from .config import (
    ABANDONED_STATUS_CODES,
    ACTIVE_STATUS_CODES,
    APPROVED_STATUS_CODES,
    REJECTED_STATUS_CODES,
    RESOLVED_STATUS_CODES,
    WONT_REVIEW_STATUS_CODES,
)
from .errors import UnknownStatusError


class Status(StrEnum):
    ACTIVE = "Active"
    RESOLVED = "Resolved"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    WONT_REVIEW = "WontReview"
    ABANDONED_NO_CONSENSUS = "AbandonedNoConsensus"


def _build_table() -> dict[int, Status]:
    groups = (
        (ACTIVE_STATUS_CODES, Status.ACTIVE),
        (RESOLVED_STATUS_CODES, Status.RESOLVED),
        (APPROVED_STATUS_CODES, Status.APPROVED),
        (REJECTED_STATUS_CODES, Status.REJECTED),
        (WONT_REVIEW_STATUS_CODES, Status.WONT_REVIEW),
        (ABANDONED_STATUS_CODES, Status.ABANDONED_NO_CONSENSUS),
    )
    table: dict[int, Status] = {}
    for codes, status in groups:
        for code in codes:
            if code in table:
                raise ValueError(f"Status code {code} mapped to both {table[code]} and {status}")
            table[code] = status
    return table


STATUS_TABLE: Mapping[int, Status] = _build_table()

# Buckets that mean the case no longer needs work
CLOSED_STATUSES: frozenset[Status] = frozenset(set(Status) - {Status.ACTIVE})


def decode_status(value: Any, field: str = "ixStatus") -> Status:
    """Map a numeric status id to its :class:`Status` bucket.

    Parameters
    ----------
    value : Any
        Raw JSON value of the status field.
    field : str
        Field name reported in errors.

    Returns
    -------
    Status
        The bucket the id belongs to.

    Raises
    ------
    UnknownStatusError
        If the id is not in the table. There is no silent default.

    Examples
    --------
    >>> decode_status(17)
    <Status.ACTIVE: 'Active'>
    >>> decode_status(27)
    <Status.APPROVED: 'Approved'>
    """
    code = require_code(value, field)
    try:
        return STATUS_TABLE[code]
    except KeyError:
        raise UnknownStatusError(code, field=field) from None


def is_closed_status(status: Status) -> bool:
    """True for every bucket except Active."""
    return status in CLOSED_STATUSES
