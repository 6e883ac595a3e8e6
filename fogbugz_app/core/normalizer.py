"""Sanitize FogBugz response envelopes before structured decoding.

Successful responses look like ``{"data": {"cases": [...]}}``. The single
case fetch is known to come back with non-object entries (``false``,
``null``) padding the ``events`` array; those are dropped here so the
mapper only ever sees event objects.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import DecodeError, ServiceError

logger = logging.getLogger(__name__)


def check_response(ok: bool, payload: Any, status_code: int | None = None) -> Any:
    """Return ``payload`` for a success response, raise ServiceError otherwise.

    The failure body is not interpreted; it travels on the exception.
    """
    if not ok:
        logger.warning("FogBugz returned non-success status %s", status_code)
        raise ServiceError(payload, status_code=status_code)
    return payload


def _cases_array(payload: Any) -> list[Any]:
    if not isinstance(payload, dict):
        raise DecodeError(f"expected object envelope, got {type(payload).__name__}")
    data = payload.get("data")
    if not isinstance(data, dict):
        raise DecodeError("missing or non-object 'data'", field="data")
    cases = data.get("cases")
    if not isinstance(cases, list):
        raise DecodeError("missing or non-array 'cases'", field="data.cases")
    return cases


def filter_events(case: dict[str, Any]) -> int:
    """Drop non-object entries from ``case["events"]`` in place.

    Returns the number of entries removed. A missing or non-array
    ``events`` is left alone for the mapper to judge.
    """
    events = case.get("events")
    if not isinstance(events, list):
        return 0
    kept = [e for e in events if isinstance(e, dict)]
    dropped = len(events) - len(kept)
    events[:] = kept
    return dropped


def extract_case(payload: Any) -> dict[str, Any]:
    """First case of ``data.cases`` with its events array sanitized."""
    cases = _cases_array(payload)
    if not cases:
        raise DecodeError("no case in response", field="data.cases")
    case = cases[0]
    if not isinstance(case, dict):
        raise DecodeError(f"expected case object, got {type(case).__name__}", field="data.cases[0]")
    dropped = filter_events(case)
    if dropped:
        logger.debug("Dropped %d non-object events from case %s", dropped, case.get("ixBug"))
    return case


def extract_cases(payload: Any) -> list[Any]:
    """All of ``data.cases``, unfiltered."""
    return _cases_array(payload)
