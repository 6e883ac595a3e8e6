"""Mapping sanitized FogBugz case JSON into typed records and DataFrames."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

import pandas as pd
import pytz

from .codes import decode_category, decode_event_type, decode_priority
from .config import CASE_TABLE_COLUMNS, EVENT_TABLE_COLUMNS, TIMEZONE
from .date import Date, parse_date
from .errors import DecodeError, ParseError
from .models import Attachment, CaseDetails, CaseSummary, Event
from .status import decode_status

_MISSING = object()

_JSON_TYPE_NAMES = {str: "string", int: "integer", bool: "boolean", list: "array", dict: "object"}


def _typed(value: Any, kind: type, field: str) -> Any:
    # bool is an int subclass; keep JSON true/false out of integer fields
    if kind is int and isinstance(value, bool):
        raise DecodeError("expected integer, got boolean", field=field)
    if not isinstance(value, kind):
        raise DecodeError(f"expected {_JSON_TYPE_NAMES[kind]}, got {type(value).__name__}", field=field)
    return value


def _required(obj: dict[str, Any], key: str, kind: type, prefix: str = "") -> Any:
    value = obj.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise DecodeError("missing required field", field=f"{prefix}{key}")
    return _typed(value, kind, f"{prefix}{key}")


def _optional(obj: dict[str, Any], key: str, kind: type, prefix: str = "") -> Any:
    value = obj.get(key)
    if value is None:
        return None
    return _typed(value, kind, f"{prefix}{key}")


def parse_timestamp(value: Any, field: str = "dt") -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime."""
    text = _typed(value, str, field)
    try:
        ts = pd.to_datetime(text, utc=True)
    except (ValueError, TypeError) as exc:
        raise DecodeError(f"invalid timestamp {text!r}", field=field) from exc
    if ts is None or pd.isna(ts):
        raise DecodeError(f"invalid timestamp {text!r}", field=field)
    return ts.to_pydatetime()


def decode_date(value: Any, field: str = "date") -> Date:
    """Re-parse an inbound date literal, surfacing failures as DecodeError."""
    text = _typed(value, str, field)
    try:
        return parse_date(text)
    except ParseError as exc:
        raise DecodeError(str(exc), field=field) from exc


def map_attachment(raw: Any, prefix: str = "") -> Attachment:
    obj = _typed(raw, dict, prefix.rstrip(".") or "attachment")
    return Attachment(
        file_name=_required(obj, "sFileName", str, prefix),
        url=_required(obj, "sURL", str, prefix),
    )


def map_event(raw: Any, prefix: str = "") -> Event:
    obj = _typed(raw, dict, prefix.rstrip(".") or "event")
    attachments_raw = _optional(obj, "attachments", list, prefix)
    attachments = None
    if attachments_raw is not None:
        attachments = tuple(
            map_attachment(a, f"{prefix}attachments[{i}].") for i, a in enumerate(attachments_raw)
        )
    for key in ("evt", "dt"):
        if obj.get(key) is None:
            raise DecodeError("missing required field", field=f"{prefix}{key}")
    return Event(
        event_type=decode_event_type(obj["evt"], f"{prefix}evt"),
        description=_required(obj, "evtDescription", str, prefix),
        datetime=parse_timestamp(obj["dt"], f"{prefix}dt"),
        person_id=_required(obj, "ixPerson", int, prefix),
        person=_required(obj, "sPerson", str, prefix),
        content=_required(obj, "s", str, prefix),
        assigned_to_id=_optional(obj, "ixPersonAssignedTo", int, prefix),
        attachments=attachments,
    )


def _coded(obj: dict[str, Any], key: str, decoder, required: bool):
    value = obj.get(key)
    if value is None:
        if required:
            raise DecodeError("missing required field", field=key)
        return None
    return decoder(value, key)


def map_case_details(raw: Any) -> CaseDetails:
    """Decode one sanitized case object (see normalizer.extract_case)."""
    obj = _typed(raw, dict, "case")
    events_raw = _required(obj, "events", list)
    return CaseDetails(
        case_id=_required(obj, "ixBug", int),
        title=_required(obj, "sTitle", str),
        project=_required(obj, "sProject", str),
        is_open=_required(obj, "fOpen", bool),
        area=_required(obj, "sArea", str),
        status=_coded(obj, "ixStatus", decode_status, required=True),
        priority=_coded(obj, "ixPriority", decode_priority, required=True),
        category=_coded(obj, "ixCategory", decode_category, required=True),
        events=tuple(map_event(e, f"events[{i}].") for i, e in enumerate(events_raw)),
    )


def map_case_summary(raw: Any) -> CaseSummary:
    """Decode a listing row; every column except the case id is optional."""
    obj = _typed(raw, dict, "case")
    return CaseSummary(
        case_id=_required(obj, "ixBug", int),
        title=_optional(obj, "sTitle", str),
        project=_optional(obj, "sProject", str),
        project_id=_optional(obj, "ixProject", int),
        area=_optional(obj, "sArea", str),
        status=_coded(obj, "ixStatus", decode_status, required=False),
        priority=_coded(obj, "ixPriority", decode_priority, required=False),
        category=_coded(obj, "ixCategory", decode_category, required=False),
        is_open=_optional(obj, "fOpen", bool),
    )


def map_case_summaries(raw_cases: Iterable[Any]) -> list[CaseSummary]:
    out: list[CaseSummary] = []
    for i, raw in enumerate(raw_cases):
        try:
            out.append(map_case_summary(raw))
        except DecodeError as exc:
            exc.nest(f"data.cases[{i}]")
            raise
    return out


def _enum_name(value) -> str | None:
    return value.name if value is not None else None


def cases_to_dataframe(cases: Iterable[CaseSummary | CaseDetails]) -> pd.DataFrame:
    rows = []
    for c in cases:
        rows.append(
            {
                "case_id": c.case_id,
                "title": c.title,
                "project": c.project,
                "area": c.area,
                "status": _enum_name(c.status),
                "priority": _enum_name(c.priority),
                "category": _enum_name(c.category),
                "is_open": c.is_open,
            }
        )
    return pd.DataFrame(rows, columns=list(CASE_TABLE_COLUMNS))


def events_to_dataframe(case: CaseDetails, timezone: str = TIMEZONE) -> pd.DataFrame:
    tz = pytz.timezone(timezone)
    rows = []
    for e in case.events:
        rows.append(
            {
                "event_type": e.event_type.name,
                "datetime": e.datetime.astimezone(tz),
                "person": e.person,
                "person_id": e.person_id,
                "assigned_to_id": e.assigned_to_id,
                "description": e.description,
                "content": e.content,
                "attachments": ", ".join(a.file_name for a in e.attachments or ()),
            }
        )
    return pd.DataFrame(rows, columns=list(EVENT_TABLE_COLUMNS))
