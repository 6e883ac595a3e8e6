from datetime import UTC, datetime

import pandas as pd
import pytest

from fogbugz_app.core.codes import Category, EventType, Priority
from fogbugz_app.core.date import DateRange, PointInTime
from fogbugz_app.core.errors import DecodeError, UnknownStatusError
from fogbugz_app.core.mappers import (
    cases_to_dataframe,
    decode_date,
    events_to_dataframe,
    map_case_details,
    map_case_summaries,
    map_case_summary,
)
from fogbugz_app.core.models import Attachment
from fogbugz_app.core.status import Status


def _raw_case(**overrides):
    case = {
        "ixBug": 61331,
        "sTitle": "Printer on fire",
        "sProject": "Ops",
        "fOpen": True,
        "sArea": "Hardware",
        "ixStatus": 20,
        "ixPriority": 1,
        "ixCategory": 6,
        "events": [
            {
                "evt": 1,
                "evtDescription": "Opened by Alice",
                "dt": "2024-01-02T03:04:05Z",
                "ixPerson": 4,
                "sPerson": "Alice",
                "s": "It is burning",
                "attachments": [{"sFileName": "fire.jpg", "sURL": "default.asp?pg=pgDownload&ixAttachment=1"}],
            },
            {
                "evt": 3,
                "evtDescription": "Assigned to Bob",
                "dt": "2024-01-02T04:00:00Z",
                "ixPerson": 4,
                "sPerson": "Alice",
                "ixPersonAssignedTo": 5,
                "s": "",
            },
            {
                "evt": 999,
                "evtDescription": "Something new",
                "dt": "2024-01-03T00:00:00Z",
                "ixPerson": 5,
                "sPerson": "Bob",
                "s": "",
            },
        ],
    }
    case.update(overrides)
    return case


def test_map_case_details():
    details = map_case_details(_raw_case())
    assert details.case_id == 61331
    assert details.title == "Printer on fire"
    assert details.is_open is True
    assert details.status is Status.ACTIVE
    assert details.priority is Priority.BLOCKER
    assert details.category is Category.EMERGENCY
    first, second, third = details.events
    assert first.event_type is EventType.OPENED
    assert first.datetime == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert first.attachments == (Attachment("fire.jpg", "default.asp?pg=pgDownload&ixAttachment=1"),)
    assert first.assigned_to_id is None
    assert second.assigned_to_id == 5
    assert second.attachments is None
    assert third.event_type is EventType.UNKNOWN


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("ixBug", None),
        ("ixBug", "61331"),
        ("sTitle", 5),
        ("fOpen", 1),
        ("events", {}),
        ("ixPriority", 9),
        ("ixCategory", None),
    ],
)
def test_case_details_shape_errors(key, value):
    with pytest.raises(DecodeError) as info:
        map_case_details(_raw_case(**{key: value}))
    assert key in str(info.value)


def test_case_details_unknown_status():
    with pytest.raises(UnknownStatusError) as info:
        map_case_details(_raw_case(ixStatus=41))
    assert info.value.code == 41


def test_event_errors_name_the_entry():
    raw = _raw_case()
    raw["events"][1]["dt"] = "not a date"
    with pytest.raises(DecodeError) as info:
        map_case_details(raw)
    assert info.value.field == "events[1].dt"

    raw = _raw_case()
    del raw["events"][2]["sPerson"]
    with pytest.raises(DecodeError) as info:
        map_case_details(raw)
    assert info.value.field == "events[2].sPerson"


def test_event_missing_timestamp():
    raw = _raw_case()
    del raw["events"][0]["dt"]
    with pytest.raises(DecodeError) as info:
        map_case_details(raw)
    assert info.value.field == "events[0].dt"
    assert info.value.detail == "missing required field"


def test_unfiltered_sentinel_fails_decoding():
    raw = _raw_case()
    raw["events"].append(False)
    with pytest.raises(DecodeError):
        map_case_details(raw)


def test_map_case_summary_optional_columns():
    summary = map_case_summary({"ixBug": 12, "sTitle": "Hello"})
    assert summary.case_id == 12
    assert summary.title == "Hello"
    assert summary.status is None
    full = map_case_summary({"ixBug": 13, "ixStatus": 2, "ixProject": 3, "fOpen": False})
    assert full.status is Status.RESOLVED
    assert full.project_id == 3
    assert full.is_open is False


def test_map_case_summaries_reports_index():
    with pytest.raises(DecodeError) as info:
        map_case_summaries([{"ixBug": 1}, {"sTitle": "no id"}])
    assert "data.cases[1]" in str(info.value)
    assert info.value.field == "data.cases[1].ixBug"


def test_map_case_summaries_keeps_unknown_status():
    with pytest.raises(UnknownStatusError) as info:
        map_case_summaries([{"ixBug": 1, "ixStatus": 99}])
    assert info.value.code == 99
    assert info.value.field == "data.cases[0].ixStatus"
    assert str(info.value) == "data.cases[0].ixStatus: unknown status 99"


def test_decode_date():
    assert decode_date("1-1-2024") == PointInTime(1, 1, 2024)
    assert decode_date("1-1-2024..2-2-2024") == DateRange(PointInTime(1, 1, 2024), PointInTime(2, 2, 2024))
    with pytest.raises(DecodeError):
        decode_date("yesterday", field="opened")
    with pytest.raises(DecodeError):
        decode_date(20240101)


def test_cases_to_dataframe():
    df = cases_to_dataframe([map_case_details(_raw_case()), map_case_summary({"ixBug": 2})])
    assert list(df["case_id"]) == [61331, 2]
    assert df.iloc[0]["status"] == "ACTIVE"
    assert df.iloc[0]["priority"] == "BLOCKER"
    assert pd.isna(df.iloc[1]["status"])


def test_cases_to_dataframe_empty_has_columns():
    df = cases_to_dataframe([])
    assert df.empty
    assert "case_id" in df.columns


def test_events_to_dataframe_timezone():
    df = events_to_dataframe(map_case_details(_raw_case()), "America/Santiago")
    assert list(df["event_type"]) == ["OPENED", "ASSIGNED", "UNKNOWN"]
    assert df.iloc[0]["attachments"] == "fire.jpg"
    assert df.iloc[1]["attachments"] == ""
    ts = df.iloc[0]["datetime"]
    assert ts.tzinfo is not None
    assert ts.hour == 0  # 03:04 UTC is 00:04 in Santiago (UTC-3 in January)
