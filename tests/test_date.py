import pytest

from fogbugz_app.core.date import (
    DateRange,
    PointInTime,
    as_date,
    parse_date,
    parse_date_range,
    parse_point_in_time,
    to_wire,
)
from fogbugz_app.core.errors import ParseError


def test_parse_point_in_time():
    p = parse_point_in_time("31-12-2020")
    assert p == PointInTime(31, 12, 2020)


def test_parse_date_range_with_leading_zeros():
    r = parse_date_range("01-01-2020..31-12-2020")
    assert r.start == PointInTime(1, 1, 2020)
    assert r.end == PointInTime(31, 12, 2020)


def test_parse_date_picks_form():
    assert parse_date("31-12-2020") == PointInTime(31, 12, 2020)
    assert parse_date("01-01-2020..31-12-2020") == DateRange(PointInTime(1, 1, 2020), PointInTime(31, 12, 2020))


def test_render():
    assert str(PointInTime(31, 12, 2020)) == "31-12-2020"
    assert str(DateRange(PointInTime(1, 1, 2020), PointInTime(31, 12, 2020))) == "1-1-2020..31-12-2020"
    assert to_wire(PointInTime(1, 2, 2024)) == "1-2-2024"


@pytest.mark.parametrize("text", ["1-1-2020", "31-12-1999", "0-0-0", "7-13-2024..1-1-2023"])
def test_round_trip(text):
    assert str(parse_date(text)) == text


def test_round_trip_generated():
    for day in range(0, 32, 7):
        for month in (1, 6, 12):
            for year in (0, 1999, 2024):
                text = f"{day}-{month}-{year}"
                assert parse_point_in_time(text) == PointInTime(day, month, year)
                assert str(parse_date(text)) == text
                span = f"{text}..{month}-{day}-{year + 1}"
                assert str(parse_date(span)) == span


def test_no_calendar_validation_or_ordering():
    assert parse_date("31-2-2024") == PointInTime(31, 2, 2024)
    r = parse_date("1-1-2025..1-1-2020")
    assert r.start.year > r.end.year


@pytest.mark.parametrize(
    "text",
    ["", "2020", "1-1", "1-1-2020-5", "a-1-2020", "1-1-20x0", "-1-1-2020", "1--2020", "+1-1-2020", " 1-1-2020"],
)
def test_point_in_time_rejects_malformed(text):
    with pytest.raises(ParseError):
        parse_point_in_time(text)


@pytest.mark.parametrize("text", ["1-1-2020..", "..1-1-2020", "1-1-2020..2-2-2020..3-3-2020", "1-1-2020..x"])
def test_range_rejects_malformed(text):
    with pytest.raises(ParseError):
        parse_date(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_date("nope")


def test_as_date_accepts_tuple_and_string():
    start, end = PointInTime(1, 1, 2024), PointInTime(31, 12, 2024)
    assert as_date((start, end)) == DateRange(start, end)
    assert as_date("1-1-2024") == start
    assert as_date(start) is start
    with pytest.raises(TypeError):
        as_date(20240101)
