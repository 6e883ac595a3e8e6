import pytest

from fogbugz_app.core.codes import (
    Category,
    EventType,
    Priority,
    decode_category,
    decode_event_type,
    decode_priority,
)
from fogbugz_app.core.errors import DecodeError, UnknownStatusError
from fogbugz_app.core.status import Status, decode_status, is_closed_status

ACTIVE = [1, 17, 20, 23, 26, 33, 36, 37, 40]
RESOLVED = [*range(2, 17), 18, 19, 21, 22, 24, 25, 31, 32, 34, 35, 38, 39]


@pytest.mark.parametrize("code", ACTIVE)
def test_active_codes(code):
    assert decode_status(code) is Status.ACTIVE


@pytest.mark.parametrize("code", RESOLVED)
def test_resolved_codes(code):
    assert decode_status(code) is Status.RESOLVED


def test_single_code_buckets():
    assert decode_status(27) is Status.APPROVED
    assert decode_status(28) is Status.REJECTED
    assert decode_status(29) is Status.WONT_REVIEW
    assert decode_status(30) is Status.ABANDONED_NO_CONSENSUS


@pytest.mark.parametrize("code", [0, 41, 99, -1])
def test_unknown_status_carries_code(code):
    with pytest.raises(UnknownStatusError) as info:
        decode_status(code)
    assert info.value.code == code
    assert str(code) in str(info.value)
    assert isinstance(info.value, DecodeError)


def test_status_rejects_non_integers():
    with pytest.raises(DecodeError):
        decode_status("1")
    with pytest.raises(DecodeError):
        decode_status(True)


def test_is_closed_status():
    assert not is_closed_status(Status.ACTIVE)
    assert is_closed_status(Status.RESOLVED)
    assert is_closed_status(Status.WONT_REVIEW)


def test_priority_and_category():
    assert decode_priority(1) is Priority.BLOCKER
    assert decode_priority(7) is Priority.DONT_FIX
    assert decode_category(1) is Category.BUG
    assert decode_category(6) is Category.EMERGENCY
    for bad in (0, 8):
        with pytest.raises(DecodeError):
            decode_priority(bad)
    with pytest.raises(DecodeError) as info:
        decode_category(7)
    assert info.value.field == "ixCategory"


def test_event_types():
    assert decode_event_type(1) is EventType.OPENED
    assert decode_event_type(9) is EventType.REPLIED
    assert decode_event_type(17) is EventType.DELETED_ATTACHMENT
    assert decode_event_type(8) is EventType.UNKNOWN
    for code in range(1, 18):
        assert decode_event_type(code).value == code


@pytest.mark.parametrize("code", [0, 18, 999, -5])
def test_event_type_falls_back_to_unknown(code):
    assert decode_event_type(code) is EventType.UNKNOWN


def test_event_type_still_needs_an_integer():
    with pytest.raises(DecodeError):
        decode_event_type("Opened")
