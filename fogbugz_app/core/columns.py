"""Selectable response fields (``cols``) and their FogBugz wire names."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class Column(StrEnum):
    """Closed set of case fields a request can ask FogBugz to return.

    Each member's value is the exact field name the API expects, so
    ``str(Column.TITLE) == "sTitle"``.
    """

    CASE_ID = "ixBug"
    TITLE = "sTitle"
    BODY = "sHtmlBody"
    EVENTS = "events"
    PROJECT = "sProject"
    PROJECT_ID = "ixProject"
    AREA = "sArea"
    AREA_ID = "ixArea"
    PRIORITY = "ixPriority"
    STATUS = "ixStatus"
    CATEGORY = "ixCategory"
    IS_OPEN = "fOpen"
    ASSIGNED_TO = "sPersonAssignedTo"
    ASSIGNED_TO_ID = "ixPersonAssignedTo"
    OPENED = "dtOpened"
    CLOSED = "dtClosed"
    LAST_UPDATED = "dtLastUpdated"


def wire_name(column: Column) -> str:
    return column.value


def render_columns(columns: Iterable[Column]) -> list[str]:
    """Wire names in the given order. Duplicates are kept on purpose."""
    return [wire_name(c) for c in columns]


def resolve_column(name: str) -> Column:
    """Look up a column by member name (``"CASE_ID"``) or wire name (``"ixBug"``).

    Raises
    ------
    KeyError
        If ``name`` matches neither.
    """
    text = name.strip()
    try:
        return Column(text)
    except ValueError:
        pass
    member = Column.__members__.get(text.upper())
    if member is None:
        raise KeyError(name)
    return member
