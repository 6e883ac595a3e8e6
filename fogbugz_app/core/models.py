"""Domain data models for FogBugz cases, events, and attachments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .codes import Category, EventType, Priority
from .status import Status


@dataclass(frozen=True, slots=True)
class Attachment:
    file_name: str
    url: str


@dataclass(frozen=True, slots=True)
class Event:
    event_type: EventType
    description: str
    datetime: datetime
    person_id: int
    person: str
    content: str
    assigned_to_id: int | None = None
    attachments: tuple[Attachment, ...] | None = None


@dataclass(frozen=True, slots=True)
class CaseDetails:
    case_id: int
    title: str
    project: str
    is_open: bool
    area: str
    status: Status
    priority: Priority
    category: Category
    events: tuple[Event, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class CaseSummary:
    """One row of a listing; only the requested columns are populated."""

    case_id: int
    title: str | None = None
    project: str | None = None
    project_id: int | None = None
    area: str | None = None
    status: Status | None = None
    priority: Priority | None = None
    category: Category | None = None
    is_open: bool | None = None
