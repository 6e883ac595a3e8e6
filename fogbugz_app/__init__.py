"""Typed client for the FogBugz JSON API."""

from fogbugz_app.core.codes import Category, EventType, Priority
from fogbugz_app.core.columns import Column, render_columns, wire_name
from fogbugz_app.core.config import Settings, load_settings
from fogbugz_app.core.date import (
    DateRange,
    PointInTime,
    parse_date,
    parse_date_range,
    parse_point_in_time,
)
from fogbugz_app.core.endpoints import (
    CaseDetailsRequest,
    ListCasesRequest,
    ListIntervalsRequest,
    SearchRequest,
)
from fogbugz_app.core.errors import (
    BuilderError,
    DecodeError,
    FogBugzError,
    ParseError,
    ServiceError,
    TransportError,
    UnknownStatusError,
)
from fogbugz_app.core.fogbugz_client import FogBugzAPI
from fogbugz_app.core.models import Attachment, CaseDetails, CaseSummary, Event
from fogbugz_app.core.query import Query, QueryBuilder
from fogbugz_app.core.rate_limit import TokenBucket
from fogbugz_app.core.service import CaseService
from fogbugz_app.core.status import Status

__all__ = [
    "Attachment",
    "BuilderError",
    "CaseDetails",
    "CaseDetailsRequest",
    "CaseService",
    "CaseSummary",
    "Category",
    "Column",
    "DateRange",
    "DecodeError",
    "Event",
    "EventType",
    "FogBugzAPI",
    "FogBugzError",
    "ListCasesRequest",
    "ListIntervalsRequest",
    "ParseError",
    "PointInTime",
    "Priority",
    "Query",
    "QueryBuilder",
    "SearchRequest",
    "ServiceError",
    "Settings",
    "Status",
    "TokenBucket",
    "TransportError",
    "UnknownStatusError",
    "load_settings",
    "parse_date",
    "parse_date_range",
    "parse_point_in_time",
    "render_columns",
    "wire_name",
]
