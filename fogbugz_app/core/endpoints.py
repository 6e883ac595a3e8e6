"""Request records for each FogBugz endpoint, plus fluent builders.

Request records take their required inputs as constructor arguments (the
API handle always, plus the case id or query where the endpoint needs
one). The builders exist for incremental construction and report a
missing field from ``build()`` as :class:`BuilderError`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from .column_config import get_columns
from .columns import Column, render_columns
from .config import (
    DEFAULT_INTERVAL_PERSON_ID,
    LIST_CASES_ENDPOINT,
    LIST_INTERVALS_ENDPOINT,
    SEARCH_ENDPOINT,
)
from .errors import BuilderError
from .mappers import map_case_details, map_case_summaries
from .models import CaseDetails, CaseSummary
from .normalizer import check_response, extract_case, extract_cases
from .query import Query, QueryBuilder, as_query

if TYPE_CHECKING:
    from .fogbugz_client import FogBugzAPI


def _default_columns(set_name: str):
    return lambda: tuple(get_columns(set_name))


class _Request:
    """Shared serialization and transport plumbing for request records."""

    endpoint: str = SEARCH_ENDPOINT

    def to_payload(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_body(self) -> bytes:
        return json.dumps(self.to_payload()).encode("utf-8")

    def _post(self) -> Any:
        resp = self.api.post(self.endpoint, self.to_payload())
        return check_response(resp.ok, resp.payload, resp.status_code)


def _with_columns(payload: dict[str, Any], columns: tuple[Column, ...]) -> dict[str, Any]:
    if columns:
        payload["cols"] = render_columns(columns)
    return payload


@dataclass(frozen=True, slots=True)
class CaseDetailsRequest(_Request):
    api: FogBugzAPI
    case_id: int
    columns: tuple[Column, ...] = field(default_factory=_default_columns("case_details"))

    endpoint = SEARCH_ENDPOINT

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"q": self.case_id}
        _with_columns(payload, self.columns)
        payload["token"] = self.api.api_key
        return payload

    def send(self) -> CaseDetails:
        return map_case_details(extract_case(self._post()))


@dataclass(frozen=True, slots=True)
class SearchRequest(_Request):
    api: FogBugzAPI
    query: Query
    columns: tuple[Column, ...] = field(default_factory=_default_columns("search"))

    endpoint = SEARCH_ENDPOINT

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"q": self.query.render()}
        _with_columns(payload, self.columns)
        payload["token"] = self.api.api_key
        return payload

    def send_raw(self) -> Any:
        return self._post()

    def send(self) -> list[CaseSummary]:
        return map_case_summaries(extract_cases(self._post()))


@dataclass(frozen=True, slots=True)
class ListCasesRequest(_Request):
    api: FogBugzAPI
    saved_filter: str | None = None
    columns: tuple[Column, ...] = field(default_factory=_default_columns("list_cases"))
    max_results: int | None = None

    endpoint = LIST_CASES_ENDPOINT

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.saved_filter is not None:
            payload["sFilter"] = self.saved_filter
        _with_columns(payload, self.columns)
        if self.max_results is not None:
            payload["max"] = self.max_results
        payload["token"] = self.api.api_key
        return payload

    def send(self) -> list[CaseSummary]:
        return map_case_summaries(extract_cases(self._post()))


@dataclass(frozen=True, slots=True)
class ListIntervalsRequest(_Request):
    api: FogBugzAPI
    case_id: int | None = None
    person_id: int | None = DEFAULT_INTERVAL_PERSON_ID
    start: datetime | None = None
    end: datetime | None = None

    endpoint = LIST_INTERVALS_ENDPOINT

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.case_id is not None:
            payload["ixBug"] = self.case_id
        if self.person_id is not None:
            payload["ixPerson"] = self.person_id
        if self.start is not None:
            payload["dtStart"] = self.start.isoformat()
        if self.end is not None:
            payload["dtEnd"] = self.end.isoformat()
        payload["token"] = self.api.api_key
        return payload

    def send(self) -> Any:
        """Interval records are returned as the raw checked envelope."""
        return self._post()


# ------------------ Builders ------------------
class _ColumnsBuilder:
    column_set: str = ""

    def __init__(self):
        self._api: FogBugzAPI | None = None
        self._columns: list[Column] = get_columns(self.column_set)

    def api(self, api: FogBugzAPI):
        self._api = api
        return self

    def add_column(self, column: Column):
        self._columns.append(column)
        return self

    def set_columns(self, columns: Iterable[Column]):
        self._columns = list(columns)
        return self

    def _require_api(self) -> FogBugzAPI:
        if self._api is None:
            raise BuilderError("api", "Api is not specified")
        return self._api


class CaseDetailsRequestBuilder(_ColumnsBuilder):
    column_set = "case_details"

    def __init__(self):
        super().__init__()
        self._case_id: int | None = None

    def case_id(self, case_id: int) -> CaseDetailsRequestBuilder:
        self._case_id = case_id
        return self

    def build(self) -> CaseDetailsRequest:
        if self._case_id is None:
            raise BuilderError("case_id", "Case id is not specified")
        api = self._require_api()
        return CaseDetailsRequest(api=api, case_id=self._case_id, columns=tuple(self._columns))


class SearchRequestBuilder(_ColumnsBuilder):
    column_set = "search"

    def __init__(self):
        super().__init__()
        self._query: Query | None = None

    def query(self, query: Query | QueryBuilder) -> SearchRequestBuilder:
        self._query = as_query(query)
        return self

    def build(self) -> SearchRequest:
        if self._query is None:
            raise BuilderError("query", "Query is not specified")
        api = self._require_api()
        return SearchRequest(api=api, query=self._query, columns=tuple(self._columns))


class ListCasesRequestBuilder(_ColumnsBuilder):
    column_set = "list_cases"

    def __init__(self):
        super().__init__()
        self._filter: str | None = None
        self._max: int | None = None

    def filter(self, saved_filter: str) -> ListCasesRequestBuilder:
        self._filter = saved_filter
        return self

    def max(self, max_results: int) -> ListCasesRequestBuilder:
        self._max = max_results
        return self

    def build(self) -> ListCasesRequest:
        api = self._require_api()
        return ListCasesRequest(
            api=api,
            saved_filter=self._filter,
            columns=tuple(self._columns),
            max_results=self._max,
        )


class ListIntervalsRequestBuilder:
    def __init__(self):
        self._api: FogBugzAPI | None = None
        self._case_id: int | None = None
        self._person_id: int | None = DEFAULT_INTERVAL_PERSON_ID
        self._start: datetime | None = None
        self._end: datetime | None = None

    def api(self, api: FogBugzAPI) -> ListIntervalsRequestBuilder:
        self._api = api
        return self

    def case_id(self, case_id: int) -> ListIntervalsRequestBuilder:
        self._case_id = case_id
        return self

    def person(self, person_id: int) -> ListIntervalsRequestBuilder:
        self._person_id = person_id
        return self

    def start_date(self, start: datetime) -> ListIntervalsRequestBuilder:
        self._start = start
        return self

    def end_date(self, end: datetime) -> ListIntervalsRequestBuilder:
        self._end = end
        return self

    def build(self) -> ListIntervalsRequest:
        if self._api is None:
            raise BuilderError("api", "Api is not specified")
        return ListIntervalsRequest(
            api=self._api,
            case_id=self._case_id,
            person_id=self._person_id,
            start=self._start,
            end=self._end,
        )
