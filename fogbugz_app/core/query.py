"""Search predicates and the FogBugz query string they render to.

A :class:`QueryBuilder` collects predicates in whatever order the caller
adds them. :meth:`QueryBuilder.build` folds them into a :class:`Query` that
has one slot per predicate kind; a later predicate of the same kind
replaces an earlier one. Rendering always emits clauses in the same order::

    ixBug:<id>&assignedTo:<name>&from:<email>&opened:"<date>"&closed:"<date>"
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

from .date import Date, PointInTime, as_date

CLAUSE_SEPARATOR = "&"


@dataclass(frozen=True, slots=True)
class CaseId:
    value: int


@dataclass(frozen=True, slots=True)
class AssignedTo:
    value: str


@dataclass(frozen=True, slots=True)
class FromEmail:
    value: str


@dataclass(frozen=True, slots=True)
class OpenedDate:
    value: Date


@dataclass(frozen=True, slots=True)
class ClosedDate:
    value: Date


Param: TypeAlias = CaseId | AssignedTo | FromEmail | OpenedDate | ClosedDate

DateInput: TypeAlias = Date | tuple[PointInTime, PointInTime] | str


@dataclass(frozen=True, slots=True)
class Query:
    case_id: int | None = None
    assigned_to: str | None = None
    from_email: str | None = None
    opened_date: Date | None = None
    closed_date: Date | None = None

    @staticmethod
    def builder() -> QueryBuilder:
        return QueryBuilder()

    def clauses(self) -> list[str]:
        parts: list[str] = []
        if self.case_id is not None:
            parts.append(f"ixBug:{self.case_id}")
        if self.assigned_to is not None:
            parts.append(f"assignedTo:{self.assigned_to}")
        if self.from_email is not None:
            parts.append(f"from:{self.from_email}")
        if self.opened_date is not None:
            parts.append(f'opened:"{self.opened_date}"')
        if self.closed_date is not None:
            parts.append(f'closed:"{self.closed_date}"')
        return parts

    def render(self) -> str:
        return CLAUSE_SEPARATOR.join(self.clauses())

    def __str__(self) -> str:
        return self.render()


def fold_params(params) -> Query:
    """Fold predicates left to right into a :class:`Query` (last write wins)."""
    query = Query()
    for param in params:
        match param:
            case CaseId(value):
                query = replace(query, case_id=value)
            case AssignedTo(value):
                query = replace(query, assigned_to=value)
            case FromEmail(value):
                query = replace(query, from_email=value)
            case OpenedDate(value):
                query = replace(query, opened_date=value)
            case ClosedDate(value):
                query = replace(query, closed_date=value)
            case _:
                raise TypeError(f"Unsupported query parameter: {param!r}")
    return query


class QueryBuilder:
    """Accumulates predicates; chainable, no validation."""

    def __init__(self, params: list[Param] | None = None):
        self.params: list[Param] = list(params or [])

    def __repr__(self) -> str:
        return f"QueryBuilder({self.params!r})"

    def add_param(self, param: Param) -> QueryBuilder:
        self.params.append(param)
        return self

    def case_id(self, case_id: int) -> QueryBuilder:
        return self.add_param(CaseId(case_id))

    def assigned_to(self, name: str) -> QueryBuilder:
        return self.add_param(AssignedTo(name))

    def from_email(self, address: str) -> QueryBuilder:
        return self.add_param(FromEmail(address))

    def opened_date(self, date: DateInput) -> QueryBuilder:
        return self.add_param(OpenedDate(as_date(date)))

    def closed_date(self, date: DateInput) -> QueryBuilder:
        return self.add_param(ClosedDate(as_date(date)))

    def build(self) -> Query:
        return fold_params(self.params)


def as_query(value: Query | QueryBuilder) -> Query:
    if isinstance(value, Query):
        return value
    if isinstance(value, QueryBuilder):
        return value.build()
    raise TypeError(f"Expected Query or QueryBuilder, got {type(value).__name__}")
