"""Central configuration, constants, status tables, and default column sets."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .columns import Column
from .errors import BuilderError

# =============================================================================
# FogBugz Connection Settings
# =============================================================================
ENV_URL = "FOGBUGZ_URL"
ENV_API_KEY = "FOGBUGZ_API_KEY"
ENV_TIMEOUT = "FOGBUGZ_TIMEOUT"
ENV_RATE_LIMIT = "FOGBUGZ_RATE_LIMIT"

DEFAULT_TIMEOUT_SECONDS: float = 30.0
TIMEZONE = "UTC"  # Display timezone for tabular output

# Endpoint paths, joined onto the installation URL
SEARCH_ENDPOINT = "api/search"
LIST_CASES_ENDPOINT = "api/listCases"
LIST_INTERVALS_ENDPOINT = "api/listIntervals"

# listIntervals defaults to the installation's first user when no person is given
DEFAULT_INTERVAL_PERSON_ID: int = 1

# =============================================================================
# Workflow Status Configuration
# =============================================================================
# FogBugz lets each installation add status ids inside fixed categories, so
# many ids share one meaning. Anything not listed here is rejected.
ACTIVE_STATUS_CODES: frozenset[int] = frozenset({1, 17, 20, 23, 26, 33, 36, 37, 40})
RESOLVED_STATUS_CODES: frozenset[int] = frozenset(
    {*range(2, 17), 18, 19, 21, 22, 24, 25, 31, 32, 34, 35, 38, 39}
)
APPROVED_STATUS_CODES: frozenset[int] = frozenset({27})
REJECTED_STATUS_CODES: frozenset[int] = frozenset({28})
WONT_REVIEW_STATUS_CODES: frozenset[int] = frozenset({29})
ABANDONED_STATUS_CODES: frozenset[int] = frozenset({30})

# =============================================================================
# Default Column Sets (per request kind)
# =============================================================================
CASE_DETAILS_COLUMNS: Sequence[Column] = (
    Column.CASE_ID,
    Column.TITLE,
    Column.EVENTS,
    Column.PROJECT,
    Column.AREA,
    Column.PRIORITY,
    Column.STATUS,
    Column.CATEGORY,
    Column.IS_OPEN,
)

SEARCH_COLUMNS: Sequence[Column] = (
    Column.CASE_ID,
    Column.TITLE,
)

# listCases sends no cols unless asked; FogBugz then applies its own default
LIST_CASES_COLUMNS: Sequence[Column] = ()

DEFAULT_COLUMN_SETS: Mapping[str, Sequence[Column]] = {
    "case_details": CASE_DETAILS_COLUMNS,
    "search": SEARCH_COLUMNS,
    "list_cases": LIST_CASES_COLUMNS,
}

# Column order for case listings rendered as tables
CASE_TABLE_COLUMNS: Sequence[str] = (
    "case_id",
    "title",
    "project",
    "area",
    "status",
    "priority",
    "category",
    "is_open",
)

EVENT_TABLE_COLUMNS: Sequence[str] = (
    "event_type",
    "datetime",
    "person",
    "person_id",
    "assigned_to_id",
    "description",
    "content",
    "attachments",
)


@dataclass(slots=True)
class Settings:
    url: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    requests_per_second: float | None = None

    def __repr__(self) -> str:
        return (
            f"Settings(url={self.url!r}, api_key='********', timeout={self.timeout!r}, "
            f"requests_per_second={self.requests_per_second!r})"
        )


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``FOGBUGZ_*`` environment variables.

    Raises
    ------
    BuilderError
        If the URL or API key is missing or blank.
    ValueError
        If timeout or rate limit is not a number.
    """
    env = os.environ if environ is None else environ
    url = (env.get(ENV_URL) or "").strip()
    api_key = (env.get(ENV_API_KEY) or "").strip()
    if not url:
        raise BuilderError("url", f"Url is not specified (set {ENV_URL})")
    if not api_key:
        raise BuilderError("api_key", f"Api key is not specified (set {ENV_API_KEY})")
    timeout_raw = (env.get(ENV_TIMEOUT) or "").strip()
    rate_raw = (env.get(ENV_RATE_LIMIT) or "").strip()
    return Settings(
        url=url,
        api_key=api_key,
        timeout=float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS,
        requests_per_second=float(rate_raw) if rate_raw else None,
    )
