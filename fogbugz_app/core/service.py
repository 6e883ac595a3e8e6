"""CaseService: fetch cases through the request records and tabulate them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import pandas as pd

from .columns import Column
from .config import TIMEZONE
from .endpoints import CaseDetailsRequest, SearchRequest
from .fogbugz_client import FogBugzAPI
from .mappers import cases_to_dataframe, events_to_dataframe
from .models import CaseDetails
from .query import Query, QueryBuilder, as_query

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def export_csv(frame: pd.DataFrame) -> str:
    """Render a case or event table as CSV text (no index column)."""
    return frame.to_csv(index=False)


class CaseService:
    def __init__(self, api: FogBugzAPI, *, timezone: str = TIMEZONE):
        self.api = api
        self.timezone = timezone

    # ------------------ Fetch Methods ------------------
    def fetch_case(
        self,
        case_id: int,
        columns: Sequence[Column] | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> CaseDetails:
        if progress:
            progress(f"Fetching details for case {case_id}")
        if columns is None:
            request = CaseDetailsRequest(self.api, case_id)
        else:
            request = CaseDetailsRequest(self.api, case_id, tuple(columns))
        return request.send()

    def fetch_case_events_frame(self, case_id: int, *, progress: ProgressCallback | None = None) -> pd.DataFrame:
        case = self.fetch_case(case_id, progress=progress)
        return events_to_dataframe(case, self.timezone)

    def search_frame(
        self,
        query: Query | QueryBuilder,
        columns: Sequence[Column] | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> pd.DataFrame:
        q = as_query(query)
        if progress:
            progress(f"Searching cases: {q.render() or '(all)'}")
        if columns is None:
            request = SearchRequest(self.api, q)
        else:
            request = SearchRequest(self.api, q, tuple(columns))
        cases = request.send()
        logger.debug("Search returned %d cases", len(cases))
        df = cases_to_dataframe(cases)
        if df.empty:
            return df
        return df.sort_values(by="case_id", ascending=True, ignore_index=True)

    def export_search_csv(self, query: Query | QueryBuilder, columns: Sequence[Column] | None = None) -> str:
        return export_csv(self.search_frame(query, columns))
