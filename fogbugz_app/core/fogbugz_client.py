"""FogBugz JSON API client wrapper (bearer auth + optional throttle)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin, urlparse

import requests

from .config import DEFAULT_TIMEOUT_SECONDS, Settings
from .endpoints import (
    CaseDetailsRequestBuilder,
    ListCasesRequestBuilder,
    ListIntervalsRequestBuilder,
    SearchRequestBuilder,
)
from .errors import BuilderError, DecodeError, TransportError
from .rate_limit import Limiter, TokenBucket

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ApiResponse:
    ok: bool
    status_code: int
    payload: Any


class FogBugzAPI:
    def __init__(
        self,
        url: str,
        api_key: str,
        *,
        session: requests.Session | None = None,
        limiter: Limiter | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        if not url:
            raise BuilderError("url", "Url is not specified")
        if not api_key:
            raise BuilderError("api_key", "Api key is not specified")
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.limiter = limiter
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings, *, session: requests.Session | None = None) -> FogBugzAPI:
        limiter = TokenBucket(settings.requests_per_second) if settings.requests_per_second else None
        return cls(
            settings.url,
            settings.api_key,
            session=session,
            limiter=limiter,
            timeout=settings.timeout,
        )

    def __repr__(self) -> str:
        return f"FogBugzAPI(url={self.url!r}, api_key='********')"

    def endpoint_url(self, endpoint: str) -> str:
        parsed = urlparse(self.url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise TransportError(f"Malformed FogBugz URL: {self.url!r}")
        return urljoin(self.url + "/", endpoint)

    def post(self, endpoint: str, payload: dict[str, Any]) -> ApiResponse:
        """POST a JSON payload and return the decoded response.

        Non-success statuses are returned, not raised; see
        normalizer.check_response. A success body that is not JSON raises
        DecodeError. A failure body that is not JSON is kept as text.
        """
        url = self.endpoint_url(endpoint)
        if self.limiter is not None:
            self.limiter.acquire()
        logger.debug("POST %s (%d cols)", endpoint, len(payload.get("cols") or ()))
        try:
            resp = self.session.post(
                url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request to {endpoint} failed: {exc}") from exc
        ok = 200 <= resp.status_code < 300
        try:
            body = resp.json()
        except ValueError as exc:
            if ok:
                raise DecodeError(f"response from {endpoint} is not JSON") from exc
            body = resp.text
        return ApiResponse(ok=ok, status_code=resp.status_code, payload=body)

    # ------------------ Request Builders ------------------
    def case_details(self) -> CaseDetailsRequestBuilder:
        return CaseDetailsRequestBuilder().api(self)

    def search(self) -> SearchRequestBuilder:
        return SearchRequestBuilder().api(self)

    def list_cases(self) -> ListCasesRequestBuilder:
        return ListCasesRequestBuilder().api(self)

    def list_intervals(self) -> ListIntervalsRequestBuilder:
        return ListIntervalsRequestBuilder().api(self)
