"""
WaniKani API v2 client.

Thin synchronous wrapper around httpx for the three read endpoints the
status line needs. Requests are never retried: a failed request is
reported back as an ApiResult carrying an ApiFailure, and the caller
decides what to print.

Usage:
    with WaniKaniClient(api_token) as client:
        result = client.fetch_collection("assignments")
        if result.success:
            records = result.data
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from loguru import logger

from .config import DEFAULT_API_BASE_URL

# Pin the API revision so response shapes do not change under us
API_REVISION = "20170710"

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_PAGES = 1000


class FailureKind(str, Enum):
    """Classes of request failure, each with its own message on the menu."""

    UNAUTHORIZED = "unauthorized"
    SERVER_ERROR = "server_error"
    CONNECTION = "connection"
    OTHER = "other"


@dataclass(frozen=True)
class ApiFailure:
    """Why a request did not produce data."""

    kind: FailureKind
    message: str
    status_code: int | None = None
    url: str | None = None

    @classmethod
    def from_response(cls, response: httpx.Response, url: str | None = None) -> ApiFailure:
        status = response.status_code
        if status == httpx.codes.UNAUTHORIZED:
            kind = FailureKind.UNAUTHORIZED
        elif 500 <= status < 600:
            kind = FailureKind.SERVER_ERROR
        else:
            kind = FailureKind.OTHER
        return cls(
            kind=kind,
            message=response.reason_phrase or f"HTTP {status}",
            status_code=status,
            url=url,
        )


@dataclass(frozen=True)
class ApiResult:
    """Tagged outcome of a fetch: data on success, failure otherwise."""

    success: bool
    data: Any = None
    failure: ApiFailure | None = None

    @classmethod
    def ok(cls, data: Any) -> ApiResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, failure: ApiFailure) -> ApiResult:
        return cls(success=False, failure=failure)


class WaniKaniClient:
    """HTTP client for the WaniKani v2 API."""

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        """
        Initialize WaniKani client.

        Args:
            api_token: Personal access token, sent as a bearer token
            base_url: API root; resource paths are resolved against it
            timeout: Connect/read timeout in seconds
            max_pages: Stop following next_url after this many pages
        """
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.max_pages = max_pages
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Wanikani-Revision": API_REVISION,
            },
            timeout=httpx.Timeout(timeout),
        )

    def __enter__(self) -> WaniKaniClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    # =========================================================================
    # Requests
    # =========================================================================

    def get(self, url: str) -> ApiResult:
        """
        GET a resource and decode its JSON body.

        Args:
            url: Path relative to base_url, or an absolute URL (pagination links)

        Returns:
            ApiResult with the decoded body, or the failure
        """
        logger.debug("GET {}", url)
        try:
            response = self.client.get(url)
        except httpx.RequestError as e:
            logger.warning("Request to {} failed: {}", url, e)
            return ApiResult.fail(
                ApiFailure(kind=FailureKind.CONNECTION, message=str(e) or type(e).__name__, url=url)
            )

        if not response.is_success:
            failure = ApiFailure.from_response(response, url)
            logger.warning("WaniKani returned {} {} for {}", failure.status_code, failure.message, url)
            return ApiResult.fail(failure)

        try:
            return ApiResult.ok(response.json())
        except ValueError as e:
            logger.warning("Invalid JSON from {}: {}", url, e)
            return ApiResult.fail(
                ApiFailure(
                    kind=FailureKind.OTHER,
                    message="Invalid response from WaniKani",
                    status_code=response.status_code,
                    url=url,
                )
            )

    def fetch_collection(self, path: str) -> ApiResult:
        """
        Fetch every page of a collection endpoint.

        Follows ``pages.next_url`` until the server stops returning one.
        A next_url that was already requested, or exceeding max_pages,
        ends the walk with a warning instead of looping forever.

        Args:
            path: Collection path, e.g. "assignments"

        Returns:
            ApiResult whose data is the concatenated ``data`` arrays of all pages
        """
        records: list[dict[str, Any]] = []
        seen: set[str] = set()
        url: str | None = path
        pages = 0

        while url is not None:
            # next_url is absolute while the first request is relative
            key = str(self.client.base_url.join(url))
            if key in seen:
                logger.warning("Pagination for {} revisited {}; stopping", path, url)
                break
            if pages >= self.max_pages:
                logger.warning("Pagination for {} exceeded {} pages; stopping", path, self.max_pages)
                break
            seen.add(key)

            result = self.get(url)
            if not result.success:
                return result

            page = result.data
            batch = page.get("data", [])
            records.extend(batch)
            pages += 1
            logger.debug("Fetched page {} of {} ({} records)", pages, path, len(batch))

            url = (page.get("pages") or {}).get("next_url")

        logger.info("Fetched {} {} records over {} pages", len(records), path, pages)
        return ApiResult.ok(records)

    # =========================================================================
    # Endpoints
    # =========================================================================

    def fetch_assignments(self) -> ApiResult:
        """All assignments of the user (paginated)."""
        return self.fetch_collection("assignments")

    def fetch_user(self) -> ApiResult:
        """The /user resource."""
        return self.get("user")

    def fetch_summary(self) -> ApiResult:
        """The /summary report (lessons and upcoming reviews)."""
        return self.get("summary")
