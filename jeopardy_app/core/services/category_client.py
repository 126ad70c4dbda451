"""HTTP client for the Jeopardy category service."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from jeopardy_app.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    FETCH_MAX_RETRIES,
    FETCH_RETRY_WAIT_SECONDS,
    FETCH_TIMEOUT_SECONDS,
)
from jeopardy_app.core.api_schemas import CategoryPayload, CategorySummaryPayload
from jeopardy_app.core.errors import InvalidCategoryData, RemoteServiceUnavailable
from jeopardy_app.core.models import CategoryDetail

logger = logging.getLogger(__name__)

_SUMMARY_LIST = TypeAdapter(list[CategorySummaryPayload])


def _is_transient(exc: BaseException) -> bool:
    """Return True if the exception is a network error worth retrying."""
    if isinstance(exc, httpx.TimeoutException):
        return True
    if isinstance(exc, httpx.ConnectError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in (429, 500, 502, 503)
    return False


class JeopardyApiClient:
    """Fetches category pools and category details.

    Every request gets its own ``httpx.AsyncClient`` so the client can be shared
    by builds that run on different event loops.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        max_retries: int = FETCH_MAX_RETRIES,
        retry_wait_seconds: float = FETCH_RETRY_WAIT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max(0, max_retries)
        self._retry_wait_seconds = retry_wait_seconds
        self._transport = transport

    @property
    def deadline(self) -> float:
        """Longest one fetch can take when every attempt times out.

        Callers that put their own timeout around a fetch should allow at least
        this much, otherwise the retries never get a chance to run.
        """
        cap = self._retry_wait_seconds * 8
        waits = sum(min(self._retry_wait_seconds * 2**n, cap) for n in range(self._max_retries))
        return (self._max_retries + 1) * self._timeout + waits

    async def fetch_category_ids(self, pool_size: int) -> list[int]:
        """Return the ids of up to ``pool_size`` categories offered by the service."""
        payload = await self._get_json("categories", {"count": pool_size})
        try:
            summaries = _SUMMARY_LIST.validate_python(payload)
        except ValidationError as exc:
            raise InvalidCategoryData(f"Malformed category list: {exc}") from exc
        return [summary.id for summary in summaries]

    async def fetch_category_detail(self, category_id: int) -> CategoryDetail:
        """Return the title and every clue of one category."""
        payload = await self._get_json("category", {"id": category_id})
        try:
            category = CategoryPayload.model_validate(payload)
        except ValidationError as exc:
            raise InvalidCategoryData(f"Malformed category {category_id}: {exc}") from exc
        return category.to_detail()

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        try:
            return await self._get_with_retry(path, params)
        except httpx.HTTPError as exc:
            raise RemoteServiceUnavailable(f"GET {self.base_url}/{path} failed: {exc!r}") from exc
        except ValueError as exc:
            raise InvalidCategoryData(f"GET {self.base_url}/{path} returned invalid JSON.") from exc

    async def _get_with_retry(self, path: str, params: dict[str, Any]) -> Any:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_exponential(
                multiplier=self._retry_wait_seconds,
                max=self._retry_wait_seconds * 8,
            ),
            retry=retry_if_exception(_is_transient),
            reraise=True,
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )
        async for attempt in retrying:
            with attempt:
                async with httpx.AsyncClient(
                    base_url=self.base_url,
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.get(f"/{path}", params=params)
                    response.raise_for_status()
                    return response.json()
