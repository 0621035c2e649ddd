"""Async HTTP client for the lesson shop API."""

from typing import Any

import httpx

from shared.logging import get_logger
from storefront.config import api_url
from storefront.errors import ServiceUnavailableError
from storefront.models import Lesson

logger = get_logger(__name__)


class LessonShopClient:
    """Thin client over the catalogue and ordering endpoints.

    Transport failures and error statuses are raised as
    ``ServiceUnavailableError``. No retries; default httpx timeouts apply.
    """

    def __init__(self, base_url: str | None = None, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = (base_url or api_url()).rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, transport=transport)

    async def __aenter__(self) -> "LessonShopClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("api_error_status", method=method, path=path, status_code=exc.response.status_code)
            raise ServiceUnavailableError(
                f"{method} {path} failed with status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("api_unreachable", method=method, path=path, error=str(exc))
            raise ServiceUnavailableError(f"{method} {path} failed: {exc}") from exc
        return response.json()

    # ---------- catalogue ----------
    async def fetch_lessons(self) -> list[Lesson]:
        payload = await self._request("GET", "/lessons")
        return [Lesson.from_payload(item) for item in payload]

    async def search_lessons(self, text: str) -> list[Lesson]:
        payload = await self._request("GET", "/search", params={"q": text})
        return [Lesson.from_payload(item) for item in payload]

    async def update_lesson(self, lesson_id: str, fields: dict[str, Any]) -> None:
        await self._request("PUT", f"/lessons/{lesson_id}", json=fields)

    # ---------- ordering ----------
    async def create_order(self, order: dict[str, Any]) -> str:
        payload = await self._request("POST", "/orders", json=order)
        return payload["order_id"]
