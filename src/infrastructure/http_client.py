"""Async HTTP client built on curl_cffi."""

from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from domain.exceptions import DataShapeError, TransportError
from infrastructure.config import HTTP_SETTINGS


class AsyncHTTPClient:
    """Posts JSON payloads with browser impersonation."""

    def __init__(
        self,
        impersonate: str = HTTP_SETTINGS["impersonate"],
        headers: dict[str, str] | None = None,
    ):
        """
        Initialize client.

        Args:
            impersonate: curl_cffi browser profile
            headers: Headers sent with every request
        """
        self.impersonate = impersonate
        self.headers = dict(HTTP_SETTINGS["headers"] if headers is None else headers)

    async def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        """
        POST ``payload`` as JSON and decode the JSON response.

        Raises:
            TransportError: If the request fails or the status is not 2xx
            DataShapeError: If the response body is not JSON
        """
        logger.debug(f"POST {url}")

        try:
            async with AsyncSession(impersonate=self.impersonate) as session:
                response = await session.post(url, json=payload, headers=self.headers)
        except CurlError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(None, f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"{url} answered with status {response.status_code}")
            raise TransportError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise DataShapeError(f"Response from {url} is not valid JSON") from e
