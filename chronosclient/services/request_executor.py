"""
Request executor.

Single point where the gateway touches the network. Every facade call goes
through RequestExecutor.request(), which attaches JSON headers and the
optional bearer credential, classifies failures, and decodes JSON bodies.

No retries happen here: a failure propagates to the caller as-is.
"""

import logging
from typing import Any

import httpx

from chronosclient.config import settings
from chronosclient.models.failure import DecodeError, HttpError, TransportError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class RequestExecutor:
    """
    Issues HTTP calls against the backend.

    Uses the injected httpx.AsyncClient when given one, otherwise opens a
    short-lived client per call.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the executor.

        Args:
            base_url: Backend base URL. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout.
            client: Optional shared httpx client for connection reuse.
        """
        base = settings.api_base_url if base_url is None else base_url
        self.base_url = base.rstrip("/")
        self.timeout = settings.request_timeout if timeout is None else timeout
        self._client = client

    def build_headers(self, token: str | None = None) -> dict[str, str]:
        headers = {"Content-Type": JSON_CONTENT_TYPE}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        token: str | None = None,
    ) -> Any:
        """
        Send a request and decode the response.

        Args:
            path: Path relative to the base URL (e.g. "/game/state/g1")
            method: HTTP method
            body: JSON-serializable request body
            token: Bearer credential

        Returns:
            Parsed JSON when the response is JSON, otherwise None

        Raises:
            HttpError: On a non-2xx status
            DecodeError: If a JSON response cannot be parsed
            TransportError: If no response arrives
        """
        method = method.upper()
        response = await self._send(path, method, body, token)

        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE not in content_type:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning(
                "response_decode_failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise DecodeError(method, path, _read_body(response), reason=str(e)) from e

    async def request_text(self, path: str, token: str | None = None) -> str:
        """
        GET a plain-text endpoint.

        Raises:
            HttpError: On a non-2xx status
            TransportError: If no response arrives
        """
        response = await self._send(path, "GET", None, token)
        return _read_body(response)

    async def _send(self, path: str, method: str, body: Any, token: str | None) -> httpx.Response:
        url = f"{self.base_url}{path}"
        headers = self.build_headers(token)
        logger.debug("%s %s", method, path)

        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, headers=headers, json=body, follow_redirects=True
                )
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, follow_redirects=True
                ) as client:
                    response = await client.request(method, url, headers=headers, json=body)
        except httpx.RequestError as e:
            logger.warning(
                "request_transport_failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise TransportError(method, path, str(e) or type(e).__name__) from e

        if not response.is_success:
            body_text = _read_body(response)
            logger.warning(
                "request_failed",
                extra={"method": method, "path": path, "status": response.status_code},
            )
            raise HttpError(method, path, response.status_code, body_text)

        return response


def _read_body(response: httpx.Response) -> str:
    """Best-effort body text; empty string when it cannot be read."""
    try:
        return response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
        return ""
