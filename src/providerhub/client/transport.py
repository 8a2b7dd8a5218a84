from __future__ import annotations

import uuid
from typing import Any, Dict, Optional, Protocol

import httpx

from providerhub.client.types import HttpRequest, HttpResponse
from providerhub.core.exceptions import TransportError
from providerhub.core.logger import get_logger, push_request_id, reset_request_id
from providerhub.models.client_config import ClientSettings

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-ms-client-request-id"


class Transport(Protocol):
    def send(self, request: HttpRequest) -> HttpResponse:
        ...


class HttpxTransport:
    """``Transport`` over a synchronous ``httpx.Client``.

    No retries and no authentication: callers wrap or configure those
    around it (e.g. via ``settings.headers``).
    """

    def __init__(
        self,
        settings: ClientSettings,
        *,
        client: Optional[httpx.Client] = None,
    ):
        self.settings = settings
        self._client = client or httpx.Client(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            headers=dict(settings.headers),
        )

    def send(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers)
        request_id = headers.setdefault(REQUEST_ID_HEADER, str(uuid.uuid4()))
        params = {"api-version": self.settings.api_version} if self.settings.api_version else None

        token = push_request_id(request_id)
        try:
            logger.debug(f"{request.method} {request.url}")
            try:
                resp = self._client.request(
                    request.method,
                    request.url,
                    json=request.body,
                    headers=headers,
                    params=params,
                )
            except httpx.HTTPError as e:
                raise TransportError(f"{request.method} {request.url} failed: {e}") from e

            logger.debug(f"{request.method} {request.url} -> {resp.status_code}")
            return HttpResponse(
                status_code=resp.status_code,
                body=self._parse_body(resp),
                headers=dict(resp.headers),
            )
        finally:
            reset_request_id(token)

    @staticmethod
    def _parse_body(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            content_type = resp.headers.get("content-type", "unknown")
            raise TransportError(
                "Failed to parse response as JSON. "
                f"Status: {resp.status_code}, Content-Type: {content_type}. "
                f"Response preview: {resp.text[:500]}",
                status_code=resp.status_code,
            ) from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
