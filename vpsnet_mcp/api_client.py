from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .config import UpstreamConfig
from .errors import UpstreamTransportError

logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "POST", "DELETE"})


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    data: Any


class VpsNetClient:
    """
    Thin async wrapper around the VPSnet REST API.

    Executes exactly one HTTP request per `send()` call and hands back the
    status code together with the best-effort decoded JSON body. Error
    statuses are not interpreted here; the body is returned as-is so the
    caller sees the upstream error payload. There is no retry.
    """

    def __init__(
        self,
        config: UpstreamConfig,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "X-API-KEY": config.api_key,
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def send(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """
        Send one request to `base_url + path`.

        `body`, when given, is serialized as JSON with a JSON content type.
        Network-level failures are raised as `UpstreamTransportError`.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method '{method}'")

        kwargs: Dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body

        try:
            request = self._client.build_request(method, path, **kwargs)
            response = await self._client.send(request, stream=True)
        except (httpx.InvalidURL, httpx.RequestError) as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise UpstreamTransportError(method, path, exc) from exc

        try:
            data = await _read_json(response)
        except httpx.RequestError as exc:
            logger.error("%s %s failed while reading body: %s", method, path, exc)
            raise UpstreamTransportError(method, path, exc) from exc
        finally:
            await response.aclose()

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return ApiResponse(status_code=response.status_code, data=data)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "VpsNetClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


async def _read_json(response: httpx.Response) -> Any:
    # Empty, non-JSON and undecodable (bad Content-Encoding) bodies all read as None.
    try:
        await response.aread()
    except httpx.DecodingError:
        return None
    try:
        return response.json()
    except ValueError:
        return None
