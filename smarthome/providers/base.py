import logging
from typing import Any, Optional, Tuple

import httpx
from pydantic import TypeAdapter

from smarthome.errors import DecodeError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

class UpstreamProvider:
    """Base for typed clients of an upstream HTTP service.

    The underlying AsyncClient is built once and shared by every request;
    its settings are never changed afterwards.
    """

    resource = "upstream"

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        ok_statuses: Tuple[int, ...] = (200,),
        action: str = "fetching",
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"{method} {self.base_url}{path} failed: {str(e)!r}")
            raise TransportError(f"error {action} {self.resource} data: {e!r}") from e

        if response.status_code not in ok_statuses:
            logger.error(f"{method} {self.base_url}{path} returned {response.status_code}")
            raise UpstreamStatusError(response.status_code)
        return response

    def _decode(self, response: httpx.Response, shape: Any) -> Any:
        try:
            return TypeAdapter(shape).validate_python(response.json())
        except ValueError as e:
            raise DecodeError(f"error decoding {self.resource} response: {e}") from e
