"""Base HTTP client built on httpx."""

import logging
import typing

import httpx

from package_version_check import version

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class BaseURLHTTPClient:
    """Async HTTP client bound to a base URL.

    Wraps :class:`httpx.AsyncClient` and is used as an async context
    manager so the underlying connection pool is always closed.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.http_client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                'User-Agent': f'package-version-check/{version}',
                **(headers or {}),
            },
            timeout=DEFAULT_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> typing.Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def get(self, path: str, **kwargs: typing.Any) -> httpx.Response:
        response = await self.http_client.get(path, **kwargs)
        LOGGER.debug(
            'GET %s returned %s', response.request.url, response.status_code
        )
        return response
