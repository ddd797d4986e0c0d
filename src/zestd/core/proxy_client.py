"""Async HTTP client that routes every request through a read-through CORS proxy."""

import asyncio
import time
from typing import Optional
from urllib.parse import quote

import aiohttp

from .config import config
from .exceptions import ProxyRequestError
from ..utils.logging import get_logger

logger = get_logger("proxy_client")


class ProxyClient:
    """
    Fetches third-party URLs via `GET {proxy_base}?url=<target>&timestamp=<ms>`.

    The proxy returns the target body verbatim. Every fetch is bounded by an
    aiohttp ClientTimeout; cancelling the awaiting task aborts the fetch.
    """

    def __init__(
        self,
        proxy_base: Optional[str] = None,
        timeout_total: Optional[float] = None,
        timeout_connect: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.proxy_base = proxy_base or config.network.proxy_base_url
        self.timeout = aiohttp.ClientTimeout(
            total=timeout_total or config.network.http_timeout_total,
            connect=timeout_connect or config.network.http_timeout_connect
        )
        self.user_agent = user_agent or config.network.user_agent
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "ProxyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={'User-Agent': self.user_agent}
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_proxy_url(self, target: str) -> str:
        """Wrap a target URL in the proxy endpoint with a cache-busting timestamp."""
        timestamp = int(time.time() * 1000)
        return f"{self.proxy_base}?url={quote(target, safe='')}&timestamp={timestamp}"

    async def fetch_text(self, target: str) -> str:
        """
        Fetch the body of `target` through the proxy.

        Raises:
            ProxyRequestError: on a non-success status or any transport failure
        """
        proxy_url = self.build_proxy_url(target)
        session = await self._get_session()
        logger.debug(f"GET {target} via proxy")

        try:
            async with session.get(proxy_url) as response:
                if response.status < 200 or response.status >= 300:
                    raise ProxyRequestError(
                        f"Proxy returned HTTP {response.status} for {target}",
                        status=response.status,
                        url=target
                    )
                return await response.text()
        except asyncio.TimeoutError as e:
            raise ProxyRequestError(f"Timed out fetching {target} via proxy", url=target) from e
        except aiohttp.ClientError as e:
            raise ProxyRequestError(f"Failed to reach {target} via proxy: {e}", url=target) from e
