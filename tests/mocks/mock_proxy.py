"""Fake proxy client for testing without network access."""

from typing import Dict, List, Union

from zestd.core.exceptions import ProxyRequestError


class FakeProxyClient:
    """
    Stands in for ProxyClient.

    Routes map a substring of the target URL to a body string or to an
    exception instance to raise. The first matching route wins; targets with
    no route fail like a 404 from the proxy.
    """

    def __init__(self, routes: Dict[str, Union[str, Exception]] = None):
        self.routes: Dict[str, Union[str, Exception]] = dict(routes or {})
        self.requested: List[str] = []
        self.closed = False

    def add_route(self, fragment: str, response: Union[str, Exception]) -> None:
        self.routes[fragment] = response

    async def __aenter__(self) -> "FakeProxyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    async def fetch_text(self, target: str) -> str:
        self.requested.append(target)
        for fragment, response in self.routes.items():
            if fragment in target:
                if isinstance(response, Exception):
                    raise response
                return response
        raise ProxyRequestError(f"Proxy returned HTTP 404 for {target}", status=404, url=target)
