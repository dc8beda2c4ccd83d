"""Authenticated async HTTP client for the Wordfolio REST API.

The session (token type + access token) is passed in explicitly by whoever
owns it; this module never reads a global auth store.  Token storage and
refresh are the caller's concern.

Usage::

    async with AuthenticatedClient(base_url="https://wordfolio.example/api", token="...") as client:
        result = await create_entry(client, request, collection_id=1, vocabulary_id=2)
"""

from __future__ import annotations

import ssl
from typing import Any

import httpx
from attrs import define, evolve, field

from ..errors import NotAuthenticatedError


@define
class AuthenticatedClient:
    """A client which sends the session's Authorization header on every request

    The following are accepted as keyword arguments and will be used to construct httpx Clients internally:

        ``base_url``: The base URL for the API, all requests are made to a relative path to this URL

        ``timeout``: The maximum amount of a time a request can take. API functions will raise
        httpx.TimeoutException if this is exceeded.

        ``verify_ssl``: Whether or not to verify the SSL certificate of the API server.

        ``httpx_args``: A dictionary of additional arguments to be passed to the ``httpx.AsyncClient``
        constructor, e.g. ``{"transport": httpx.MockTransport(handler)}`` in tests.

    Attributes:
        raise_on_unexpected_status: Whether or not to raise an errors.UnexpectedStatus if an
            endpoint returns a success body that cannot be parsed.
        token: The access token issued at login. An empty token means no session.
        token_type: The scheme reported by the login endpoint, e.g. "Bearer".
    """

    raise_on_unexpected_status: bool = field(default=True, kw_only=True)
    _base_url: str = field(alias="base_url")
    _timeout: httpx.Timeout | None = field(default=None, kw_only=True, alias="timeout")
    _verify_ssl: str | bool | ssl.SSLContext = field(default=True, kw_only=True, alias="verify_ssl")
    _httpx_args: dict[str, Any] = field(factory=dict, kw_only=True, alias="httpx_args")
    _async_client: httpx.AsyncClient | None = field(default=None, init=False)

    token: str = field(default="", kw_only=True)
    token_type: str = field(default="Bearer", kw_only=True)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def auth_headers(self) -> dict[str, str]:
        """Return the headers every request carries.

        Raises:
            NotAuthenticatedError: If the client has no access token.
        """
        if not self.token:
            raise NotAuthenticatedError()
        return {
            "Content-Type": "application/json",
            "Authorization": f"{self.token_type} {self.token}",
        }

    def with_token(self, token: str, token_type: str | None = None) -> "AuthenticatedClient":
        """Get a new client for a refreshed session. The underlying httpx client is not shared."""
        return evolve(self, token=token, token_type=token_type or self.token_type)

    def set_async_httpx_client(self, async_client: httpx.AsyncClient) -> "AuthenticatedClient":
        """Manually set the underlying httpx.AsyncClient

        **NOTE**: This will override any other settings on the client, including cookies, headers, and timeout.
        """
        self._async_client = async_client
        return self

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx.AsyncClient, constructing a new one if not previously set"""
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                verify=self._verify_ssl,
                **self._httpx_args,
            )
        return self._async_client

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send an authenticated request relative to ``base_url``."""
        headers = self.auth_headers()
        return await self.get_async_httpx_client().request(method, url, headers=headers, **kwargs)

    async def aclose(self) -> None:
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None

    async def __aenter__(self) -> "AuthenticatedClient":
        """Enter a context manager for the underlying httpx.AsyncClient—you cannot enter twice (see httpx docs)"""
        await self.get_async_httpx_client().__aenter__()
        return self

    async def __aexit__(self, *args: Any, **kwargs: Any) -> None:
        """Exit a context manager for the underlying httpx.AsyncClient (see httpx docs)"""
        await self.get_async_httpx_client().__aexit__(*args, **kwargs)
        self._async_client = None
