"""Call context shared by the tools of one registry.

A ``CmsContext`` is built once (usually from settings) and handed to each
tool at construction. It is immutable; every invocation opens its own
``httpx.AsyncClient`` from it, so concurrent calls share nothing mutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from .auth import AuthProvider, ClientCredentialsAuth, NoAuth
from .config import XiboSettings, get_settings


@dataclass(frozen=True, slots=True)
class CmsContext:
    """Settings, auth strategy and optional transport for CMS calls.

    Example:
        >>> ctx = CmsContext.from_settings()
        >>> async with ctx.client() as client:
        ...     ...

        # Tests swap the network for an in-process fake:
        >>> ctx = CmsContext(settings, auth=BearerAuth(token="t"), transport=httpx.MockTransport(handler))
    """

    settings: XiboSettings
    auth: AuthProvider = field(default_factory=NoAuth)
    transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_settings(
        cls,
        settings: XiboSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> CmsContext:
        """Production context: client-credentials auth when credentials are configured."""
        settings = settings or get_settings()
        auth: AuthProvider
        if settings.client_id and settings.client_secret.get_secret_value():
            auth = ClientCredentialsAuth(
                token_url=settings.token_url,
                client_id=settings.client_id,
                client_secret=settings.client_secret,
            )
        else:
            auth = NoAuth()
        return cls(settings=settings, auth=auth, transport=transport)

    @property
    def cms_url(self) -> str:
        return self.settings.cms_url

    def client(self) -> httpx.AsyncClient:
        """Fresh client for a single invocation; use as an async context manager."""
        http = self.settings.http
        return httpx.AsyncClient(
            timeout=http.timeout,
            verify=http.verify_ssl,
            transport=self.transport,
            headers={"User-Agent": http.user_agent, "Accept": "application/json"},
        )
