"""Authentication strategies for CMS requests.

Each strategy produces the headers for one request. ``ClientCredentialsAuth``
exchanges the configured client id/secret for a bearer token on every call;
nothing is cached between invocations.

Secrets are held as SecretStr and masked in JSON serialization.
"""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_serializer

from .errors import AuthError, decode_error_message, parse_body


@runtime_checkable
class AuthProvider(Protocol):
    """Anything that can produce request headers using the call's client."""

    async def headers(self, client: httpx.AsyncClient) -> dict[str, str]: ...


class NoAuth(BaseModel):
    """No authentication (public endpoints such as Open-Meteo)."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    auth_type: Literal["none"] = "none"

    async def headers(self, client: httpx.AsyncClient) -> dict[str, str]:
        return {}


class BearerAuth(BaseModel):
    """Pre-issued bearer token."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    auth_type: Literal["bearer"] = "bearer"
    token: SecretStr = Field(..., description="Bearer token value")

    async def headers(self, client: httpx.AsyncClient) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token.get_secret_value()}"}

    @field_serializer("token", when_used="json")
    def _mask_token(self, v: SecretStr) -> str:
        secret = v.get_secret_value()
        return f"{secret[:4]}...{secret[-4:]}" if len(secret) > 8 else "***"


class ClientCredentialsAuth(BaseModel):
    """OAuth2 client-credentials grant against the CMS token endpoint.

    Example:
        >>> auth = ClientCredentialsAuth(
        ...     token_url="https://cms.example.com/api/authorize/access_token",
        ...     client_id="abc", client_secret="s3cret",
        ... )
        >>> await auth.headers(client)
        {'Authorization': 'Bearer eyJ...'}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
    auth_type: Literal["client_credentials"] = "client_credentials"
    token_url: str
    client_id: str
    client_secret: SecretStr

    async def headers(self, client: httpx.AsyncClient) -> dict[str, str]:
        token = await self.fetch_token(client)
        return {"Authorization": f"Bearer {token}"}

    async def fetch_token(self, client: httpx.AsyncClient) -> str:
        """POST the grant and return the access token.

        Raises:
            AuthError: non-2xx answer, or a body without ``access_token``
        """
        body = urlencode({
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret.get_secret_value(),
        })
        response = await client.post(
            self.token_url,
            content=body,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        if not response.is_success:
            raise AuthError(
                f"Failed to obtain access token: {response.status_code} {decode_error_message(response.text)}".rstrip(),
                status_code=response.status_code,
                body=response.text,
            )
        payload = parse_body(response.content)
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthError("Token response did not contain an access_token", status_code=response.status_code)
        return token

    @field_serializer("client_secret", when_used="json")
    def _mask_secret(self, v: SecretStr) -> str:
        return "***"

