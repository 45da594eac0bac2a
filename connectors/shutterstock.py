"""
ShutterstockConnector — OAuth2 authorization-code flow for the Shutterstock API.

Tokens are requested with ``expires=false`` and no refresh token is issued,
so there is no refresh or revocation step.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List
from urllib.parse import urlencode

from connectors.base import BaseConnector
from connectors.models import Connection

logger = logging.getLogger(__name__)

# Shutterstock endpoints
_SS_API = "https://api.shutterstock.com"
_SS_AUTH_URL = f"{_SS_API}/v2/oauth/authorize"
_SS_TOKEN_URL = f"{_SS_API}/v2/oauth/access_token"
_SS_TEST_URL = f"{_SS_API}/v2/test?text=helloWorkato"

# Registered callback for the OAuth app; the provider rejects any other value.
_REDIRECT_URI = "https://www.workato.com/oauth/callback"


class ShutterstockConnector(BaseConnector):
    """OAuth2 connector for Shutterstock."""

    @property
    def provider_name(self) -> str:
        return "shutterstock"

    @property
    def display_name(self) -> str:
        return "Shutterstock"

    @property
    def scopes(self) -> List[str]:
        return [
            "user.view",
            "user.edit",
            "collections.view",
            "collections.edit",
            "licenses.view",
            "licenses.create",
            "earnings.view",
            "media.upload",
            "media.submit",
            "media.edit",
            "purchases.view",
            "reseller.view",
            "reseller.purchase",
        ]

    @property
    def icon(self) -> str:
        return "📷"

    def authorization_url(self, connection: Connection) -> str:
        params = {
            "client_id": connection["client_id"],
            "redirect_uri": _REDIRECT_URI,
            "response_type": "code",
            "scope": " ".join(self.scopes),
            "state": "",
        }
        return f"{_SS_AUTH_URL}?{urlencode(params)}"

    async def acquire(self, connection: Connection, auth_code: str) -> Dict[str, Any]:
        """Exchange auth code for a non-expiring access token."""
        async with self.http_client() as client:
            resp = await client.post(
                _SS_TOKEN_URL,
                data={
                    "client_id": connection["client_id"],
                    "client_secret": connection["client_secret"],
                    "grant_type": "authorization_code",
                    "expires": "false",
                    "code": auth_code,
                },
            )
            resp.raise_for_status()
            data = resp.json()

        if not isinstance(data, dict) or not data.get("access_token"):
            raise ValueError("Shutterstock token response has no access_token")

        logger.info("Acquired Shutterstock token for client %s", connection["client_id"])
        return {"access_token": data["access_token"]}

    def apply(self, connection: Connection, access_token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}

    def base_uri(self, connection: Connection) -> str:
        return _SS_API

    async def test(self, connection: Connection, access_token: str) -> Any:
        async with self.client(connection, access_token) as client:
            resp = await client.get(_SS_TEST_URL)
            resp.raise_for_status()
            # Success is the status alone; the body may be empty or non-JSON.
            if not resp.content:
                return None
            if "json" in resp.headers.get("content-type", ""):
                return resp.json()
            return resp.text
