"""
BaseConnector — abstract interface for all OAuth2 connectors.

A connector is a descriptor: it declares the connection fields a user must
fill in and supplies the transition functions the host calls during the
authorization-code lifecycle (authorize → acquire → apply).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from config.settings import config
from connectors.models import Connection, ConnectionField


class BaseConnector(ABC):
    """Abstract base for all OAuth2 connectors."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        # Tests inject an httpx.MockTransport here.
        self._transport = transport

    # ── Identity ────────────────────────────────────────────────────────
    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique slug, e.g. 'shutterstock'."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        ...

    @property
    @abstractmethod
    def scopes(self) -> List[str]:
        """OAuth scopes requested by this connector."""
        ...

    @property
    def icon(self) -> str:
        """Optional emoji / icon for UI."""
        return "🔗"

    @property
    def fields(self) -> List[ConnectionField]:
        """Connection inputs; OAuth2 connectors need a client id and secret."""
        return [
            ConnectionField(name="client_id", label="Client ID"),
            ConnectionField(
                name="client_secret",
                label="Client secret",
                control_type="password",
            ),
        ]

    # ── OAuth flow ──────────────────────────────────────────────────────

    @abstractmethod
    def authorization_url(self, connection: Connection) -> str:
        """
        Build the provider's OAuth2 authorization URL.

        Pure string construction; no network call.
        """
        ...

    @abstractmethod
    async def acquire(self, connection: Connection, auth_code: str) -> Dict[str, Any]:
        """
        Exchange the authorization code for an access token.

        Returns
        -------
        dict with key ``access_token``.
        """
        ...

    @abstractmethod
    def apply(self, connection: Connection, access_token: str) -> Dict[str, str]:
        """Headers to attach to every request made through the connection."""
        ...

    @abstractmethod
    def base_uri(self, connection: Connection) -> str:
        ...

    @abstractmethod
    async def test(self, connection: Connection, access_token: str) -> Any:
        """Issue the connectivity check; success is decided by HTTP status."""
        ...

    # ── Helpers ─────────────────────────────────────────────────────────

    def http_client(self, **kwargs: Any) -> httpx.AsyncClient:
        """Unauthenticated client for calls such as the token exchange."""
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=config.http_timeout_seconds,
            **kwargs,
        )

    def client(self, connection: Connection, access_token: str) -> httpx.AsyncClient:
        """Client bound to the base URI with ``apply`` headers on every request."""
        return self.http_client(
            base_url=self.base_uri(connection),
            headers=self.apply(connection, access_token),
        )
