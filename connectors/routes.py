"""
Connector API routes — field declarations, auth URL, token exchange, connection test.

Route prefix: /api/v1/connectors

These routes are a thin host runtime: they validate the connection, call the
connector's transition functions in lifecycle order and translate upstream
failures into HTTP errors.  Nothing is persisted; the caller owns the
connection and the access token.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from connectors.base import BaseConnector
from connectors.models import Connection, ConnectionField
from connectors.registry import ConnectorRegistry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["connectors"])


class AuthUrlRequest(BaseModel):
    connection: Connection


class TokenRequest(BaseModel):
    connection: Connection
    code: str = Field(..., min_length=1)


class ConnectionTestRequest(BaseModel):
    connection: Connection
    access_token: str = Field(..., min_length=1)


def _get_connector(provider: str) -> BaseConnector:
    connector = ConnectorRegistry().get(provider)
    if not connector:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Provider '{provider}' not found",
        )
    return connector


def _upstream_error(provider: str, step: str, exc: Exception) -> HTTPException:
    if isinstance(exc, httpx.HTTPStatusError):
        detail = f"{provider} {step} failed: upstream returned {exc.response.status_code}"
    else:
        detail = f"{provider} {step} failed: {exc}"
    logger.error(detail)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


# ── Routes ─────────────────────────────────────────────────────────────


@router.get("/providers")
async def list_providers() -> list[dict]:
    """List all registered connector providers."""
    return ConnectorRegistry().list_providers()


@router.get("/{provider}/fields")
async def list_fields(provider: str) -> List[ConnectionField]:
    """Connection inputs the UI should render; password fields are masked."""
    return _get_connector(provider).fields


@router.post("/{provider}/auth-url")
async def get_auth_url(provider: str, body: AuthUrlRequest) -> Dict[str, str]:
    """
    Build the OAuth authorization URL for a provider.

    Frontend should open this URL in a browser window.
    """
    connector = _get_connector(provider)
    return {"auth_url": connector.authorization_url(body.connection), "provider": provider}


@router.post("/{provider}/token")
async def acquire_token(provider: str, body: TokenRequest) -> Dict[str, Any]:
    """Exchange the authorization code returned to the callback for a token."""
    connector = _get_connector(provider)
    try:
        return await connector.acquire(body.connection, body.code)
    except (httpx.HTTPError, ValueError) as exc:
        raise _upstream_error(provider, "token exchange", exc) from exc


@router.post("/{provider}/test")
async def test_connection(provider: str, body: ConnectionTestRequest) -> Dict[str, Any]:
    """Run the connector's connectivity check with the supplied token."""
    connector = _get_connector(provider)
    try:
        result = await connector.test(body.connection, body.access_token)
    except (httpx.HTTPError, ValueError) as exc:
        raise _upstream_error(provider, "connection test", exc) from exc

    logger.info("Connection test passed for %s", provider)
    return {"status": "ok", "provider": provider, "result": result}
