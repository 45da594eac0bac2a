"""
ConnectorRegistry — discovers and provides access to all connectors.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from connectors.base import BaseConnector
from connectors.shutterstock import ShutterstockConnector

logger = logging.getLogger(__name__)

# ── All known connectors — add new ones here ─────────────────────────────

_ALL_CONNECTORS: List[BaseConnector] = [
    ShutterstockConnector(),
]


class ConnectorRegistry:
    """Singleton registry for all OAuth connectors."""

    _instance: Optional["ConnectorRegistry"] = None

    def __new__(cls) -> "ConnectorRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._connectors = {}
            cls._instance._discovered = False
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Destroy singleton — only useful in test teardown."""
        cls._instance = None

    def register(self, connector: BaseConnector) -> None:
        """Register (or replace) a connector under its provider name."""
        self._connectors[connector.provider_name] = connector
        logger.info(
            "Connector registered: %s (%s)",
            connector.display_name,
            connector.provider_name,
        )

    def discover(self) -> None:
        """Register every known connector once."""
        if self._discovered:
            return
        for conn in _ALL_CONNECTORS:
            self.register(conn)
        self._discovered = True

    def get(self, provider: str) -> Optional[BaseConnector]:
        """Get a connector by provider name."""
        return self._connectors.get(provider)

    def list_providers(self) -> List[Dict[str, object]]:
        """Return info about all registered connectors."""
        return [
            {
                "provider": c.provider_name,
                "display_name": c.display_name,
                "icon": c.icon,
            }
            for c in self._connectors.values()
        ]

    def list_registered(self) -> List[str]:
        """Return names of registered connectors."""
        return list(self._connectors.keys())
