"""Tests for the connector registry singleton."""

from connectors.registry import ConnectorRegistry
from connectors.shutterstock import ShutterstockConnector


class TestConnectorRegistry:
    def test_singleton(self):
        assert ConnectorRegistry() is ConnectorRegistry()

    def test_discover_registers_shutterstock(self):
        registry = ConnectorRegistry()
        registry.discover()
        assert isinstance(registry.get("shutterstock"), ShutterstockConnector)
        assert registry.list_registered() == ["shutterstock"]

    def test_discover_is_idempotent(self):
        registry = ConnectorRegistry()
        registry.discover()
        registry.discover()
        assert registry.list_registered() == ["shutterstock"]

    def test_unknown_provider(self):
        registry = ConnectorRegistry()
        registry.discover()
        assert registry.get("gettyimages") is None

    def test_list_providers(self):
        registry = ConnectorRegistry()
        registry.discover()
        assert registry.list_providers() == [
            {
                "provider": "shutterstock",
                "display_name": "Shutterstock",
                "icon": "📷",
            }
        ]

    def test_register_replaces(self):
        registry = ConnectorRegistry()
        registry.discover()
        replacement = ShutterstockConnector()
        registry.register(replacement)
        assert registry.get("shutterstock") is replacement
