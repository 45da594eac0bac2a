"""
connectors — OAuth integration module for external services.

Provides a small connector framework that handles:
  • declaring connection fields (client id, masked client secret)
  • OAuth2 auth-URL generation
  • Authorization code → access token exchange
  • Bearer header injection and connectivity tests

Each provider (Shutterstock, …) is a subclass of BaseConnector.
"""
