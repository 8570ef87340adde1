"""Test suite for gamelink.

- unit/: Unit tests with fakes and mocked collaborators
- integration/: HTTP client tests against mocked transports (pytest-httpx)
"""
