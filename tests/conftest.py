"""Shared pytest configuration."""

pytest_plugins = ["resource_cache.testing.fixtures"]
