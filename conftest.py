"""Shared pytest configuration."""

pytest_plugins = ["es_commons.testing.fixtures"]
