"""Shared fixtures and test doubles."""
