"""Pantry domain layer."""
