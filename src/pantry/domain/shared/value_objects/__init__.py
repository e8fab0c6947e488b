"""Shared value objects."""

from pantry.domain.shared.value_objects.string_value import Identifier, StringValue

__all__ = [
    "Identifier",
    "StringValue",
]
