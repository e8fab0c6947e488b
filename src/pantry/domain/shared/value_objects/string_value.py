"""Single-field string wrappers used for identifiers and text fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import uuid4

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_T = TypeVar("_T", bound="StringValue")


@dataclass(frozen=True)
class StringValue:
    """
    Value object wrapping exactly one string.

    Subclasses only add a distinct type: a ``UserName`` never compares
    equal to a ``FoodName`` holding the same text. Any input is normalized
    with ``str()``; the wrapped string is read back through ``value``.
    No format or length validation happens here.
    """

    value: str

    def __post_init__(self) -> None:
        value: Any = self.value
        if isinstance(value, StringValue):
            # Re-wrapping is allowed, crossing wrapper types is not
            if not isinstance(value, type(self)):
                msg = f"Cannot build {type(self).__name__} from {type(value).__name__}"
                raise TypeError(msg)
            value = value.value
        elif not isinstance(value, str):
            value = str(value)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Accept raw strings or instances in pydantic models, emit strings."""
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def _pydantic_validate(cls: type[_T], value: Any) -> _T:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except TypeError as e:
            raise ValueError(str(e)) from e


@dataclass(frozen=True, repr=False)
class Identifier(StringValue):
    """String identifier that can generate fresh, random values."""

    @classmethod
    def generate(cls: type[_T]) -> _T:
        return cls(str(uuid4()))
