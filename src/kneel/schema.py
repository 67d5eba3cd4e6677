from __future__ import annotations

from dataclasses import dataclass
from types import GenericAlias
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, TypeAdapter

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Schema(Protocol[T_co]):
    """Structural validator used for both request input and response output.

    ``validate`` returns the validated (possibly coerced) value, or raises
    the engine's own validation error.
    """

    def validate(self, value: Any) -> T_co: ...


@dataclass(frozen=True)
class PydanticSchema(Generic[T]):
    adapter: TypeAdapter[T]

    def validate(self, value: Any) -> T:
        return self.adapter.validate_python(value)


SchemaLike = Schema[Any] | TypeAdapter[Any] | type[BaseModel] | Any


def _is_model_class(schema: object) -> bool:
    # list[int] and friends pass isinstance(..., type) before 3.11
    return (
        isinstance(schema, type)
        and not isinstance(schema, GenericAlias)
        and issubclass(schema, BaseModel)
    )


def as_schema(schema: SchemaLike) -> Schema[Any]:
    """Adapt a pydantic model, ``TypeAdapter`` or type annotation to a ``Schema``.

    Objects that already implement ``Schema`` are returned unchanged.
    """
    if _is_model_class(schema):
        return PydanticSchema(TypeAdapter(schema))
    if isinstance(schema, TypeAdapter):
        return PydanticSchema(schema)
    if isinstance(schema, Schema):
        return schema
    return PydanticSchema(TypeAdapter(schema))
