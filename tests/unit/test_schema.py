from typing import Any

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from kneel.schema import PydanticSchema, Schema, as_schema


class User(BaseModel):
    id: int
    name: str


class UpperSchema:
    def validate(self, value: Any) -> str:
        return str(value).upper()


def test_model() -> None:
    schema = as_schema(User)
    assert isinstance(schema, PydanticSchema)
    assert schema.validate({"id": "1", "name": "a"}) == User(id=1, name="a")


def test_model_failure() -> None:
    with pytest.raises(ValidationError):
        as_schema(User).validate({"id": "not-a-number", "name": "a"})


def test_type_adapter() -> None:
    adapter = TypeAdapter(list[int])
    schema = as_schema(adapter)
    assert isinstance(schema, PydanticSchema)
    assert schema.adapter is adapter
    assert schema.validate(["1", 2]) == [1, 2]


@pytest.mark.parametrize(
    "annotation,value,expected",
    [
        (int, "42", 42),
        (dict[str, int], {"a": "1"}, {"a": 1}),
        (str | None, None, None),
    ],
)
def test_annotation(annotation: Any, value: Any, expected: Any) -> None:
    assert as_schema(annotation).validate(value) == expected


def test_custom_schema_passes_through() -> None:
    upper = UpperSchema()
    assert isinstance(upper, Schema)
    assert as_schema(upper) is upper
    assert as_schema(upper).validate("abc") == "ABC"
