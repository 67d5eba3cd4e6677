from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic_core import to_json

from .errors import EncodingError, UnsupportedContentType, UnsupportedMultipartValue
from .types import DEFAULT_CONTENT_TYPE, ContentType, Fields, Payload


@dataclass(frozen=True)
class File:
    content: bytes
    filename: str | None = None
    content_type: str | None = None


Blob = bytes | bytearray | File
MultipartValue = str | Blob


@dataclass(frozen=True)
class FormBody:
    fields: tuple[tuple[str, str], ...]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.fields)

    def encode(self) -> bytes:
        return urlencode(self.fields).encode("ascii")


@dataclass(frozen=True)
class MultipartBody:
    fields: tuple[tuple[str, MultipartValue], ...]

    def __iter__(self) -> Iterator[tuple[str, MultipartValue]]:
        return iter(self.fields)

    def get(self, key: str) -> MultipartValue | None:
        for name, value in reversed(self.fields):
            if name == key:
                return value
        return None


Body = str | FormBody | MultipartBody


def resolve_content_type(content_type: ContentType | str | None) -> ContentType:
    if content_type is None:
        return DEFAULT_CONTENT_TYPE
    try:
        return ContentType(content_type)
    except ValueError:
        raise UnsupportedContentType(content_type) from None


def payload_fields(payload: Payload) -> Fields:
    """Return the payload's own fields in iteration order."""
    if isinstance(payload, BaseModel):
        fields = [(name, getattr(payload, name)) for name in type(payload).model_fields]
        return fields + list((payload.model_extra or {}).items())
    if isinstance(payload, Mapping):
        return list(payload.items())
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return [
            (field.name, getattr(payload, field.name))
            for field in dataclasses.fields(payload)
        ]
    raise EncodingError(
        f"Cannot encode fields of {type(payload).__name__} payload: {payload!r}"
    )


def encode_json(payload: Payload) -> str:
    return to_json(payload).decode("utf-8")


def encode_form(payload: Payload) -> FormBody:
    return FormBody(tuple((key, str(value)) for key, value in payload_fields(payload)))


def encode_multipart(payload: Payload) -> MultipartBody:
    fields: list[tuple[str, MultipartValue]] = []
    for key, value in payload_fields(payload):
        if not isinstance(value, (str, bytes, bytearray, File)):
            raise UnsupportedMultipartValue(key, value)
        fields.append((key, value))
    return MultipartBody(tuple(fields))


def encode_text(payload: Payload) -> str:
    return str(payload)


ENCODERS: dict[ContentType, Callable[[Payload], Body]] = {
    ContentType.json: encode_json,
    ContentType.form: encode_form,
    ContentType.multipart: encode_multipart,
    ContentType.text: encode_text,
}


def encode(
    payload: Payload, content_type: ContentType | str | None = None
) -> tuple[Body, str]:
    """Encode a validated payload and return it with its Content-Type value."""
    resolved = resolve_content_type(content_type)
    return ENCODERS[resolved](payload), resolved.value
