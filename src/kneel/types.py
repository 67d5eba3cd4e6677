from collections.abc import MutableMapping
from enum import Enum
from typing import Any

import httpx

NOTHING: Any = object()

PairList = list[tuple[str, str]]
Headers = PairList | httpx.Headers | MutableMapping[str, str]

Payload = Any
Fields = list[tuple[str, Any]]


class ContentType(str, Enum):
    json = "application/json"
    form = "application/x-www-form-urlencoded"
    multipart = "multipart/form-data"
    text = "text/plain"


DEFAULT_CONTENT_TYPE = ContentType.json
DEFAULT_BODY_METHOD = "POST"
CONTENT_TYPE_HEADER = "Content-Type"
