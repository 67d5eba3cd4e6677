from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from .schema import SchemaLike
from .types import NOTHING, ContentType, Headers


@dataclass(frozen=True)
class RequestSpec:
    """Parameters of a single kneel call.

    ``input`` and ``input_schema`` must be given together; leaving both out
    means the request has no body. ``NOTHING`` marks an absent input so that
    ``None`` remains a valid payload.

    ``auto_content_type=False`` stops the pipeline from writing the
    ``Content-Type`` header for an encoded body.
    """

    url: str
    method: str | None = None
    headers: Headers | None = None
    debug: bool = False
    input: Any = NOTHING
    input_schema: SchemaLike | None = None
    content_type: ContentType | str | None = None
    output_schema: SchemaLike | None = None
    auto_content_type: bool = True

    def __post_init__(self) -> None:
        if self.has_input and self.input_schema is None:
            raise ValueError("input requires an input_schema")
        if self.input_schema is not None and not self.has_input:
            raise ValueError("input_schema requires an input")

    @property
    def has_input(self) -> bool:
        return self.input is not NOTHING

    def replace(self, **changes: Any) -> RequestSpec:
        return dataclasses.replace(self, **changes)
