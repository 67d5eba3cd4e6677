from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from kneel.encoding import Body, File, FormBody, MultipartBody
from kneel.types import CONTENT_TYPE_HEADER, ContentType, Headers

from .types import Request, RequestFailed, Response


def _multipart_arguments(body: MultipartBody) -> dict[str, Any]:
    # strings go through files as (None, value) so parts keep the body's order
    files: list[tuple[str, tuple[Any, ...]]] = []
    for key, value in body:
        if isinstance(value, str):
            files.append((key, (None, value)))
        elif isinstance(value, File):
            files.append((key, (value.filename, value.content, value.content_type)))
        else:
            files.append((key, (None, bytes(value), None)))
    return {"files": files}


def _body_arguments(body: Body | None) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, str):
        return {"content": body.encode("utf-8")}
    if isinstance(body, FormBody):
        return {"content": body.encode()}
    return _multipart_arguments(body)


def _header_items(headers: Headers | None) -> list[tuple[str, str]]:
    if headers is None:
        return []
    if isinstance(headers, list):
        return headers
    if isinstance(headers, httpx.Headers):
        return headers.multi_items()
    return list(headers.items())


def _request_headers(request: Request) -> httpx.Headers:
    # the last entry for a key wins, case-insensitively
    headers = httpx.Headers()
    for key, value in _header_items(request.headers):
        headers[key] = value
    # httpx only adds the boundary parameter when no Content-Type is set
    if (
        isinstance(request.body, MultipartBody)
        and headers.get(CONTENT_TYPE_HEADER) == ContentType.multipart.value
    ):
        del headers[CONTENT_TYPE_HEADER]
    return headers


@dataclass(frozen=True)
class HTTPX:
    client: httpx.AsyncClient

    async def __call__(self, request: Request) -> Response:
        try:
            response = await self.client.request(
                request.method or "GET",
                request.url,
                headers=_request_headers(request),
                **_body_arguments(request.body),
            )
        except httpx.HTTPError as exc:
            raise RequestFailed(exc)
        return Response(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
