from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .encoding import Body, encode, resolve_content_type
from .errors import HttpError
from .headers import add_content_type
from .http.types import HttpImplementation, Request
from .models import RequestSpec
from .schema import as_schema
from .types import DEFAULT_BODY_METHOD, Headers

logger = logging.getLogger(__name__)

Kneel = Callable[[RequestSpec, HttpImplementation], Awaitable[Any]]
Make = Callable[[RequestSpec], RequestSpec]


async def kneel(spec: RequestSpec, http: HttpImplementation) -> Any:
    """Send one request described by ``spec`` and return the validated response.

    The input, when given, is validated against ``input_schema`` and encoded
    according to ``content_type`` before anything is sent. A non-2xx response
    raises ``HttpError`` with the response text. Without an ``output_schema``
    the call returns ``None``; otherwise the JSON response body is validated
    and the validated value returned.

    Validation errors and transport errors propagate unchanged.
    """
    method = spec.method
    headers: Headers | None = spec.headers
    body: Body | None = None

    if spec.input_schema is not None:
        try:
            payload = as_schema(spec.input_schema).validate(spec.input)
            if spec.debug:
                logger.info("kneel request body %r", payload)
            if method is None:
                method = DEFAULT_BODY_METHOD
            content_type = resolve_content_type(spec.content_type)
            body, header_value = encode(payload, content_type)
        except Exception as e:
            if spec.debug:
                logger.error("kneel request body error: %s", e)
            raise
        if headers is None:
            headers = {}
        if spec.auto_content_type:
            headers = add_content_type(headers, header_value)

    response = await http(
        Request(method=method, url=spec.url, headers=headers, body=body)
    )

    if not response.ok:
        text = response.text()
        if spec.debug:
            logger.error("kneel response error %s", text)
        raise HttpError(response.status, spec.url, text)

    if spec.output_schema is None:
        return None

    data = response.json()
    if spec.debug:
        logger.info("kneel json response %r", data)
    return as_schema(spec.output_schema).validate(data)


def kneel_maker(make: Make, *, debug: bool = False) -> Kneel:
    """Build a ``kneel`` variant that passes every spec through ``make`` first.

    ``make`` can rewrite the url, add headers or set defaults. Anything it
    raises propagates before a request is sent.
    """

    async def made_kneel(spec: RequestSpec, http: HttpImplementation) -> Any:
        if debug:
            logger.info("kneel_maker input %r", spec)
        made = make(spec)
        if debug:
            logger.info("kneel_maker output %r", made)
        return await kneel(made, http)

    return made_kneel
