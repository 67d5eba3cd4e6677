import httpx

from .types import CONTENT_TYPE_HEADER, Headers


def set_header(headers: Headers | None, key: str, value: str) -> Headers:
    """Set ``key`` to ``value`` on any supported header container.

    Pair lists are appended to and never deduplicated, so the last matching
    entry wins. ``httpx.Headers`` and plain mappings are overwritten in place.
    A missing container is replaced by a new ``dict``.
    """
    if headers is None:
        return {key: value}
    if isinstance(headers, list):
        headers.append((key, value))
    elif isinstance(headers, httpx.Headers):
        # replaces every prior value for key, case-insensitively
        headers[key] = value
    else:
        headers[key] = value
    return headers


def add_content_type(headers: Headers | None, value: str) -> Headers:
    return set_header(headers, CONTENT_TYPE_HEADER, value)
