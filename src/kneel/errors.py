class KneelError(Exception):
    pass


class EncodingError(KneelError, ValueError):
    pass


class UnsupportedContentType(EncodingError):
    def __init__(self, content_type: object):
        super().__init__(f"Unsupported content type: {content_type}")
        self.content_type = content_type


class UnsupportedMultipartValue(EncodingError):
    def __init__(self, key: str, value: object):
        super().__init__(
            f"multipart/form-data requires string or binary values, "
            f"got {value!r} for {key!r}"
        )
        self.key = key
        self.value = value


class HttpError(KneelError):
    def __init__(self, status: int, url: str, text: str):
        super().__init__(text)
        self.status = status
        self.url = url
        self.text = text
