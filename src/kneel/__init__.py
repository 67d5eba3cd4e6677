from .client import Kneel, Make, kneel, kneel_maker
from .encoding import File, FormBody, MultipartBody, encode
from .errors import EncodingError, HttpError, KneelError
from .headers import add_content_type, set_header
from .models import RequestSpec
from .schema import Schema, as_schema
from .types import NOTHING, ContentType

__all__ = [
    "NOTHING",
    "ContentType",
    "EncodingError",
    "File",
    "FormBody",
    "HttpError",
    "Kneel",
    "KneelError",
    "Make",
    "MultipartBody",
    "RequestSpec",
    "Schema",
    "add_content_type",
    "as_schema",
    "encode",
    "kneel",
    "kneel_maker",
    "set_header",
]
