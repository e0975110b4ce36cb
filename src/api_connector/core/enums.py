from enum import Enum


class Method(str, Enum):
    """HTTP methods."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"


class BodyFormat(str, Enum):
    """How a sender encodes the merged body bag."""
    JSON = "json"
    FORM = "form"
