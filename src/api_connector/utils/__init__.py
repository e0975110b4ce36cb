from .sanitizer import REDACTED, add_sensitive_keys, mask_headers, mask_sensitive_data, mask_url
from .url import build_query_string, is_absolute_url, join_url

__all__ = [
    "REDACTED",
    "mask_sensitive_data",
    "mask_url",
    "mask_headers",
    "add_sensitive_keys",
    "join_url",
    "is_absolute_url",
    "build_query_string",
]
