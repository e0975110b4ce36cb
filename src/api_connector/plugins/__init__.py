from .builtin import (
    AcceptsJson,
    AlwaysThrowOnErrors,
    HasFormBody,
    HasJsonBody,
    HasTimeout,
    LoggingPlugin,
)
from .plugin import Plugin

__all__ = [
    "Plugin",
    "AcceptsJson",
    "HasJsonBody",
    "HasFormBody",
    "HasTimeout",
    "AlwaysThrowOnErrors",
    "LoggingPlugin",
]
