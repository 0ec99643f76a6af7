"""Public error exports for gcloudjob."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    GCloudJobError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    TransportError,
    WaitCancelledError,
    WaitTimeoutError,
    map_http_error,
)

__all__ = [
    "GCloudJobError",
    "TransportError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "InvalidStateError",
    "WaitCancelledError",
    "WaitTimeoutError",
    "HttpErrorInfo",
    "map_http_error",
]
