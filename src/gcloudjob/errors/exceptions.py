"""Exception hierarchy and HTTP error mapping for gcloudjob."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GCloudJobError(Exception):
    """
    Root of every error raised by gcloudjob.

    Attributes:
        details: Extra context such as the operation name or HTTP status.
        cause: The lower-level exception this error wraps, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class TransportError(GCloudJobError):
    """Raised when a status refresh call to the operations service fails."""


class AuthError(TransportError):
    """Raised when the request is not authenticated (HTTP 401)."""


class PermissionError(TransportError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(TransportError):
    """Raised when request arguments are invalid (HTTP 400, malformed names)."""


class NotFoundError(TransportError):
    """Raised when the operation is not found (HTTP 404)."""


class RateLimitError(TransportError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(TransportError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(TransportError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(TransportError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


class InvalidStateError(GCloudJobError):
    """Raised when a handle receives a snapshot that does not belong to it."""


class WaitCancelledError(GCloudJobError):
    """Raised when wait_until_done is aborted through its cancel event."""


class WaitTimeoutError(GCloudJobError):
    """Raised when wait_until_done exceeds the caller's timeout."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """
    Failed REST call as reported by the Google API error envelope.

    `reason` carries the canonical status (e.g. "RESOURCE_EXHAUSTED") when the
    body provides one, otherwise the HTTP reason phrase.
    """

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_ERRORS_BY_STATUS_CODE: dict[int, type[TransportError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    403: PermissionError,
    404: NotFoundError,
    429: RateLimitError,
}


def _is_quota_denial(info: HttpErrorInfo) -> bool:
    # 403 RESOURCE_EXHAUSTED or "quota..." reasons are quota, not IAM, denials
    reason = (info.reason or "").lower()
    return reason == "resource_exhausted" or "quota" in reason


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> TransportError:
    """
    Translate an HTTP failure into a TransportError subclass.

    400, 401, 403, 404 and 429 have dedicated classes; a 403 caused by quota
    becomes QuotaExceededError. Everything else, 5xx included, is ApiError.
    """
    details: dict[str, Any] = dict(info.details or {})
    details.setdefault("status_code", info.status_code)
    details.setdefault("reason", info.reason)

    if info.status_code == 403 and _is_quota_denial(info):
        error_cls: type[TransportError] = QuotaExceededError
    else:
        error_cls = _ERRORS_BY_STATUS_CODE.get(info.status_code, ApiError)

    message = info.message or f"HTTP error {info.status_code}"
    return error_cls(message, details=details, cause=cause)
