"""Operations API controller backed by google-api-python-client."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, TypeVar

from gcloudjob.errors import (
    ApiError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    TransportError,
    map_http_error,
)
from gcloudjob.models import OperationSnapshot, snapshot_from_dict

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OperationsController:
    """
    Fetches Spanner instance operation status over the REST discovery API.

    Notes:
        - Each call issues exactly one request; nothing is retried.
        - The controller may be shared by many handles.
        - Only `projects.instances.operations` of the Spanner Admin API is
          addressed; operation names look like
          `projects/<p>/instances/<i>/operations/<id>`.
    """

    API_NAME: str = "spanner"
    DEFAULT_VERSION: str = "v1"

    def __init__(
        self,
        credentials: Any = None,
        *,
        version: str = DEFAULT_VERSION,
    ) -> None:
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise ApiError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        try:
            self._service = build(
                self.API_NAME, version, credentials=credentials, cache_discovery=False
            )
        except Exception as exc:
            raise self._map_exception(exc) from exc

    @classmethod
    def from_service(cls, service: Any) -> "OperationsController":
        """Create controller from a pre-built discovery resource (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def fetch_status(self, name: str) -> OperationSnapshot:
        _require_name(name)
        req = self._operations().get(name=name)
        data = self._execute(req.execute)
        return snapshot_from_dict(data)

    def cancel(self, name: str) -> None:
        """Ask the server to cancel the operation. Completion is still polled."""
        _require_name(name)
        req = self._operations().cancel(name=name)
        self._execute(req.execute)

    # ----------------------------
    # Internals
    # ----------------------------
    def _operations(self) -> Any:
        return self._service.projects().instances().operations()

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except Exception as exc:
            mapped = self._map_exception(exc)
            logger.debug("Operations request failed: %s", mapped)
            raise mapped from exc

    def _map_exception(self, exc: Exception) -> TransportError:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Operations API error", cause=exc)


def _require_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("operation name must be a non-empty string")


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            if isinstance(err.get("status"), str):
                details["status"] = err["status"]
                reason = err["status"]
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
