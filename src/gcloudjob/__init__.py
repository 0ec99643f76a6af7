"""gcloudjob public API."""

from __future__ import annotations

from gcloudjob.controller import OperationsController
from gcloudjob.errors import (
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
from gcloudjob.job import BackoffPolicy, InstanceJob, OperationHandle, OperationService
from gcloudjob.models import (
    Failed,
    Instance,
    OperationError,
    OperationSnapshot,
    Pending,
    Succeeded,
    instance_from_dict,
    snapshot_from_dict,
)

__all__ = [
    # Jobs
    "OperationHandle",
    "InstanceJob",
    "BackoffPolicy",
    "OperationService",
    "OperationsController",
    # Models
    "OperationSnapshot",
    "Pending",
    "Succeeded",
    "Failed",
    "OperationError",
    "snapshot_from_dict",
    "Instance",
    "instance_from_dict",
    # Errors
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
