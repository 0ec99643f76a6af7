"""Public job exports for gcloudjob."""

from __future__ import annotations

from .backoff import BackoffPolicy
from .instance_job import InstanceJob
from .operation_handle import Decoder, OperationHandle, OperationService

__all__ = [
    "BackoffPolicy",
    "OperationHandle",
    "OperationService",
    "Decoder",
    "InstanceJob",
]
