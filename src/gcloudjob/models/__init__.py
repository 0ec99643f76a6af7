"""Public model exports for gcloudjob."""

from __future__ import annotations

from .instance import Instance, instance_from_dict
from .operation import (
    Failed,
    OperationError,
    OperationSnapshot,
    OperationStatus,
    Pending,
    Succeeded,
    snapshot_from_dict,
)

__all__ = [
    "Pending",
    "Succeeded",
    "Failed",
    "OperationStatus",
    "OperationError",
    "OperationSnapshot",
    "snapshot_from_dict",
    "Instance",
    "instance_from_dict",
]
