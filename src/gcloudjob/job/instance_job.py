"""Instance create/update jobs."""

from __future__ import annotations

from typing import Optional

from gcloudjob.models import Instance, OperationSnapshot, instance_from_dict

from .backoff import BackoffPolicy
from .operation_handle import OperationHandle, OperationService


class InstanceJob(OperationHandle[Instance]):
    """
    Long-running processing of an instance create or update.

    Example:
        job = InstanceJob(snapshot, controller)
        job.is_done()  # False
        job.refresh()
        job.is_done()  # True
        instance = job.instance()
    """

    def __init__(
        self,
        snapshot: OperationSnapshot,
        service: OperationService,
        *,
        policy: Optional[BackoffPolicy] = None,
    ) -> None:
        super().__init__(snapshot, service, instance_from_dict, policy=policy)

    def instance(self) -> Optional[Instance]:
        """The instance that is the object of the operation, or None."""
        return self.result()
