"""OperationHandle: client-side tracker for a long-running operation."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

from gcloudjob.errors import InvalidStateError, WaitCancelledError, WaitTimeoutError
from gcloudjob.models import Failed, OperationError, OperationSnapshot, Succeeded

from .backoff import BackoffPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[dict[str, Any], Any], T]


class OperationService(Protocol):
    """Collaborator that fetches the current status of an operation."""

    def fetch_status(self, name: str) -> OperationSnapshot:
        ...


class OperationHandle(Generic[T]):
    """
    Tracks one server-side operation through its last-known snapshot.

    The handle never performs I/O on its own: `is_done`, `is_error`, `error`
    and `result` read the cached snapshot; only `refresh` and
    `wait_until_done` call the operations service.

    Notes:
        - Once the snapshot is terminal (succeeded or failed) it stays so;
          later refreshes cannot change the outcome.
        - A handle is not safe for concurrent use. The service may be shared.

    Example:
        job = OperationHandle(snapshot, controller, instance_from_dict)
        job.is_done()  # False
        job.wait_until_done()
        instance = job.result()
    """

    DEFAULT_POLICY: BackoffPolicy = BackoffPolicy()

    def __init__(
        self,
        snapshot: OperationSnapshot,
        service: OperationService,
        decoder: Decoder[T],
        *,
        policy: Optional[BackoffPolicy] = None,
    ) -> None:
        self._snapshot = snapshot
        self._service = service
        self._decoder = decoder
        self._policy = policy if policy is not None else self.DEFAULT_POLICY
        self._decoded: Optional[T] = None
        self._has_decoded = False

    # ----------------------------
    # Local reads
    # ----------------------------
    @property
    def name(self) -> str:
        """Server-assigned operation name."""
        return self._snapshot.name

    @property
    def snapshot(self) -> OperationSnapshot:
        """The most recently fetched snapshot (possibly stale)."""
        return self._snapshot

    @property
    def service(self) -> OperationService:
        return self._service

    def is_done(self) -> bool:
        return self._snapshot.done

    def is_error(self) -> bool:
        return self._snapshot.failed

    @property
    def error(self) -> Optional[OperationError]:
        """Failure cause when the operation failed, otherwise None."""
        status = self._snapshot.status
        if isinstance(status, Failed):
            return status.error
        return None

    def result(self) -> Optional[T]:
        """
        Return the decoded result of a succeeded operation.

        Returns:
            The decoder output, or None while pending or after a failure.
            The value is decoded once and reused on later calls.
        """
        status = self._snapshot.status
        if not isinstance(status, Succeeded):
            return None
        if not self._has_decoded:
            self._decoded = self._decoder(status.payload, self._service)
            self._has_decoded = True
        return self._decoded

    # ----------------------------
    # Remote refresh
    # ----------------------------
    def refresh(self) -> "OperationHandle[T]":
        """
        Fetch the current status once and replace the cached snapshot.

        Raises:
            TransportError: propagated unchanged from the service; the cached
                snapshot is left as it was.
            InvalidStateError: if the service returns another operation.
        """
        logger.debug("Refreshing operation %s", self.name)
        fresh = self._service.fetch_status(self.name)

        if fresh.name != self.name:
            raise InvalidStateError(
                "Service returned a snapshot for a different operation",
                details={"expected": self.name, "actual": fresh.name},
            )

        if self._snapshot.done:
            if fresh.status != self._snapshot.status:
                logger.warning(
                    "Ignoring status change of terminal operation %s", self.name
                )
                return self
        elif fresh.done:
            logger.info(
                "Operation %s finished (%s)",
                self.name,
                "failed" if fresh.failed else "succeeded",
            )

        self._snapshot = fresh
        return self

    reload = refresh

    def wait_until_done(
        self,
        *,
        policy: Optional[BackoffPolicy] = None,
        cancel_event: Optional[threading.Event] = None,
        timeout: Optional[float] = None,
    ) -> "OperationHandle[T]":
        """
        Refresh until the operation is done, sleeping between refreshes.

        The delay grows according to `policy` (the handle's policy when
        omitted). Without `timeout` the call blocks until the operation
        finishes.

        Args:
            policy: Backoff parameters for this wait.
            cancel_event: When set, the wait aborts before the next delay or
                refresh. The delay itself is interrupted as well.
            timeout: Maximum number of seconds to wait. At least one refresh
                is made before WaitTimeoutError, even for timeout <= 0.

        Raises:
            WaitCancelledError: if cancel_event was set.
            WaitTimeoutError: if timeout elapsed first.
            TransportError: on the first failed refresh (no retry).
        """
        use_policy = policy if policy is not None else self._policy
        deadline = time.monotonic() + timeout if timeout is not None else None
        delays = use_policy.delays()
        refreshed = False

        while not self.is_done():
            _check_cancelled(cancel_event, self.name)

            delay = next(delays)
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining > 0:
                    delay = min(delay, remaining)
                elif refreshed:
                    raise WaitTimeoutError(
                        "Timed out waiting for operation",
                        details={"name": self.name, "timeout": timeout},
                    )
                else:
                    # expired before the first refresh: poll once without delay
                    delay = 0.0

            logger.debug("Operation %s pending; next refresh in %.2fs", self.name, delay)
            if cancel_event is not None:
                cancel_event.wait(delay)
                _check_cancelled(cancel_event, self.name)
            else:
                time.sleep(delay)

            self.refresh()
            refreshed = True

        return self


def _check_cancelled(cancel_event: Optional[threading.Event], name: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise WaitCancelledError(
            "Wait for operation was cancelled",
            details={"name": name},
        )
