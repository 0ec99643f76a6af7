"""Snapshot model for long-running operations (google.longrunning.Operation)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from gcloudjob.errors import InvalidArgumentError


@dataclass(slots=True, frozen=True)
class OperationError:
    """Server-reported failure cause (google.rpc.Status)."""

    code: int
    message: str
    details: list[dict[str, Any]] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class Pending:
    """The operation is still running."""


@dataclass(slots=True, frozen=True)
class Succeeded:
    """Terminal state: the operation finished and produced `payload`."""

    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Failed:
    """Terminal state: the operation finished with `error`."""

    error: OperationError


OperationStatus = Union[Pending, Succeeded, Failed]


@dataclass(slots=True, frozen=True)
class OperationSnapshot:
    """
    Point-in-time view of a server-side operation.

    Notes:
        - `name` is assigned by the server and never changes.
        - The snapshot may be stale; only a refresh replaces it.
    """

    name: str
    status: OperationStatus = field(default_factory=Pending)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def done(self) -> bool:
        return isinstance(self.status, (Succeeded, Failed))

    @property
    def failed(self) -> bool:
        return isinstance(self.status, Failed)


def snapshot_from_dict(data: Mapping[str, Any]) -> OperationSnapshot:
    """
    Convert a google.longrunning.Operation JSON mapping into a snapshot.

    Rules:
        - `done` missing or false -> Pending
        - `done` true with `error` -> Failed
        - `done` true otherwise -> Succeeded(response or {})

    Raises:
        InvalidArgumentError: if `name` is missing or empty.
    """
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(
            "Operation payload has no name",
            details={"keys": sorted(data.keys())},
        )

    metadata = data.get("metadata")
    metadata = dict(metadata) if isinstance(metadata, Mapping) else {}

    status: OperationStatus
    if not data.get("done"):
        status = Pending()
    elif isinstance(data.get("error"), Mapping):
        status = Failed(_error_from_dict(data["error"]))
    else:
        response = data.get("response")
        status = Succeeded(dict(response) if isinstance(response, Mapping) else {})

    return OperationSnapshot(name=name, status=status, metadata=metadata)


def _error_from_dict(data: Mapping[str, Any]) -> OperationError:
    code = data.get("code")
    message = data.get("message")
    details = data.get("details") or []
    return OperationError(
        code=code if isinstance(code, int) else 0,
        message=message if isinstance(message, str) else "",
        details=[dict(d) for d in details if isinstance(d, Mapping)]
        if isinstance(details, list)
        else [],
    )
