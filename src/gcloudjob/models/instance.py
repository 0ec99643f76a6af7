"""Data model for the instance resource produced by instance jobs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class Instance:
    """
    Instance resource returned by a completed create/update operation.

    Notes:
        - Only the commonly used fields are decoded.
        - `service` is the operations service the instance was decoded with;
          it is excluded from equality and repr.
    """

    name: str
    config: str = ""
    display_name: str = ""
    node_count: Optional[int] = None
    processing_units: Optional[int] = None
    state: str = "STATE_UNSPECIFIED"
    labels: dict[str, str] = field(default_factory=dict)

    service: Any = field(default=None, repr=False, compare=False)


def instance_from_dict(data: Mapping[str, Any], service: Any = None) -> Instance:
    """Decode an Instance JSON payload. Invalid field types fall back to defaults."""
    name = data.get("name", "")
    config = data.get("config", "")
    display_name = data.get("displayName", "")
    state = data.get("state")
    labels = data.get("labels") or {}

    return Instance(
        name=name if isinstance(name, str) else "",
        config=config if isinstance(config, str) else "",
        display_name=display_name if isinstance(display_name, str) else "",
        node_count=_int_or_none(data.get("nodeCount")),
        processing_units=_int_or_none(data.get("processingUnits")),
        state=state if isinstance(state, str) else "STATE_UNSPECIFIED",
        labels={str(k): str(v) for k, v in labels.items()}
        if isinstance(labels, Mapping)
        else {},
        service=service,
    )


def _int_or_none(value: Any) -> Optional[int]:
    # proto3 JSON may encode integers as strings
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None
