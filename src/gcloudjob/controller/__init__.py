"""Controller exports for gcloudjob."""

from __future__ import annotations

from .operations_controller import OperationsController

__all__ = ["OperationsController"]
