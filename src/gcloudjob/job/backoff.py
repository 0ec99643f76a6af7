"""Backoff parameters for polling long-running operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class BackoffPolicy:
    """
    Delay schedule between successive status refreshes.

    Defaults match the long-running operation defaults of the Google client
    libraries: start at 10s, grow by 1.3x, never wait more than 5 minutes.
    """

    initial_delay_sec: float = 10.0
    multiplier: float = 1.3
    max_delay_sec: float = 300.0

    def __post_init__(self) -> None:
        if self.initial_delay_sec <= 0:
            raise ValueError("initial_delay_sec must be > 0")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")
        if self.max_delay_sec < self.initial_delay_sec:
            raise ValueError("max_delay_sec must be >= initial_delay_sec")

    def delays(self) -> Iterator[float]:
        """Yield an endless, non-decreasing sequence of delays in seconds."""
        delay = self.initial_delay_sec
        while True:
            yield delay
            delay = min(delay * self.multiplier, self.max_delay_sec)
