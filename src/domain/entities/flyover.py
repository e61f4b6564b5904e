"""Domain entities for ISS flyover predictions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FlyoverWindow:
    """A pass exactly as the prediction provider reports it."""

    rise_time: int  # epoch seconds
    duration: int  # seconds


@dataclass(frozen=True, slots=True)
class PassRecord:
    """A pass ready for display."""

    rise_time: str  # rendered in the configured time zone
    duration: int  # seconds
    rise_epoch: int
