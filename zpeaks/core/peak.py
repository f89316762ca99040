from __future__ import annotations

from enum import Enum


class PeakKind(str, Enum):
    """Direction of a detected peak relative to the rolling mean."""

    HIGH = "high"
    LOW = "low"
