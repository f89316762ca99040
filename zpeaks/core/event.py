from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

PEAK_HIGH = "peak.high"
PEAK_LOW = "peak.low"


@dataclass(slots=True)
class Event:
    type: str
    signal: str
    payload: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
