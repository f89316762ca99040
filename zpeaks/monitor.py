"""
zpeaks.monitor
================
Feeds a detector and publishes every detected peak on an ``EventBus``.

Emits events:
* ``peak.high`` – sample significantly above the rolling mean
* ``peak.low``  – sample significantly below the rolling mean

Usage::

    from zpeaks.core.bus import EventBus
    from zpeaks.detector import PeaksDetector
    from zpeaks.monitor import PeakMonitor

    bus = EventBus()
    bus.subscribe("peak.high", lambda e: print(e.payload["value"]))

    monitor = PeakMonitor(PeaksDetector(30, 5.0, 0.0), bus=bus, signal="temperature")
    for reading in sensor():
        monitor.update(reading)
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from zpeaks.core.bus import EventBus
from zpeaks.core.event import PEAK_HIGH, PEAK_LOW, Event
from zpeaks.core.peak import PeakKind
from zpeaks.detector import PeaksDetector

logger = logging.getLogger("zpeaks.monitor")

_EVENT_TYPES = {PeakKind.HIGH: PEAK_HIGH, PeakKind.LOW: PEAK_LOW}


class PeakMonitor:
    """
    Track one signal and report its peaks.

    Parameters
    ----------
    detector:
        The detector owned by this monitor.
    bus:
        Bus receiving peak events; events are only counted when ``None``.
    signal:
        Name attached to every emitted event.
    """

    def __init__(
        self,
        detector: PeaksDetector,
        bus: Optional[EventBus] = None,
        signal: str = "signal",
    ) -> None:
        self.detector = detector
        self.bus = bus
        self.signal = str(signal)

        self.sample_count: int = 0
        self.peak_counts: dict[PeakKind, int] = {PeakKind.HIGH: 0, PeakKind.LOW: 0}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def update(self, value: Any, item: Any = None) -> Optional[PeakKind]:
        """
        Feed one sample.

        Parameters
        ----------
        value:
            Numeric sample handed to the detector.
        item:
            Optional domain object carried in the event payload.
        """
        # Statistics the detector compares against, taken before the window shifts.
        baseline = self.detector.stats() if self.detector.primed else None
        kind = self.detector.feed(value)
        index = self.sample_count
        self.sample_count += 1

        if kind is None:
            return None

        self.peak_counts[kind] += 1
        self._emit(
            _EVENT_TYPES[kind],
            {
                "kind": kind.value,
                "value": value,
                "mean": baseline.mean if baseline else None,
                "stddev": baseline.stddev if baseline else None,
                "sample_index": index,
                "item": item,
            },
        )
        return kind

    @property
    def total_peaks(self) -> int:
        return sum(self.peak_counts.values())

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _emit(self, event_type: str, payload: dict[str, Any]) -> None:
        if self.bus is None:
            return
        event = Event(
            type=event_type,
            signal=self.signal,
            payload=payload,
            timestamp=datetime.now(timezone.utc),
        )
        logger.debug("%s on %s at sample %s", event_type, self.signal, payload["sample_index"])
        self.bus.emit(event)
