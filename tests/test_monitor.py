"""
Tests for zpeaks.monitor.PeakMonitor.
"""
from __future__ import annotations

import math
from unittest.mock import MagicMock

import pytest

from zpeaks.core.peak import PeakKind
from zpeaks.detector import PeaksDetector
from zpeaks.monitor import PeakMonitor


def make_bus():
    bus = MagicMock()
    bus.emit = MagicMock()
    return bus


def test_high_peak_emits_event_with_baseline():
    bus = make_bus()
    monitor = PeakMonitor(PeaksDetector(3, 1.0, 0.0), bus=bus, signal="temp")

    for v in [1.0, 2.0, 3.0]:
        assert monitor.update(v) is None
    bus.emit.assert_not_called()

    assert monitor.update(100.0, item="reading-3") is PeakKind.HIGH
    bus.emit.assert_called_once()
    event = bus.emit.call_args.args[0]
    assert event.type == "peak.high"
    assert event.signal == "temp"
    assert event.payload["value"] == 100.0
    assert event.payload["mean"] == pytest.approx(2.0)
    assert event.payload["stddev"] == pytest.approx(math.sqrt(2.0 / 3.0))
    assert event.payload["sample_index"] == 3
    assert event.payload["item"] == "reading-3"


def test_low_peak_event_type():
    bus = make_bus()
    monitor = PeakMonitor(PeaksDetector(3, 1.0, 0.0), bus=bus)
    for v in [1.0, 2.0, 3.0]:
        monitor.update(v)
    monitor.update(-50.0)
    assert bus.emit.call_args.args[0].type == "peak.low"


def test_counts_without_bus(reference_series, reference_peaks):
    monitor = PeakMonitor(PeaksDetector(30, 5.0, 0.0))
    for v in reference_series:
        monitor.update(v)

    assert monitor.sample_count == len(reference_series)
    assert monitor.peak_counts[PeakKind.HIGH] == len(reference_peaks)
    assert monitor.peak_counts[PeakKind.LOW] == 0
    assert monitor.total_peaks == len(reference_peaks)


def test_invalid_sample_propagates():
    monitor = PeakMonitor(PeaksDetector(3, 1.0, 0.0), bus=make_bus())
    with pytest.raises(ValueError):
        monitor.update(float("nan"))
    assert monitor.sample_count == 0
