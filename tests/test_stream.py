"""
Tests for zpeaks.stream.peaks / PeaksIter.
"""
from __future__ import annotations

from itertools import islice

import pytest

from zpeaks.core.peak import PeakKind
from zpeaks.detector import PeaksDetector
from zpeaks.stream import PeaksIter, peaks


def test_reference_series_through_adapter(reference_series, reference_peaks):
    out = [
        (i, kind)
        for (i, _), kind in peaks(enumerate(reference_series), PeaksDetector(30, 5.0, 0.0), lambda e: e[1])
    ]
    assert out == [(i, PeakKind.HIGH) for i in reference_peaks]


def test_only_peaks_are_emitted_once(reference_series):
    items = list(enumerate(reference_series))
    out = list(peaks(items, PeaksDetector(30, 5.0, 0.0), lambda e: e[1]))
    indices = [item[0] for item, _ in out]
    assert len(indices) == len(set(indices))
    assert all(kind in (PeakKind.HIGH, PeakKind.LOW) for _, kind in out)


def test_exhausted_iterator_stays_exhausted():
    it = peaks([1.0, 1.0, 1.0], PeaksDetector(2, 1.0, 0.0), lambda v: v)
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_signal_called_once_per_item():
    calls = []

    def signal(item):
        calls.append(item)
        return item

    list(peaks([1.0, 2.0, 1.0, 2.0, 50.0, 1.0], PeaksDetector(4, 3.0, 0.0), signal))
    assert calls == [1.0, 2.0, 1.0, 2.0, 50.0, 1.0]


def test_pulls_lazily_until_first_peak():
    pulled = []

    def source():
        for i, v in enumerate([1.0, 2.0, 1.0, 2.0, 50.0, 1.0, 2.0]):
            pulled.append(i)
            yield v

    it = peaks(source(), PeaksDetector(4, 3.0, 0.0), lambda v: v)
    assert next(it) == (50.0, PeakKind.HIGH)
    assert pulled == [0, 1, 2, 3, 4]


def test_infinite_source_yields_sparse_peaks():
    def source():
        i = 0
        while True:
            if i % 50 == 49:
                yield i, 100.0
            else:
                yield i, 1.0 if i % 2 else 2.0
            i += 1

    it = peaks(source(), PeaksDetector(10, 3.0, 0.0), lambda e: e[1])
    first = list(islice(it, 3))
    assert [item[0] for item, _ in first] == [49, 99, 149]
    assert all(kind is PeakKind.HIGH for _, kind in first)


def test_adapter_exposes_detector():
    detector = PeaksDetector(3, 1.0, 0.0)
    it = peaks([1.0, 2.0], detector, lambda v: v)
    assert isinstance(it, PeaksIter)
    assert iter(it) is it
    assert list(it) == []
    assert it.detector is detector
    assert detector.window == (1.0, 2.0)
