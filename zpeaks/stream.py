"""
zpeaks.stream
===============
Lazy adapter that filters an arbitrary iterable down to its peaks.

Usage::

    from zpeaks.detector import PeaksDetector
    from zpeaks.stream import peaks

    for (ts, price), kind in peaks(ticks, PeaksDetector(30, 5.0, 0.0), lambda t: t[1]):
        print(ts, price, kind.value)
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from zpeaks.core.peak import PeakKind
from zpeaks.detector import PeaksDetector

T = TypeVar("T")


class PeaksIter(Generic[T]):
    """
    Iterator yielding ``(item, PeakKind)`` for every source item classified as a peak.

    Items that are not peaks are dropped as soon as they have been fed to the
    detector; nothing besides the detector window is retained.
    """

    def __init__(
        self,
        source: Iterable[T],
        detector: PeaksDetector,
        signal: Callable[[T], Any],
    ) -> None:
        self._source = iter(source)
        self._signal = signal
        self.detector = detector

    def __iter__(self) -> Iterator[tuple[T, PeakKind]]:
        return self

    def __next__(self) -> tuple[T, PeakKind]:
        for item in self._source:
            kind = self.detector.feed(self._signal(item))
            if kind is not None:
                return item, kind
        raise StopIteration


def peaks(
    source: Iterable[T],
    detector: PeaksDetector,
    signal: Callable[[T], Any],
) -> PeaksIter[T]:
    return PeaksIter(source, detector, signal)
