"""
zpeaks.batch
==============
Array form of the smoothed z-score algorithm.

Runs a float ``PeaksDetector`` over a whole series and returns the per-sample
signals together with the rolling filters, which is convenient for plotting
and offline analysis.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from zpeaks.core.peak import PeakKind
from zpeaks.detector import PeaksDetector

_SIGNAL_CODES = {PeakKind.HIGH: 1, PeakKind.LOW: -1}


@dataclass
class ZScoreResult:
    signals: np.ndarray
    avg_filter: np.ndarray
    std_filter: np.ndarray
    filtered: np.ndarray

    @property
    def peak_indices(self) -> np.ndarray:
        return np.flatnonzero(self.signals)


def smoothed_zscore(y, lag: int, threshold: float, influence: float) -> ZScoreResult:
    """
    Classify every sample of ``y``.

    ``signals`` holds ``1`` for high peaks, ``-1`` for low peaks and ``0``
    otherwise. ``avg_filter``/``std_filter`` are the window statistics after
    each sample and stay NaN until the window is full. ``filtered`` is the
    value written into the window for each sample.
    """
    data = np.asarray(y, dtype=float)
    if data.ndim != 1:
        raise ValueError(f"expected a 1-D series, got shape {data.shape}")

    detector = PeaksDetector(lag, float(threshold), float(influence))
    size = data.shape[0]
    signals = np.zeros(size, dtype=np.int8)
    avg_filter = np.full(size, np.nan)
    std_filter = np.full(size, np.nan)
    filtered = np.full(size, np.nan)

    for i, value in enumerate(data):
        kind = detector.feed(float(value))
        if kind is not None:
            signals[i] = _SIGNAL_CODES[kind]
        if len(detector):
            filtered[i] = detector.window[-1]
        if lag and detector.primed:
            mean, stddev = detector.stats()
            avg_filter[i] = mean
            std_filter[i] = stddev

    return ZScoreResult(signals, avg_filter, std_filter, filtered)
