"""
zpeaks.detector
=================
Streaming peak detection with the smoothed z-score method.

A sample is a peak when it lies more than ``threshold`` standard deviations
away from the mean of the trailing ``lag`` samples. Peaks are written back
into the window blended with the window's last value according to
``influence`` so a single spike does not dominate later statistics.

Usage::

    from zpeaks.detector import PeaksDetector

    detector = PeaksDetector(lag=30, threshold=5.0, influence=0.0)

    for value in readings:
        kind = detector.feed(value)
        if kind is not None:
            print(kind.value, value)
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, Generic, NamedTuple, Optional, TypeVar

from zpeaks.core.numeric import FLOAT, Arithmetic
from zpeaks.core.peak import PeakKind

logger = logging.getLogger("zpeaks.detector")

N = TypeVar("N")


class WindowStats(NamedTuple):
    mean: Any
    stddev: Any


class PeaksDetector(Generic[N]):
    """
    Rolling-window z-score peak detector.

    Parameters
    ----------
    lag:
        Window capacity. The first ``lag`` samples only prime the window and
        are never classified. ``lag == 0`` is accepted and never reports a peak.
    threshold:
        Multiplier on the window's standard deviation; must be non-negative.
    influence:
        Weight in ``[0, 1]`` of a peak's raw value when it is written back into
        the window. ``0`` stores the previous window value instead, ``1`` stores
        the peak unchanged.
    arithmetic:
        Numeric backend, ``FLOAT`` by default.
    """

    def __init__(
        self,
        lag: int,
        threshold: Any,
        influence: Any,
        arithmetic: Arithmetic[N] = FLOAT,
    ) -> None:
        if isinstance(lag, bool) or not isinstance(lag, numbers.Integral):
            raise ValueError(f"lag must be an integer, got {lag!r}")
        if lag < 0:
            raise ValueError(f"lag must be >= 0, got {lag}")

        self._arithmetic = arithmetic
        self._lag = int(lag)
        self._threshold: N = arithmetic.convert(threshold)
        self._influence: N = arithmetic.convert(influence)

        if not arithmetic.is_finite(self._threshold) or self._threshold < arithmetic.zero:
            raise ValueError(f"threshold must be a finite value >= 0, got {threshold!r}")
        if not arithmetic.is_finite(self._influence) or not (
            arithmetic.zero <= self._influence <= arithmetic.one
        ):
            raise ValueError(f"influence must be within [0, 1], got {influence!r}")

        self._window: list[N] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def lag(self) -> int:
        return self._lag

    @property
    def threshold(self) -> N:
        return self._threshold

    @property
    def influence(self) -> N:
        return self._influence

    @property
    def arithmetic(self) -> Arithmetic[N]:
        return self._arithmetic

    @property
    def window(self) -> tuple[N, ...]:
        """Snapshot of the window contents, oldest first."""
        return tuple(self._window)

    @property
    def primed(self) -> bool:
        return len(self._window) >= self._lag

    def __len__(self) -> int:
        return len(self._window)

    def stats(self) -> Optional[WindowStats]:
        """Mean and population standard deviation of the window, ``None`` when empty."""
        if not self._window:
            return None

        ar = self._arithmetic
        count = len(self._window)

        total = ar.zero
        for v in self._window:
            total = ar.add(total, v)
        mean = ar.div_count(total, count)

        sq_sum = ar.zero
        for v in self._window:
            delta = ar.sub(v, mean)
            sq_sum = ar.add(sq_sum, ar.mul(delta, delta))
        stddev = ar.sqrt(ar.div_count(sq_sum, count))

        return WindowStats(mean, stddev)

    def feed(self, value: Any) -> Optional[PeakKind]:
        """
        Insert a sample and classify it against the window.

        Returns ``PeakKind.HIGH`` or ``PeakKind.LOW`` for a peak and ``None``
        otherwise, including while the window is still filling up.

        Raises
        ------
        ValueError
            If ``value`` is NaN or infinite.
        """
        ar = self._arithmetic
        value = ar.convert(value)
        if not ar.is_finite(value):
            raise ValueError(f"sample must be finite, got {value!r}")

        if len(self._window) < self._lag:
            self._window.append(value)
            return None

        stats = self.stats()
        if stats is None:
            return None
        mean, stddev = stats
        last = self._window[-1]

        self._window.pop(0)

        if ar.abs(ar.sub(value, mean)) > ar.mul(self._threshold, stddev):
            blended = ar.add(
                ar.mul(value, self._influence),
                ar.mul(ar.sub(ar.one, self._influence), last),
            )
            self._window.append(blended)
            kind = PeakKind.HIGH if value > mean else PeakKind.LOW
            logger.debug("%s peak: value=%s mean=%s stddev=%s", kind.value, value, mean, stddev)
            return kind

        self._window.append(value)
        return None

    def __repr__(self) -> str:
        return (
            f"PeaksDetector(lag={self._lag}, threshold={self._threshold!r}, "
            f"influence={self._influence!r}, arithmetic={self._arithmetic!r})"
        )
