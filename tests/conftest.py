from __future__ import annotations

import pytest

REFERENCE_SERIES = [
    1.0, 1.0, 1.1, 1.0, 0.9, 1.0, 1.0, 1.1, 1.0, 0.9, 1.0, 1.1, 1.0, 1.0, 0.9, 1.0, 1.0,
    1.1, 1.0, 1.0, 1.0, 1.0, 1.1, 0.9, 1.0, 1.1, 1.0, 1.0, 0.9, 1.0, 1.1, 1.0, 1.0, 1.1,
    1.0, 0.8, 0.9, 1.0, 1.2, 0.9, 1.0, 1.0, 1.1, 1.2, 1.0, 1.5, 1.0, 3.0, 2.0, 5.0, 3.0,
    2.0, 1.0, 1.0, 1.0, 0.9, 1.0, 1.0, 3.0, 2.6, 4.0, 3.0, 3.2, 2.0, 1.0, 1.0, 0.8, 4.0,
    4.0, 2.0, 2.5, 1.0, 1.0, 1.0,
]

REFERENCE_PEAKS = [45, 47, 48, 49, 50, 51, 58, 59, 60, 61, 62, 63, 67, 68, 69, 70]


@pytest.fixture
def reference_series() -> list[float]:
    return list(REFERENCE_SERIES)


@pytest.fixture
def reference_peaks() -> list[int]:
    return list(REFERENCE_PEAKS)
