from .core.numeric import FLOAT, DecimalArithmetic, FloatArithmetic
from .core.peak import PeakKind
from .detector import PeaksDetector, WindowStats
from .stream import PeaksIter, peaks

__all__ = [
    "DecimalArithmetic",
    "FLOAT",
    "FloatArithmetic",
    "PeakKind",
    "PeaksDetector",
    "PeaksIter",
    "WindowStats",
    "peaks",
]

# ---------------------------------------------------------------------------
# Optional layers, import on demand:
# zpeaks.batch                      – numpy array form
# zpeaks.monitor                    – event-emitting monitor
# zpeaks.observability.prometheus   – prometheus exporter
# zpeaks.cli                        – command line entry point
# ---------------------------------------------------------------------------
