from .numeric import FLOAT, Arithmetic, DecimalArithmetic, FloatArithmetic
from .peak import PeakKind

__all__ = ["Arithmetic", "DecimalArithmetic", "FLOAT", "FloatArithmetic", "PeakKind"]
