"""
zpeaks.core.numeric
=====================
Arithmetic backends for the detector engine.

The detector never touches numbers directly; every operation goes through an
``Arithmetic`` object so the same engine runs over binary floats or exact
decimals.

* ``FLOAT``               – Python ``float`` (IEEE-754 binary64)
* ``DecimalArithmetic``   – ``decimal.Decimal`` in a private context

Usage::

    from zpeaks.core.numeric import DecimalArithmetic
    from zpeaks.detector import PeaksDetector

    detector = PeaksDetector(30, "5.0", "0.0", arithmetic=DecimalArithmetic(precision=40))
"""
from __future__ import annotations

import math
from decimal import Context, Decimal, InvalidOperation
from typing import Any, Protocol, TypeVar

N = TypeVar("N")


class Arithmetic(Protocol[N]):
    name: str
    zero: N
    one: N

    def convert(self, value: Any) -> N:
        ...

    def is_finite(self, value: N) -> bool:
        ...

    def add(self, a: N, b: N) -> N:
        ...

    def sub(self, a: N, b: N) -> N:
        ...

    def mul(self, a: N, b: N) -> N:
        ...

    def div_count(self, a: N, count: int) -> N:
        ...

    def abs(self, a: N) -> N:
        ...

    def sqrt(self, a: N) -> N:
        ...


class FloatArithmetic:
    name = "float"
    zero = 0.0
    one = 1.0

    def convert(self, value: Any) -> float:
        return float(value)

    def is_finite(self, value: float) -> bool:
        return math.isfinite(value)

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def div_count(self, a: float, count: int) -> float:
        return a / float(count)

    def abs(self, a: float) -> float:
        return abs(a)

    def sqrt(self, a: float) -> float:
        # math.sqrt raises on negatives instead of returning nan
        return math.sqrt(a)

    def __repr__(self) -> str:
        return "FloatArithmetic()"


class DecimalArithmetic:
    """
    Exact decimal arithmetic evaluated in its own ``decimal.Context``.

    Parameters
    ----------
    precision:
        Significant digits kept by every operation (the ``decimal`` default is 28).

    Floats are converted through ``repr`` so ``1.1`` becomes ``Decimal("1.1")``
    rather than its binary expansion; unparsable input raises ``ValueError``.
    Square roots of negative numbers raise ``decimal.InvalidOperation``.
    """

    name = "decimal"

    def __init__(self, precision: int = 28) -> None:
        if int(precision) < 1:
            raise ValueError(f"precision must be >= 1, got {precision!r}")
        self.precision = int(precision)
        self.context = Context(prec=self.precision)
        self.zero = Decimal(0)
        self.one = Decimal(1)

    def convert(self, value: Any) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            if isinstance(value, float):
                return Decimal(repr(value))
            if isinstance(value, str):
                return Decimal(value.strip())
            return Decimal(value)
        except (InvalidOperation, TypeError) as exc:
            raise ValueError(f"cannot convert {value!r} to Decimal") from exc

    def is_finite(self, value: Decimal) -> bool:
        return value.is_finite()

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.add(a, b)

    def sub(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.subtract(a, b)

    def mul(self, a: Decimal, b: Decimal) -> Decimal:
        return self.context.multiply(a, b)

    def div_count(self, a: Decimal, count: int) -> Decimal:
        return self.context.divide(a, Decimal(count))

    def abs(self, a: Decimal) -> Decimal:
        return self.context.abs(a)

    def sqrt(self, a: Decimal) -> Decimal:
        return self.context.sqrt(a)

    def __repr__(self) -> str:
        return f"DecimalArithmetic(precision={self.precision})"


FLOAT = FloatArithmetic()
