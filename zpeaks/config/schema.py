"""
zpeaks.config.schema
======================
pydantic model for the YAML configuration.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, Field

from zpeaks.core.numeric import FLOAT, Arithmetic, DecimalArithmetic
from zpeaks.detector import PeaksDetector


class Settings(BaseModel):
    lag: int = Field(default=30, ge=0)
    threshold: Decimal = Field(default=Decimal("5.0"), ge=0)
    influence: Decimal = Field(default=Decimal("0.0"), ge=0, le=1)
    numeric: Literal["float", "decimal"] = "float"
    decimal_precision: int = Field(default=28, ge=1)
    column: int = Field(default=0, ge=0)
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    has_header: bool = False
    enable_prometheus: bool = False
    prometheus_port: int = Field(default=9109, ge=1024, le=65535)
    debug: bool = False

    def arithmetic(self) -> Arithmetic:
        if self.numeric == "decimal":
            return DecimalArithmetic(precision=self.decimal_precision)
        return FLOAT

    def build_detector(self) -> PeaksDetector:
        # Passed as text so the decimal backend keeps every configured digit.
        return PeaksDetector(
            self.lag,
            str(self.threshold),
            str(self.influence),
            arithmetic=self.arithmetic(),
        )


def validate_config(config: dict[str, Any]) -> Settings:
    """
    Validate a raw config mapping. Unknown keys are ignored.

    Raises
    ------
    pydantic.ValidationError
        If any known key has an invalid value.
    """
    return Settings(**{k: v for k, v in config.items() if k in Settings.model_fields})
