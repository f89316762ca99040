from .loader import load_config
from .schema import Settings, validate_config

__all__ = ["Settings", "load_config", "validate_config"]
