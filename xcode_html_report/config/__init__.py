from .ini_config import AppSettings, IniConfig
from .patterns import BUNDLE_SUFFIX, default_pattern, parse_patterns

__all__ = [
    "AppSettings",
    "BUNDLE_SUFFIX",
    "IniConfig",
    "default_pattern",
    "parse_patterns",
]
