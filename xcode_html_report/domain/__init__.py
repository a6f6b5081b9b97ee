from .errors import (
    BundleError,
    ConfigError,
    DiscoveryError,
    ExportError,
    RenderError,
    ReportError,
    SetupError,
)
from .models import BundleOutcome, ReportInfo, ReportResult

__all__ = [
    "BundleError",
    "BundleOutcome",
    "ConfigError",
    "DiscoveryError",
    "ExportError",
    "RenderError",
    "ReportError",
    "ReportInfo",
    "ReportResult",
    "SetupError",
]
