from __future__ import annotations


class ReportError(Exception):
    """Base class for everything the report step raises on purpose."""


class ConfigError(ReportError):
    """Inputs are missing or invalid. Raised before any work starts."""


class DiscoveryError(ReportError):
    """A bundle pattern could not be expanded."""


class SetupError(ReportError):
    """The run cannot start: report root or renderer unavailable."""


class BundleError(ReportError):
    """One bundle failed. The run carries on with the rest."""


class RenderError(BundleError):
    """The external renderer exited non-zero or timed out."""


class ExportError(ReportError):
    """The report root could not be published to the calling process."""
