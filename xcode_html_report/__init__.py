"""Turns Xcode xcresult bundles into browsable HTML test reports."""

__version__ = "0.1.0"
