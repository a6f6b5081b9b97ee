from .asset_relocation import AssetRelocator
from .html_injection import GoogleAnalyticsInjector, HtmlInjector
from .report_info import ReportInfoWriter
from .report_service import ReportService

__all__ = [
    "AssetRelocator",
    "GoogleAnalyticsInjector",
    "HtmlInjector",
    "ReportInfoWriter",
    "ReportService",
]
