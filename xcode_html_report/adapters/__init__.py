from .exporters import EnvmanExporter, OutputExporter, StdoutExporter
from .xchtmlreport import ReportRenderer, XcHtmlReportRenderer

__all__ = [
    "EnvmanExporter",
    "OutputExporter",
    "ReportRenderer",
    "StdoutExporter",
    "XcHtmlReportRenderer",
]
