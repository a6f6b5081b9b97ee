from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Optional

from xcode_html_report.adapters.exporters import EnvmanExporter, OutputExporter, StdoutExporter
from xcode_html_report.adapters.xchtmlreport import ReportRenderer, XcHtmlReportRenderer
from xcode_html_report.config.ini_config import AppSettings
from xcode_html_report.repositories.bundle_repository import BundleRepository
from xcode_html_report.services.asset_relocation import AssetRelocator
from xcode_html_report.services.html_injection import GoogleAnalyticsInjector
from xcode_html_report.services.report_info import ReportInfoWriter
from xcode_html_report.services.report_service import ReportService

# Composition root: the only place that knows concrete classes.
#   cli/controller -> create_app(settings) -> ReportApp
#   ReportApp.renderer  installed once before discovery
#   ReportApp.service   runs discovery + per-bundle generation
#   ReportApp.exporter  publishes BITRISE_HTML_REPORT_DIR


@dataclass(frozen=True)
class ReportApp:
    settings: AppSettings
    renderer: ReportRenderer
    service: ReportService
    exporter: OutputExporter


def default_exporter() -> OutputExporter:
    if shutil.which("envman"):
        return EnvmanExporter()
    return StdoutExporter()


def create_app(
    settings: AppSettings,
    *,
    renderer: Optional[ReportRenderer] = None,
    exporter: Optional[OutputExporter] = None,
) -> ReportApp:
    if renderer is None:
        renderer = XcHtmlReportRenderer(
            binary=settings.renderer_binary,
            install_command=list(settings.install_command),
            generate_args=list(settings.generate_args),
            timeout_seconds=settings.timeout_seconds,
        )

    service = ReportService(
        renderer=renderer,
        bundle_repo=BundleRepository(),
        injector=GoogleAnalyticsInjector(measurement_id=settings.measurement_id),
        relocator=AssetRelocator(),
        info_writer=ReportInfoWriter(),
        html_report_dir=settings.html_report_dir,
    )

    return ReportApp(
        settings=settings,
        renderer=renderer,
        service=service,
        exporter=exporter or default_exporter(),
    )
