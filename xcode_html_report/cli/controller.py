from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from xcode_html_report import app_factory
from xcode_html_report.config.ini_config import HTML_REPORT_DIR_KEY, AppSettings, IniConfig
from xcode_html_report.domain.errors import ConfigError, DiscoveryError, ExportError, SetupError
from xcode_html_report.logging_setup import configure_logging, log_inputs


class ExitCode(IntEnum):
    OK = 0
    CONFIG_ERROR = 2
    SETUP_ERROR = 3
    DISCOVERY_ERROR = 4
    EXPORT_ERROR = 5


def run_step(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    app_builder: Optional[Callable[[AppSettings], "app_factory.ReportApp"]] = None,
) -> ExitCode:
    """
    Runs the whole step: inputs -> install -> generate -> export.
    Only fatal errors produce a non-zero exit; failed bundles are visible in the log.
    """
    logger = configure_logging()

    try:
        ini = IniConfig.from_env_or_default(config_path, environ)
        settings = ini.load_settings(environ, overrides)
    except ConfigError as e:
        logger.error("Invalid configuration", error=str(e))
        return ExitCode.CONFIG_ERROR

    logger = configure_logging(settings.verbose)
    log_inputs(logger, settings)

    builder = app_builder or app_factory.create_app
    app = builder(settings)

    logger.info("Installing XCTestHTMLReport")
    try:
        app.renderer.install()
    except SetupError as e:
        logger.error("failed to install htmlGenerator tool", error=str(e))
        return ExitCode.SETUP_ERROR

    try:
        result = app.service.run(settings.test_deploy_dir, settings.xcresult_patterns)
    except DiscoveryError as e:
        logger.error("failed to find all xcresult files", error=str(e))
        return ExitCode.DISCOVERY_ERROR
    except SetupError as e:
        logger.error("failed to create test report directory", error=str(e))
        return ExitCode.SETUP_ERROR

    report_dir = str(result.report_dir) if result.report_dir else ""
    try:
        app.exporter.export_output(HTML_REPORT_DIR_KEY, report_dir)
    except ExportError as e:
        logger.error("failed to export outputs", error=str(e))
        return ExitCode.EXPORT_ERROR

    return ExitCode.OK
