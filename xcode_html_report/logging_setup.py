"""Logging configuration for the report step."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

_LOGGING_CONFIGURED = False


def configure_logging(verbose: bool = False, console_format: str = "text") -> BoundLogger:
    """Configure structlog on top of stdlib logging.

    Args:
        verbose: Emit DEBUG events when True, INFO and above otherwise.
        console_format: "text" for the dev console renderer, "json" for JSON lines.

    Returns:
        Configured structlog logger
    """
    global _LOGGING_CONFIGURED

    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    if _LOGGING_CONFIGURED:
        # debug logging may be toggled after the inputs are known
        root.setLevel(level)
        return structlog.get_logger()

    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(message)s",  # structlog will handle formatting
    )
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if console_format == "json" else structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _LOGGING_CONFIGURED = True
    return structlog.get_logger()


def log_inputs(logger: BoundLogger, settings: Any) -> None:
    """Print the resolved inputs once, the way CI steps echo their configuration."""
    logger.info(
        "Inputs",
        test_result_dir=str(settings.test_deploy_dir),
        xcresult_patterns=list(settings.xcresult_patterns),
        verbose=settings.verbose,
        html_report_dir=str(settings.html_report_dir) if settings.html_report_dir else "",
    )
