from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import structlog

from xcode_html_report.adapters.xchtmlreport import ReportRenderer
from xcode_html_report.config.patterns import default_pattern
from xcode_html_report.domain.errors import BundleError, SetupError
from xcode_html_report.domain.models import (
    FAILED,
    SKIPPED,
    SUCCEEDED,
    BundleOutcome,
    ReportResult,
)
from xcode_html_report.repositories.bundle_repository import BundleRepository
from xcode_html_report.services.asset_relocation import AssetRelocator
from xcode_html_report.services.html_injection import GoogleAnalyticsInjector, HtmlInjector
from xcode_html_report.services.report_info import ReportInfoWriter

logger = structlog.get_logger(__name__)


@dataclass
class ReportService:
    """
    Service layer: discovers xcresult bundles and turns each one into an html report.
    A failing bundle is logged and recorded; it never stops the others.
    """
    renderer: ReportRenderer
    bundle_repo: BundleRepository = field(default_factory=BundleRepository)
    injector: HtmlInjector = field(default_factory=GoogleAnalyticsInjector)
    relocator: AssetRelocator = field(default_factory=AssetRelocator)
    info_writer: ReportInfoWriter = field(default_factory=ReportInfoWriter)
    # externally owned report root; must already exist when given
    html_report_dir: Optional[Path] = None

    def run(self, test_deploy_dir: Path | str, patterns: Sequence[str] = ()) -> ReportResult:
        logger.info("Collecting xcresult files")

        effective = list(patterns) or [default_pattern(str(test_deploy_dir))]
        paths = self.bundle_repo.collect(effective)

        if not paths:
            logger.info("No files found.")
            return ReportResult(report_dir=None)

        logger.info("List of files:")
        for path in sorted(paths):
            logger.info(f"- {path}")

        root_dir = self.reports_root_dir()

        logger.info("Generating reports", report_dir=str(root_dir))

        outcomes: list[BundleOutcome] = []
        for path in paths:
            outcome = self.generate_report(root_dir, path)
            if outcome.status == FAILED:
                logger.error("failed to generate test report", bundle=str(path), reason=outcome.reason)
            outcomes.append(outcome)

        result = ReportResult(report_dir=root_dir, outcomes=tuple(outcomes))
        logger.info(
            "Finished",
            succeeded=len(result.succeeded),
            skipped=len(result.skipped),
            failed=len(result.failed),
        )
        return result

    def reports_root_dir(self) -> Path:
        if self.html_report_dir is None:
            try:
                return Path(tempfile.mkdtemp(prefix="html-reports"))
            except OSError as e:
                raise SetupError(f"failed to create test report directory: {e}") from e

        if not self.html_report_dir.is_dir():
            raise SetupError(f"html report dir ({self.html_report_dir}) does not exist or is not a folder")
        return self.html_report_dir

    def generate_report(self, root_dir: Path, bundle: Path) -> BundleOutcome:
        name = bundle.stem
        report_dir = root_dir / name

        try:
            report_dir.mkdir()
        except FileExistsError:
            logger.warning("Html report already exists", name=name, report_dir=str(report_dir))
            return BundleOutcome(bundle=bundle, name=name, status=SKIPPED, report_dir=report_dir,
                                 reason="report directory already exists")
        except OSError as e:
            return BundleOutcome(bundle=bundle, name=name, status=FAILED, reason=str(e))

        try:
            self._render(report_dir, bundle)
        except BundleError as e:
            return BundleOutcome(bundle=bundle, name=name, status=FAILED, report_dir=report_dir, reason=str(e))

        logger.debug("Report generated", name=name, report_dir=str(report_dir))
        return BundleOutcome(bundle=bundle, name=name, status=SUCCEEDED, report_dir=report_dir)

    def _render(self, report_dir: Path, bundle: Path) -> None:
        # Each step runs only if the previous one succeeded; nothing is rolled back.
        try:
            self.renderer.generate(report_dir, bundle)
        except Exception as e:
            raise BundleError(f"failed to generate html: {e}") from e

        try:
            changed = self.injector.inject(report_dir)
        except Exception as e:
            raise BundleError(f"failed to inject Google Analytics: {e}") from e
        logger.debug("Analytics injected", files=[p.name for p in changed or []])

        try:
            moved = self.relocator.relocate(bundle, report_dir)
        except Exception as e:
            raise BundleError(f"failed to move assets: {e}") from e
        logger.debug("Assets moved", count=len(moved or []))

        try:
            self.info_writer.write(report_dir)
        except Exception as e:
            raise BundleError(f"failed to create report info file: {e}") from e
