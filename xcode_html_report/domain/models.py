######## models.py
########

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

SUCCEEDED = "succeeded"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass(frozen=True)
class ReportInfo:
    category: str = "test"


@dataclass(frozen=True)
class BundleOutcome:
    bundle: Path
    name: str
    status: str                 # "succeeded" | "skipped" | "failed"
    report_dir: Optional[Path] = None
    reason: str = ""


@dataclass(frozen=True)
class ReportResult:
    report_dir: Optional[Path]
    outcomes: tuple[BundleOutcome, ...] = ()

    @property
    def succeeded(self) -> list[BundleOutcome]:
        return [o for o in self.outcomes if o.status == SUCCEEDED]

    @property
    def skipped(self) -> list[BundleOutcome]:
        return [o for o in self.outcomes if o.status == SKIPPED]

    @property
    def failed(self) -> list[BundleOutcome]:
        return [o for o in self.outcomes if o.status == FAILED]
