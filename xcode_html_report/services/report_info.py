from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path

from xcode_html_report.domain.models import ReportInfo

REPORT_INFO_FILE = "report-info.json"


@dataclass(frozen=True)
class ReportInfoWriter:
    info: ReportInfo = field(default_factory=ReportInfo)
    file_name: str = REPORT_INFO_FILE

    def write(self, report_dir: Path) -> Path:
        payload = json.dumps(asdict(self.info), separators=(",", ":"))
        path = report_dir / self.file_name
        path.write_text(payload, encoding="utf-8")
        return path
