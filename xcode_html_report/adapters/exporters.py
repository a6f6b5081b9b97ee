from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from xcode_html_report.domain.errors import ExportError


class OutputExporter:
    """Strategy interface."""
    def export_output(self, key: str, value: str) -> None:
        raise NotImplementedError


@dataclass
class EnvmanExporter(OutputExporter):
    """Publishes step outputs through the envman tool of the CI host."""
    envman: str = "envman"

    def export_output(self, key: str, value: str) -> None:
        cmd = [self.envman, "add", "--key", key, "--value", value]
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True)
        except Exception as e:
            raise ExportError(f"Failed to export {key}: {e}") from e
        if proc.returncode != 0:
            raise ExportError(f"Failed to export {key}: {(proc.stderr or proc.stdout).strip()}")


@dataclass
class StdoutExporter(OutputExporter):
    """Fallback sink for local runs: prints KEY=value."""
    stream: Optional[TextIO] = None

    def export_output(self, key: str, value: str) -> None:
        out = self.stream or sys.stdout
        out.write(f"{key}={value}\n")
        out.flush()
