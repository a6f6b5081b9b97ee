from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from xcode_html_report.domain.errors import RenderError, SetupError

logger = structlog.get_logger(__name__)

TAIL_LINES = 60


def _tail(text: str | None) -> str:
    return "\n".join((text or "").splitlines()[-TAIL_LINES:])


class ReportRenderer:
    """Port for the tool turning one xcresult bundle into html."""
    def install(self) -> None:
        raise NotImplementedError

    def generate(self, destination: Path, bundle: Path) -> None:
        raise NotImplementedError


@dataclass
class XcHtmlReportRenderer(ReportRenderer):
    """
    Adapter around the XCTestHTMLReport command line tool.
    generate_args may reference {bundle} and {output}.
    """
    binary: str = "xchtmlreport"
    install_command: list[str] = field(default_factory=lambda: ["brew", "install", "xctesthtmlreport"])
    generate_args: list[str] = field(default_factory=lambda: ["-r", "{bundle}", "-o", "{output}"])
    timeout_seconds: int = 1800

    def _run(self, command: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
        logger.debug("Running command", command=command, cwd=str(cwd) if cwd else None)
        return subprocess.run(
            command,
            capture_output=True,
            text=True,
            cwd=str(cwd) if cwd else None,
            timeout=self.timeout_seconds,
        )

    def is_installed(self) -> bool:
        return shutil.which(self.binary) is not None

    def install(self) -> None:
        if self.is_installed():
            logger.info("XCTestHTMLReport already installed", binary=self.binary)
            return

        try:
            proc = self._run(list(self.install_command))
        except subprocess.TimeoutExpired as e:
            raise SetupError("Installing the html generator timed out.") from e
        except Exception as e:
            raise SetupError(f"Failed to install the html generator: {e}") from e

        if proc.returncode != 0:
            raise SetupError(
                f"Install command exited with {proc.returncode}: {_tail(proc.stderr) or _tail(proc.stdout)}"
            )
        if not self.is_installed():
            raise SetupError(f"{self.binary} is still not on PATH after installation")

    def command_for(self, destination: Path, bundle: Path) -> list[str]:
        args = [a.format(bundle=str(bundle), output=str(destination)) for a in self.generate_args]
        return [shutil.which(self.binary) or self.binary] + args

    def generate(self, destination: Path, bundle: Path) -> None:
        cmd = self.command_for(destination, bundle)
        try:
            proc = self._run(cmd, cwd=destination)
        except subprocess.TimeoutExpired as e:
            raise RenderError(f"Execution timed out after {self.timeout_seconds}s.") from e
        except Exception as e:
            raise RenderError(f"Failed to execute: {e}") from e

        if proc.returncode != 0:
            raise RenderError(f"{self.binary} exited with {proc.returncode}: {_tail(proc.stderr)}")
        if proc.stdout:
            logger.debug("Generator output", output=_tail(proc.stdout))
