from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from xcode_html_report.adapters import xchtmlreport
from xcode_html_report.adapters.xchtmlreport import XcHtmlReportRenderer
from xcode_html_report.domain.errors import BundleError, RenderError, SetupError


# -----------------------------
# Test doubles
# -----------------------------
@dataclass
class FakeCompletedProcess:
    returncode: int
    stdout: str = ""
    stderr: str = ""


class Recorder:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def _which(available: set[str]):
    return lambda name: f"/usr/local/bin/{name}" if name in available else None


# -----------------------------
# generate
# -----------------------------
def test_generate_builds_command_and_runs_in_destination(tmp_path: Path, monkeypatch):
    run = Recorder(FakeCompletedProcess(returncode=0, stdout="done"))
    monkeypatch.setattr(xchtmlreport.subprocess, "run", run)
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which({"xchtmlreport"}))

    renderer = XcHtmlReportRenderer(timeout_seconds=42)
    renderer.generate(tmp_path / "out", tmp_path / "run.xcresult")

    command, kwargs = run.calls[0]
    assert command == [
        "/usr/local/bin/xchtmlreport",
        "-r", str(tmp_path / "run.xcresult"),
        "-o", str(tmp_path / "out"),
    ]
    assert kwargs["cwd"] == str(tmp_path / "out")
    assert kwargs["timeout"] == 42
    assert kwargs["capture_output"] is True


def test_generate_non_zero_exit_is_render_error(tmp_path: Path, monkeypatch):
    stderr = "\n".join(f"line {i}" for i in range(100))
    monkeypatch.setattr(xchtmlreport.subprocess, "run", Recorder(FakeCompletedProcess(returncode=3, stderr=stderr)))
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which(set()))

    with pytest.raises(RenderError) as excinfo:
        XcHtmlReportRenderer().generate(tmp_path, tmp_path / "run.xcresult")

    message = str(excinfo.value)
    assert "exited with 3" in message
    assert "line 99" in message
    assert "line 39\n" not in message
    assert isinstance(excinfo.value, BundleError)


def test_generate_timeout_is_render_error(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(
        xchtmlreport.subprocess, "run", Recorder(subprocess.TimeoutExpired(cmd="xchtmlreport", timeout=5))
    )

    with pytest.raises(RenderError, match="timed out"):
        XcHtmlReportRenderer(timeout_seconds=5).generate(tmp_path, tmp_path / "run.xcresult")


def test_generate_missing_binary_is_render_error(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(xchtmlreport.subprocess, "run", Recorder(FileNotFoundError("xchtmlreport")))
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which(set()))

    with pytest.raises(RenderError, match="Failed to execute"):
        XcHtmlReportRenderer().generate(tmp_path, tmp_path / "run.xcresult")


# -----------------------------
# install
# -----------------------------
def test_install_is_noop_when_binary_present(monkeypatch):
    run = Recorder()
    monkeypatch.setattr(xchtmlreport.subprocess, "run", run)
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which({"xchtmlreport"}))

    XcHtmlReportRenderer().install()

    assert run.calls == []


def test_install_runs_install_command(monkeypatch):
    available: set[str] = set()

    def fake_run(command, **kwargs):
        available.add("xchtmlreport")
        fake_run.command = command
        return FakeCompletedProcess(returncode=0)

    monkeypatch.setattr(xchtmlreport.subprocess, "run", fake_run)
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which(available))

    XcHtmlReportRenderer(install_command=["brew", "install", "xctesthtmlreport"]).install()

    assert fake_run.command == ["brew", "install", "xctesthtmlreport"]


def test_install_failure_is_setup_error(monkeypatch):
    monkeypatch.setattr(xchtmlreport.subprocess, "run", Recorder(FakeCompletedProcess(returncode=1, stderr="no brew")))
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which(set()))

    with pytest.raises(SetupError, match="no brew"):
        XcHtmlReportRenderer().install()


def test_install_that_does_not_provide_binary_is_setup_error(monkeypatch):
    monkeypatch.setattr(xchtmlreport.subprocess, "run", Recorder(FakeCompletedProcess(returncode=0)))
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which(set()))

    with pytest.raises(SetupError, match="still not on PATH"):
        XcHtmlReportRenderer().install()


def test_install_command_missing_is_setup_error(monkeypatch):
    monkeypatch.setattr(xchtmlreport.subprocess, "run", Recorder(FileNotFoundError("brew")))
    monkeypatch.setattr(xchtmlreport.shutil, "which", _which(set()))

    with pytest.raises(SetupError, match="Failed to install"):
        XcHtmlReportRenderer().install()
