from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from xcode_html_report.adapters.xchtmlreport import ReportRenderer
from xcode_html_report.domain.errors import RenderError, SetupError

INDEX_HTML = "<html><head><title>Report</title></head><body>ok</body></html>"


# -----------------------------
# Test doubles
# -----------------------------
class FakeRenderer(ReportRenderer):
    """Writes a tiny index.html instead of calling the real tool."""

    def __init__(self, fail_for: Optional[set[str]] = None, install_error: Optional[str] = None):
        self.fail_for = fail_for or set()
        self.install_error = install_error
        self.installed = False
        self.calls: list[tuple[Path, Path]] = []

    def install(self) -> None:
        if self.install_error:
            raise SetupError(self.install_error)
        self.installed = True

    def generate(self, destination: Path, bundle: Path) -> None:
        self.calls.append((destination, bundle))
        if str(bundle) in self.fail_for or bundle.parent.name in self.fail_for:
            raise RenderError(f"boom for {bundle}")
        (destination / "index.html").write_text(INDEX_HTML, encoding="utf-8")


# -----------------------------
# Helpers
# -----------------------------
def make_bundle(parent: Path, name: str = "run.xcresult", files: Optional[dict[str, str]] = None) -> Path:
    bundle = parent / name
    bundle.mkdir(parents=True, exist_ok=True)
    if files is None:
        files = {"screenshot.png": "png", "Info.plist": "plist"}
    for file_name, content in files.items():
        (bundle / file_name).write_text(content, encoding="utf-8")
    return bundle


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def renderer_factory():
    return FakeRenderer


@pytest.fixture
def bundle_factory():
    return make_bundle
