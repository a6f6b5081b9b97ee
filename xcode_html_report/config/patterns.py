from __future__ import annotations

from typing import Iterable

from xcode_html_report.domain.errors import ConfigError

BUNDLE_SUFFIX = ".xcresult"


def parse_patterns(raw: str | Iterable[str] | None) -> list[str]:
    """
    Turns the newline-delimited pattern input into a clean list.
    Blank lines are dropped; every remaining line must filter for xcresult bundles.
    """
    if raw is None:
        return []
    lines = raw.strip().split("\n") if isinstance(raw, str) else list(raw)

    patterns: list[str] = []
    for line in lines:
        pattern = (line or "").strip()
        if not pattern:
            continue
        if not pattern.endswith(BUNDLE_SUFFIX):
            raise ConfigError(f"pattern ({pattern}) must filter for xcresult files")
        patterns.append(pattern)
    return patterns


def default_pattern(test_deploy_dir: str) -> str:
    return f"{test_deploy_dir}/**/*{BUNDLE_SUFFIX}"
