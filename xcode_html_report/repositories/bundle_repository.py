from __future__ import annotations

import glob
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from xcode_html_report.domain.errors import DiscoveryError


def _check_syntax(pattern: str) -> None:
    """Rejects patterns glob would silently treat as literals (e.g. an unterminated '[')."""
    if not pattern.strip():
        raise DiscoveryError("empty pattern")

    for segment in pattern.split(os.sep):
        i = 0
        while i < len(segment):
            if segment[i] != "[":
                i += 1
                continue
            j = i + 1
            if j < len(segment) and segment[j] in "!^":
                j += 1
            # a ']' right after the opening bracket is a literal member
            if j < len(segment) and segment[j] == "]":
                j += 1
            close = segment.find("]", j)
            if close == -1:
                raise DiscoveryError(f"syntax error in pattern ({pattern}): unterminated character class")
            i = close + 1


@dataclass
class BundleRepository:
    """
    Repository pattern: encapsulates locating xcresult bundles on disk.
    """

    def collect(self, patterns: Iterable[str]) -> set[Path]:
        patterns = list(patterns)
        for pattern in patterns:
            _check_syntax(pattern)

        matches: set[Path] = set()
        for pattern in patterns:
            try:
                found = glob.glob(pattern, recursive=True)
            except OSError as e:
                raise DiscoveryError(f"failed to expand pattern ({pattern}): {e}") from e
            matches.update(Path(os.path.normpath(m)) for m in found)
        return matches
