from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Only images and videos are useful next to the report
EXCLUDED_SUFFIXES = frozenset({".plist", ".log"})


@dataclass(frozen=True)
class AssetRelocator:
    excluded_suffixes: frozenset[str] = field(default=EXCLUDED_SUFFIXES)

    def asset_folder(self, bundle: Path, report_dir: Path) -> Path:
        return report_dir / bundle.name

    def relocate(self, bundle: Path, report_dir: Path) -> list[Path]:
        """
        Moves the top-level media files of an xcresult bundle into
        <report_dir>/<bundle file name>/ and returns their new locations.
        The asset folder must not exist yet. Moves already done are kept if a later one fails.
        """
        entries = sorted(bundle.iterdir())

        asset_folder = self.asset_folder(bundle, report_dir)
        asset_folder.mkdir()

        moved: list[Path] = []
        for entry in entries:
            # assets are dumped into the bundle root, folders are not needed
            if entry.is_dir() and not entry.is_symlink():
                continue
            if entry.suffix in self.excluded_suffixes:
                continue

            target = asset_folder / entry.name
            entry.rename(target)
            moved.append(target)
        return moved
