from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

HEAD_OPEN = "<head>"
HEAD_CLOSE = "</head>"

GTAG_URL = "https://www.googletagmanager.com/gtag/js?id={measurement_id}"

GTAG_SNIPPET = """<!-- Google tag (gtag.js) -->
<script async src="{url}"></script>
<script>
  window.dataLayer = window.dataLayer || [];
  function gtag(){{dataLayer.push(arguments);}}
  gtag('js', new Date());

  gtag('config', '{measurement_id}');
</script>
"""


class HtmlInjector:
    """Strategy interface."""
    def inject(self, report_dir: Path) -> list[Path]:
        raise NotImplementedError


def insert_snippet(html: str, snippet: str) -> str:
    if HEAD_CLOSE in html:
        return html.replace(HEAD_CLOSE, snippet + HEAD_CLOSE, 1)
    if HEAD_OPEN in html:
        return html.replace(HEAD_OPEN, HEAD_OPEN + "\n" + snippet, 1)
    return html


@dataclass(frozen=True)
class GoogleAnalyticsInjector(HtmlInjector):
    measurement_id: str = "G-VJV9NL05SD"

    @property
    def marker(self) -> str:
        return GTAG_URL.format(measurement_id=self.measurement_id)

    @property
    def snippet(self) -> str:
        return GTAG_SNIPPET.format(url=self.marker, measurement_id=self.measurement_id)

    def inject(self, report_dir: Path) -> list[Path]:
        """
        Adds the gtag snippet to every top-level html file of report_dir.
        Returns the files that were rewritten.
        """
        changed: list[Path] = []
        for html_file in sorted(report_dir.glob("*.html")):
            if not html_file.is_file():
                continue
            content = html_file.read_bytes().decode("utf-8", errors="surrogateescape")
            if self.marker in content:
                continue

            updated = insert_snippet(content, self.snippet)
            if updated == content:
                continue

            html_file.write_bytes(updated.encode("utf-8", errors="surrogateescape"))
            changed.append(html_file)
        return changed
