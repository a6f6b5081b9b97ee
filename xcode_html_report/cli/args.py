from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from xcode_html_report.cli.controller import run_step

app = typer.Typer(help="Generate HTML reports from Xcode xcresult bundles", add_completion=False)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="INI file with defaults (also read from XCHTML_REPORT_INI)",
    exists=True,
    dir_okay=False,
)


@app.command()
def generate(
    test_result_dir: Optional[Path] = typer.Option(
        None, "--test-result-dir", help="Root searched for *.xcresult when no pattern is given"
    ),
    pattern: Optional[List[str]] = typer.Option(
        None, "--pattern", "-p", help="Glob for xcresult bundles, must end with .xcresult (repeatable)"
    ),
    html_report_dir: Optional[Path] = typer.Option(
        None, "--html-report-dir", help="Existing directory receiving the reports (default: new temp dir)"
    ),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help="Enable debug logging"),
    config: Optional[Path] = CONFIG_OPTION,
) -> None:
    overrides = {
        "test_deploy_dir": test_result_dir,
        "xcresult_patterns": list(pattern) if pattern else None,
        "html_report_dir": html_report_dir,
        "verbose": verbose,
    }
    code = run_step(config_path=config, overrides=overrides)
    raise typer.Exit(code=int(code))
