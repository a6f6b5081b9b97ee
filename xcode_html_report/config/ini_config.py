########## ini_config.py

from __future__ import annotations

import os
import shlex
from configparser import ConfigParser, Error as ConfigParserError
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from xcode_html_report.config.patterns import parse_patterns
from xcode_html_report.domain.errors import ConfigError

INI_DEFAULT_NAME = "xcode_html_report.ini"
INI_ENV_KEY = "XCHTML_REPORT_INI"

# Step inputs as the CI host passes them in the environment
TEST_RESULT_DIR_KEY = "test_result_dir"
XCRESULT_PATTERNS_KEY = "xcresult_patterns"
VERBOSE_KEY = "verbose"
HTML_REPORT_DIR_KEY = "BITRISE_HTML_REPORT_DIR"

DEFAULT_BINARY = "xchtmlreport"
DEFAULT_INSTALL_COMMAND = "brew install xctesthtmlreport"
DEFAULT_GENERATE_ARGS = "-r {bundle} -o {output}"
DEFAULT_TIMEOUT_SECONDS = 1800
DEFAULT_MEASUREMENT_ID = "G-VJV9NL05SD"


@dataclass(frozen=True)
class AppSettings:
    test_deploy_dir: Path
    xcresult_patterns: list[str] = field(default_factory=list)
    verbose: bool = False

    # externally owned report root; None means "create a temp dir"
    html_report_dir: Optional[Path] = None

    renderer_binary: str = DEFAULT_BINARY
    install_command: list[str] = field(default_factory=lambda: shlex.split(DEFAULT_INSTALL_COMMAND))
    generate_args: list[str] = field(default_factory=lambda: shlex.split(DEFAULT_GENERATE_ARGS))
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    measurement_id: str = DEFAULT_MEASUREMENT_ID


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ConfigError(f"{key}: value ({raw}) is not one of: true, false")


def _to_path(raw: str) -> Path:
    raw = os.path.expandvars(os.path.expanduser(raw))
    return Path(raw).resolve()


class IniConfig:
    """
    Adapter around ConfigParser and the step environment.
    Keeps input handling out of the pipeline code.
    """

    def __init__(self, ini_path: Optional[Path], *, required: bool = True):
        self._ini_path = ini_path
        self._cfg = ConfigParser(interpolation=None)
        if ini_path is None:
            return
        try:
            read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        except ConfigParserError as e:
            raise ConfigError(f"INI file is malformed: {ini_path}: {e}") from e
        if not read_ok and required:
            raise ConfigError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Optional[Path]:
        return self._ini_path

    @staticmethod
    def from_env_or_default(explicit: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> "IniConfig":
        env = os.environ if environ is None else environ
        if explicit is not None:
            return IniConfig(explicit)

        ini_raw = (env.get(INI_ENV_KEY) or "").strip()
        if ini_raw:
            return IniConfig(Path(ini_raw))

        # The repo-root INI only carries defaults, so it may be absent
        return IniConfig(Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME, required=False)

    def _get(self, section: str, key: str) -> str:
        return (self._cfg.get(section, key, fallback="") or "").strip()

    def load_settings(
        self,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> AppSettings:
        """
        Precedence: overrides (CLI) > environment > INI > defaults.
        Override values of None mean "not given".
        """
        env = os.environ if environ is None else environ
        given = {k: v for k, v in (overrides or {}).items() if v is not None}

        def pick(key: str, section: str, ini_key: str) -> str:
            env_raw = (env.get(key) or "").strip()
            return env_raw or self._get(section, ini_key)

        # Inputs
        if "test_deploy_dir" in given:
            test_deploy_dir = Path(given["test_deploy_dir"])
        else:
            raw = pick(TEST_RESULT_DIR_KEY, "inputs", "test_result_dir")
            if not raw:
                raise ConfigError(f"{TEST_RESULT_DIR_KEY}: required variable is not present")
            test_deploy_dir = _to_path(raw)

        if "xcresult_patterns" in given:
            patterns = parse_patterns(given["xcresult_patterns"])
        else:
            patterns = parse_patterns(pick(XCRESULT_PATTERNS_KEY, "inputs", "xcresult_patterns"))

        if "verbose" in given:
            verbose = bool(given["verbose"])
        else:
            raw = pick(VERBOSE_KEY, "inputs", "verbose")
            verbose = _parse_bool(raw, VERBOSE_KEY) if raw else False

        # Output
        if "html_report_dir" in given:
            html_report_dir: Optional[Path] = Path(given["html_report_dir"])
        else:
            raw = pick(HTML_REPORT_DIR_KEY, "output", "html_report_dir")
            html_report_dir = _to_path(raw) if raw else None

        # Renderer
        binary = self._get("renderer", "binary") or DEFAULT_BINARY
        install_command = shlex.split(self._get("renderer", "install_command") or DEFAULT_INSTALL_COMMAND)
        generate_args = shlex.split(self._get("renderer", "generate_args") or DEFAULT_GENERATE_ARGS)
        try:
            timeout_seconds = self._cfg.getint("renderer", "timeout_seconds", fallback=DEFAULT_TIMEOUT_SECONDS)
        except ValueError as e:
            raise ConfigError(f"timeout_seconds must be an integer: {e}") from e
        if timeout_seconds <= 0:
            raise ConfigError(f"timeout_seconds must be positive, got {timeout_seconds}")

        # Analytics
        measurement_id = self._get("analytics", "measurement_id") or DEFAULT_MEASUREMENT_ID

        return AppSettings(
            test_deploy_dir=test_deploy_dir,
            xcresult_patterns=patterns,
            verbose=verbose,
            html_report_dir=html_report_dir,
            renderer_binary=binary,
            install_command=install_command,
            generate_args=generate_args,
            timeout_seconds=timeout_seconds,
            measurement_id=measurement_id,
        )
