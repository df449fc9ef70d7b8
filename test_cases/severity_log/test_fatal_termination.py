import signal
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals required")

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run_demo(log_dir: Path, scenario: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [
            sys.executable, "-m", "test_cases.severity_log_demo.run_log_demo",
            "--dir", str(log_dir),
            "--scenario", scenario,
        ],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_fatal_aborts_after_flush(tmp_path: Path) -> None:
    result = _run_demo(tmp_path, "fatal")

    assert result.returncode == -signal.SIGABRT
    error_log = (tmp_path / "error.log").read_text()
    assert error_log.startswith("FATAL | run_log_demo.py:")
    assert "| run_fatal | A fatal message going into error.log, and aborting the current process.\n" in error_log
    assert "Stack (most recent call last):" in error_log
    assert (tmp_path / "info.log").read_text() == ""


def test_header_survives_kill_before_body(tmp_path: Path) -> None:
    result = _run_demo(tmp_path, "crash")

    assert result.returncode == -signal.SIGKILL
    warn_log = (tmp_path / "warn.log").read_text()
    assert warn_log.startswith("WARNING | run_log_demo.py:")
    assert warn_log.endswith(" | run_crash | ")
    assert "never written" not in warn_log


def test_all_severities_routed(tmp_path: Path) -> None:
    result = _run_demo(tmp_path, "all")

    assert result.returncode == -signal.SIGABRT
    assert (tmp_path / "info.log").read_text().count("\n") == 1
    assert (tmp_path / "warn.log").read_text().count("\n") == 1

    error_lines = (tmp_path / "error.log").read_text().splitlines()
    assert error_lines[0].startswith("ERROR | ")
    assert error_lines[1].startswith("FATAL | ")


def test_clean_exit_without_fatal(tmp_path: Path) -> None:
    result = _run_demo(tmp_path, "quiet")

    assert result.returncode == 0
    assert (tmp_path / "error.log").read_text().startswith("ERROR | run_log_demo.py:")
