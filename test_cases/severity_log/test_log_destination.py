from pathlib import Path

import pytest

from src.core.severity_log.log_destination import (
    FallbackDestination,
    open_destination,
    truncate_if_oversized,
)
from src.core.severity_log.log_exceptions import DestinationOpenError


def test_open_destination_appends(tmp_path: Path) -> None:
    path = tmp_path / "app.log"
    path.write_text("existing\n")

    destination = open_destination(path, max_size=1024)
    destination.write("appended\n")
    destination.flush()
    destination.close()

    assert path.read_text() == "existing\nappended\n"


def test_truncate_if_oversized(tmp_path: Path) -> None:
    path = tmp_path / "app.log"

    assert truncate_if_oversized(path, 10) is False

    path.write_text("0123456789")
    assert truncate_if_oversized(path, 10) is False
    assert path.stat().st_size == 10

    path.write_text("0123456789A")
    assert truncate_if_oversized(path, 10) is True
    assert path.stat().st_size == 0


def test_open_destination_errors(tmp_path: Path) -> None:
    with pytest.raises(DestinationOpenError) as excinfo:
        open_destination(tmp_path / "no_such_dir" / "app.log", max_size=1024)
    assert "no_such_dir" in excinfo.value.path

    with pytest.raises(DestinationOpenError):
        open_destination(None, max_size=1024)

    with pytest.raises(DestinationOpenError):
        open_destination(tmp_path, max_size=1024)


def test_write_after_close_is_swallowed(tmp_path: Path) -> None:
    destination = open_destination(tmp_path / "app.log", max_size=1024)
    destination.close()

    destination.write("dropped")
    destination.flush()

    assert destination.closed


def test_fallback_follows_current_stderr(capsys) -> None:
    fallback = FallbackDestination()
    fallback.write("to whatever stderr is now\n")
    fallback.flush()
    fallback.close()

    assert capsys.readouterr().err == "to whatever stderr is now\n"
