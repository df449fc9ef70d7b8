"""
Module: run_log_demo.py
Location: test_cases/severity_log_demo/
Version: 0.1.0

Routes one message of each severity into three log files:

    python -m test_cases.severity_log_demo.run_log_demo --dir /tmp/demo_logs

--scenario selects what happens after initialization:
- all:    INFO, WARNING, ERROR, then FATAL (the process aborts)
- fatal:  a single FATAL message (the process aborts)
- crash:  start a WARNING record, then SIGKILL the process before the
          body is written; only the header survives
- quiet:  INFO, WARNING, ERROR and a normal exit
"""

import argparse
import os
import signal
import sys
from pathlib import Path

from src.core.severity_log.log_record import log
from src.core.severity_log.log_registry import initialize_logger, shutdown_logger
from src.core.severity_log.log_severity import LogSeverity


def run_quiet() -> None:
    with log(LogSeverity.INFO) as record:
        record.append("An info message going into info.log")
    with log(LogSeverity.WARNING) as record:
        record.append("A warn message going into warn.log")
    with log(LogSeverity.ERROR) as record:
        record.append("An error message going into error.log")


def run_fatal() -> None:
    with log(LogSeverity.FATAL) as record:
        record.append("A fatal message going into error.log, ")
        record.append("and aborting the current process.")


def run_crash() -> None:
    record = log(LogSeverity.WARNING)
    record.append("this body is never written")
    os.kill(os.getpid(), signal.SIGKILL)


def main():
    parser = argparse.ArgumentParser(description="Severity-routed logging demo")
    parser.add_argument("--dir", default="logs", help="Directory for the log files")
    parser.add_argument(
        "--scenario",
        choices=["all", "fatal", "crash", "quiet"],
        default="all",
    )
    parser.add_argument("--max-size", type=int, default=10 * 1024 * 1024)

    args = parser.parse_args()

    log_dir = Path(args.dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    registry = initialize_logger(
        log_dir / "info.log",
        log_dir / "warn.log",
        log_dir / "error.log",
        max_size=args.max_size,
    )
    if registry.is_degraded:
        for channel, failure in registry.failures.items():
            print(f"[Demo] {channel.name} falls back to stderr: {failure}", file=sys.stderr)

    if args.scenario == "quiet":
        run_quiet()
    elif args.scenario == "all":
        run_quiet()
        run_fatal()
    elif args.scenario == "fatal":
        run_fatal()
    elif args.scenario == "crash":
        run_crash()

    shutdown_logger(registry)


if __name__ == "__main__":
    main()
