"""Command-line entry point."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

from media_finder.checkmanager import CheckManager
from media_finder.reportwriter import ReportType, home_dir

DEFAULT_INTERVAL = 30
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass
class CmdArgs:
    """Parsed command-line options."""

    directory: Path
    interval: int = DEFAULT_INTERVAL
    report_type: ReportType = ReportType.JSON


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text}")
    return value


def parse_args(argv: list[str] | None = None) -> CmdArgs:
    """Parse ``--dir``, ``--interval`` and ``--report`` options."""
    if argv is None:
        argv = sys.argv[1:]
    result = CmdArgs(directory=home_dir())
    args = iter(argv)
    for arg in args:
        value = next(args, None) if arg in ("--dir", "--interval", "--report") else None
        if value is None:
            raise ValueError(f"Unknown argument: {arg}")
        if arg == "--dir":
            result.directory = Path(value)
            if not result.directory.is_dir():
                raise ValueError("Directory does not exist or is not a directory")
        elif arg == "--interval":
            result.interval = _parse_int(value)
            if result.interval <= 0:
                raise ValueError("Interval must be positive")
        else:
            kind = value.lower()
            if kind == "json":
                result.report_type = ReportType.JSON
            elif kind == "http":
                result.report_type = ReportType.HTTP
            else:
                raise ValueError(f"Unknown report type: {kind}")
    return result


def main(argv: list[str] | None = None) -> int:
    """Run the media finder; return the process exit status."""
    manager = None
    try:
        args = parse_args(argv)
        manager = CheckManager(args.interval, args.directory, args.report_type)
        manager.run()
    except KeyboardInterrupt:
        return 130
    except Exception as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    finally:
        if manager is not None:
            manager.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())