"""Periodic search for media files and publication of the report."""

from __future__ import annotations

import os
import time

from media_finder.dirvisitor import DirVisitor
from media_finder.reportwriter import HTTPWriter, JSONWriter, ReportType, ReportWriter


def make_writer(report_type: ReportType) -> ReportWriter:
    """Create the writer for ``report_type``."""
    if report_type is ReportType.HTTP:
        return HTTPWriter()
    return JSONWriter()


class CheckManager:
    """Runs the directory search every ``repeating_time`` seconds."""

    def __init__(
        self,
        repeating_time: float,
        checking_dir: str | os.PathLike[str],
        report_type: ReportType,
    ) -> None:
        self.repeating_time = repeating_time
        self.checking_dir = checking_dir
        self.visitor = DirVisitor()
        self.writer = make_writer(report_type)

    def run_once(self) -> None:
        """Search once and publish the report."""
        raw_info = self.visitor.visit(self.checking_dir)
        self.writer.write_report(raw_info)
        print("Report written", flush=True)

    def run(self) -> None:
        """Search and publish repeatedly, forever."""
        while True:
            self.run_once()
            time.sleep(self.repeating_time)

    def close(self) -> None:
        """Release the writer's resources."""
        self.writer.close()