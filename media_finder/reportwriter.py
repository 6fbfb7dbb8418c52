"""Writers that publish the media file report as JSON."""

from __future__ import annotations

import json
import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import Enum
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from media_finder.checker import FileType, file_type_name

REPORT_FILE_NAME = ".media_files"
REPORT_ROUTE = "/media_files"
EMPTY_REPORT = '{"audio":[],"video":[],"images":[]}'


class ReportType(Enum):
    """How the report is published."""

    JSON = 0
    HTTP = 1


def home_dir() -> Path:
    """Return the user's home directory taken from ``HOME``."""
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    raise RuntimeError("cannot determine the home directory")


def build_report(raw_info: Mapping[FileType, Iterable[str]]) -> dict[str, list[str]]:
    """Arrange found files into the report's sections."""
    report: dict[str, list[str]] = {"audio": [], "video": [], "images": []}
    for file_type, paths in raw_info.items():
        report.setdefault(file_type_name(file_type), []).extend(paths)
    return report


def _serialize(raw_info: Mapping[FileType, Iterable[str]]) -> str:
    return json.dumps(build_report(raw_info), indent=2, sort_keys=True, ensure_ascii=False)


class ReportWriter(ABC):
    """Publishes a search report."""

    @abstractmethod
    def write_report(self, raw_info: Mapping[FileType, Iterable[str]]) -> None:
        """Publish the report built from ``raw_info``."""

    def close(self) -> None:
        """Release any resources held by the writer."""


class JSONWriter(ReportWriter):
    """Writes the report to a JSON file, by default ``~/.media_files``."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else None

    def write_report(self, raw_info: Mapping[FileType, Iterable[str]]) -> None:
        target = self.path if self.path is not None else home_dir() / REPORT_FILE_NAME
        text = _serialize(raw_info)
        try:
            with open(target, "w", encoding="utf-8") as stream:
                stream.write(text)
        except OSError as error:
            raise RuntimeError(f"cannot open report file for writing: {target}") from error


class _ReportServer(ThreadingHTTPServer):
    allow_reuse_address = False
    daemon_threads = True


class HTTPWriter(ReportWriter):
    """Serves the latest report over HTTP at ``/media_files``."""

    def __init__(self, host: str = "localhost", port: int = 1234) -> None:
        self.host = host
        self._lock = threading.Lock()
        self._report = EMPTY_REPORT
        writer = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                if self.path.split("?", 1)[0] != REPORT_ROUTE:
                    self.send_error(404)
                    return
                body = writer.current_report().encode("utf-8")
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)

            def log_message(self, format, *args):
                pass

        try:
            self._server = _ReportServer((host, port), Handler)
        except OSError as error:
            raise RuntimeError(
                f"HTTPWriter: server failed to start (port {port} in use?)"
            ) from error
        self.port = self._server.server_address[1]
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()
        print(f"HTTP server running at http://{host}:{self.port}{REPORT_ROUTE}")

    def write_report(self, raw_info: Mapping[FileType, Iterable[str]]) -> None:
        serialized = _serialize(raw_info)
        with self._lock:
            self._report = serialized

    def current_report(self) -> str:
        """Return the JSON text currently served."""
        with self._lock:
            return self._report

    def close(self) -> None:
        if self._thread.is_alive():
            self._server.shutdown()
            self._thread.join()
        self._server.server_close()

    def __enter__(self) -> HTTPWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()