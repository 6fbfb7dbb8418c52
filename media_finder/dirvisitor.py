"""Recursive search of a directory tree for media files."""

from __future__ import annotations

import os

from media_finder.checker import FileChecker, FileType, MultimediaChecker


def _raise_unless_permission(error: OSError) -> None:
    if not isinstance(error, PermissionError):
        raise error


class DirVisitor:
    """Walks a directory tree and groups the media files found by type."""

    def __init__(self, checker: FileChecker | None = None) -> None:
        self.checker = checker if checker is not None else MultimediaChecker()

    def visit(self, root: str | os.PathLike[str]) -> dict[FileType, list[str]]:
        """Return the media files under ``root``, keyed by type.

        Directories that cannot be read are skipped; a missing root raises.
        """
        result: dict[FileType, list[str]] = {}
        for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_unless_permission):
            for name in sorted(filenames):
                path = os.path.join(dirpath, name)
                if os.path.isdir(path):
                    continue
                file_type = self.checker.check(path)
                if file_type is not FileType.NONE:
                    result.setdefault(file_type, []).append(path)
        return result