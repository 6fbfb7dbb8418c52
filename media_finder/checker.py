"""Classification of files as audio, video or image by extension."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import PurePath


class FileType(Enum):
    """Kind of media file."""

    NONE = 0
    AUDIO = 1
    VIDEO = 2
    IMAGE = 3


_AUDIO = (".mp3", ".wav", ".flac", ".ogg", ".aac", ".m4a", ".opus", ".wma", ".aiff", ".ape")
_VIDEO = (
    ".mp4", ".mkv", ".avi", ".mov", ".mpg", ".mpeg",
    ".flv", ".webm", ".wmv", ".m4v", ".3gp",
)
_IMAGE = (
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp",
    ".tiff", ".tif", ".svg", ".heic", ".raw",
)

MEDIA_EXTENSIONS: dict[str, FileType] = {
    **{ext: FileType.AUDIO for ext in _AUDIO},
    **{ext: FileType.VIDEO for ext in _VIDEO},
    **{ext: FileType.IMAGE for ext in _IMAGE},
}

_TYPE_NAMES = {
    FileType.AUDIO: "audio",
    FileType.IMAGE: "images",
    FileType.VIDEO: "video",
}


class FileChecker(ABC):
    """Decides which kind of file a path refers to."""

    @abstractmethod
    def check(self, file: str | os.PathLike[str]) -> FileType:
        """Return the type of ``file``."""


class MultimediaChecker(FileChecker):
    """Recognises media files by their (case-insensitive) extension."""

    def check(self, file: str | os.PathLike[str]) -> FileType:
        extension = PurePath(file).suffix.lower()
        return MEDIA_EXTENSIONS.get(extension, FileType.NONE)


def file_type_name(file_type: FileType) -> str:
    """Name of the report section for ``file_type``; empty for non-media."""
    return _TYPE_NAMES.get(file_type, "")