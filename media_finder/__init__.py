"""Find audio, video and image files in a directory tree and report them as JSON."""

__version__ = "0.1.0"
__all__ = ["checker", "dirvisitor", "reportwriter", "checkmanager", "cli"]