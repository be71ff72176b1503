"""Exception types raised by termpix."""

from __future__ import annotations

from pathlib import Path


class TermpixError(Exception):
    """Base class for termpix errors."""


class ExportError(TermpixError):
    """Writing the exported image failed. The editor keeps running."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
        self.reason = reason
