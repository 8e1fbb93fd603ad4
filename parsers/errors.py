from __future__ import annotations

from typing import Optional


class NameFileError(Exception):
    """Base class for failures that end a run without a report."""

    exit_code = 1

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class FatalOpenError(NameFileError):
    exit_code = 1

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error opening file: {reason}", path=path)
        self.reason = reason


class FatalReadError(NameFileError):
    exit_code = 2

    def __init__(self, path: Optional[str], reason: str, line_no: int = 0) -> None:
        super().__init__(f"Error reading file: {reason}", path=path)
        self.reason = reason
        self.line_no = line_no
