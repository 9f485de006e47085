"""
Error kinds raised by the edit backend.

Each error keeps the values that caused it as attributes; ``message`` renders
them as text and ``format_error`` adds the response prefix. Callers and tests
inspect the attributes, never the text.
"""

from __future__ import annotations

from typing import Iterable


class EditFileLinesError(Exception):
    """Base class for every error the tools report back to the caller"""

    kind = "EditFileLinesError"

    def __init__(self) -> None:
        super().__init__(self.message)

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


class InvalidLineNumber(EditFileLinesError):
    kind = "InvalidLineNumber"

    def __init__(self, start_line: int, end_line: int) -> None:
        self.start_line = start_line
        self.end_line = end_line
        super().__init__()

    @property
    def message(self) -> str:
        return (
            "Line numbers must be positive integers "
            f"(got start line {self.start_line}, end line {self.end_line})"
        )


class InvalidRange(EditFileLinesError):
    kind = "InvalidRange"

    def __init__(self, start_line: int, end_line: int) -> None:
        self.start_line = start_line
        self.end_line = end_line
        super().__init__()

    @property
    def message(self) -> str:
        return (
            f"Invalid range: start line {self.start_line} "
            f"is greater than end line {self.end_line}"
        )


class OverlappingEdit(EditFileLinesError):
    kind = "OverlappingEdit"

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__()

    @property
    def message(self) -> str:
        return f"Line {self.line} is affected by multiple edits"


class LineOutOfRange(EditFileLinesError):
    kind = "LineOutOfRange"

    def __init__(self, line_numbers: Iterable[int], line_count: int) -> None:
        self.line_numbers = sorted(set(line_numbers))
        self.line_count = line_count
        super().__init__()

    @property
    def message(self) -> str:
        numbers = ", ".join(str(n) for n in self.line_numbers)
        noun = "Line" if len(self.line_numbers) == 1 else "Lines"
        return f"{noun} {numbers} out of range (file has {self.line_count} lines)"


class UnknownOrExpiredToken(EditFileLinesError):
    kind = "UnknownOrExpiredToken"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__()

    @property
    def message(self) -> str:
        return f"Invalid or expired state ID: {self.token}"


class AccessDenied(EditFileLinesError):
    kind = "AccessDenied"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__()

    @property
    def message(self) -> str:
        return f"Access denied - {self.reason}: {self.path}"


class ParentDirectoryMissing(EditFileLinesError):
    kind = "ParentDirectoryMissing"

    def __init__(self, parent: str) -> None:
        self.parent = parent
        super().__init__()

    @property
    def message(self) -> str:
        return f"Parent directory does not exist: {self.parent}"


class NotAFile(EditFileLinesError):
    kind = "NotAFile"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__()

    @property
    def message(self) -> str:
        return f"Not a regular file: {self.path}"


class FileAccessError(EditFileLinesError):
    """Reading or writing failed at the OS level"""

    kind = "FileAccessError"

    def __init__(self, path: str, operation: str, reason: str) -> None:
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__()

    @property
    def message(self) -> str:
        return f"Failed to {self.operation} {self.path}: {self.reason}"


def format_error(error: BaseException) -> str:
    """Render any error as the text of an error-flagged tool response"""
    if isinstance(error, EditFileLinesError):
        return f"Error: {error.message}"
    return f"Error: {error}"
