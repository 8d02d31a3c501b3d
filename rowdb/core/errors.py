"""
Errors Module - Error kinds raised inside the RowDB core

Every failure the core can produce maps to one ErrorKind. The command
API in manager.py catches RowDBError and turns it into a CommandResult,
so nothing below ever escapes to the REPL as a raw exception.
"""

from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Kinds of recoverable core errors"""
    ALREADY_EXISTS = auto()
    NOT_FOUND = auto()
    NO_SELECTION = auto()
    UNKNOWN_COLUMN = auto()
    INVALID_REFERENCE = auto()
    SHAPE_MISMATCH = auto()
    FORMAT_ERROR = auto()
    ROW_SHAPE_ERROR = auto()
    IO_ERROR = auto()


class RowDBError(ValueError):
    """Base class for all core errors"""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AlreadyExistsError(RowDBError):
    kind = ErrorKind.ALREADY_EXISTS


class NotFoundError(RowDBError):
    kind = ErrorKind.NOT_FOUND


class NoSelectionError(RowDBError):
    kind = ErrorKind.NO_SELECTION

    def __init__(self, message: str = "No table selected"):
        super().__init__(message)


class UnknownColumnError(RowDBError):
    kind = ErrorKind.UNKNOWN_COLUMN


class InvalidReferenceError(RowDBError):
    kind = ErrorKind.INVALID_REFERENCE


class ShapeMismatchError(RowDBError):
    kind = ErrorKind.SHAPE_MISMATCH


class FormatError(RowDBError):
    kind = ErrorKind.FORMAT_ERROR


class RowShapeError(FormatError):
    """A data line whose field count differs from the column count"""
    kind = ErrorKind.ROW_SHAPE_ERROR

    def __init__(self, row: int, message: Optional[str] = None):
        super().__init__(message or f"incorrect syntax in row {row}")
        self.row = row


class StorageIOError(RowDBError):
    """Wraps an OSError raised while opening, reading or writing a file"""
    kind = ErrorKind.IO_ERROR

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
