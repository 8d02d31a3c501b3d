"""Core module - Tables, errors, DatabaseManager, REPL"""

from .errors import (
    ErrorKind, RowDBError, AlreadyExistsError, NotFoundError, NoSelectionError,
    UnknownColumnError, InvalidReferenceError, ShapeMismatchError, FormatError,
    RowShapeError, StorageIOError,
)
from .table import Cell, Column, Table
from .manager import CommandResult, DatabaseManager

__all__ = [
    'ErrorKind', 'RowDBError', 'AlreadyExistsError', 'NotFoundError', 'NoSelectionError',
    'UnknownColumnError', 'InvalidReferenceError', 'ShapeMismatchError', 'FormatError',
    'RowShapeError', 'StorageIOError',
    'Cell', 'Column', 'Table',
    'CommandResult', 'DatabaseManager',
]
