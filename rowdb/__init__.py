"""
RowDB - A Personal Data Table Manager

In-memory tables of text cells, edited from an interactive shell and
saved to the line-based .odt format.
"""

__version__ = "1.0.0"

SOFTWARE_NAME = "RowDB"

from .core.manager import CommandResult, DatabaseManager
from .core.table import Table
from .core.repl import REPL

__all__ = ["CommandResult", "DatabaseManager", "Table", "REPL", "SOFTWARE_NAME"]
