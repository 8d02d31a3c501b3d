"""Parser module - Cell references and REPL command lines"""

from .cellref import CellReference, parse_cell_reference
from .commands import ParsedCommand, parse_command, split_row_values, tokenize

__all__ = [
    'CellReference', 'parse_cell_reference',
    'ParsedCommand', 'parse_command', 'split_row_values', 'tokenize',
]
