"""
DatabaseManager - Registry of tables and the command API

This is the primary interface for interacting with RowDB. It owns every
loaded Table, remembers which one is current, and exposes two layers:

- raising operations (create_table, load_table, ...) that signal failure
  with RowDBError subclasses;
- command methods (create, load, ...) that never raise a core error and
  return a CommandResult instead. The REPL and the demo app use these.

Usage:
    manager = DatabaseManager()
    manager.create("People", ["Name", "Age"])
    manager.add_row(["Alice", "30"])
    manager.edit("Age1", "31")
    print(manager.view().output)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import (
    AlreadyExistsError, ErrorKind, NoSelectionError, NotFoundError,
    RowDBError, UnknownColumnError,
)
from .table import Table
from ..parser.cellref import parse_cell_reference
from ..storage.engine import find_table_file, resolve_path


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of one command"""
    ok: bool
    message: str = ""
    kind: Optional[ErrorKind] = None
    output: str = ""

    @classmethod
    def success(cls, message: str = "", output: str = "") -> 'CommandResult':
        return cls(ok=True, message=message, output=output)

    @classmethod
    def failure(cls, error: RowDBError) -> 'CommandResult':
        return cls(ok=False, message=error.message, kind=error.kind)

    def to_dict(self) -> dict:
        return {
            'ok': self.ok,
            'message': self.message,
            'kind': self.kind.name if self.kind else None,
            'output': self.output,
        }


class DatabaseManager:
    """
    Holds the loaded tables and the current selection.

    The current table is stored by name and looked up on every access,
    so registering more tables never invalidates it.
    """

    def __init__(self, data_dir: Optional[str] = None):
        """
        Args:
            data_dir: Directory that relative load/save paths resolve
                against (None means the process working directory)
        """
        self.data_dir = data_dir
        self.tables: Dict[str, Table] = {}
        self._current: Optional[str] = None

    # -- selection ---------------------------------------------------------

    @property
    def current_table(self) -> Optional[Table]:
        if self._current is None:
            return None
        return self.tables.get(self._current)

    @property
    def current_table_name(self) -> str:
        return self._current or ""

    def has_current_table(self) -> bool:
        return self.current_table is not None

    def _require_current(self) -> Table:
        table = self.current_table
        if table is None:
            raise NoSelectionError()
        return table

    def get_table(self, name: str) -> Table:
        table = self.tables.get(name)
        if table is None:
            raise NotFoundError(f"Table not found: {name}")
        return table

    # -- raising operations ------------------------------------------------

    def create_table(self, name: str, column_names: Sequence[str]) -> Table:
        """Register a new table and make it current"""
        if name in self.tables:
            raise AlreadyExistsError(f"Table already exists: {name}")

        table = Table(name, column_names)
        self.tables[name] = table
        self._current = name
        logger.info("Created table %s with columns %s", name, table.column_names())
        return table

    def load_table(self, path: str) -> Tuple[Table, str]:
        """
        Load a table file and make it current.

        The table is registered under the name stored in the file, which
        need not match the file name. An already loaded table of the same
        name is replaced.

        Returns:
            The loaded table and the path it was read from
        """
        actual_path = find_table_file(path, self.data_dir)
        table = Table.load_from_file(actual_path)

        if table.name in self.tables:
            logger.warning("Loading %s replaces table %s already in memory", actual_path, table.name)
        self.tables[table.name] = table
        self._current = table.name
        logger.info("Loaded table %s (%d rows) from %s", table.name, table.row_count(), actual_path)
        return table, actual_path

    def save_table(self, path: str) -> str:
        """Write the current table to path, overwriting it; returns the path written"""
        table = self._require_current()
        actual_path = resolve_path(path, self.data_dir)
        table.save_to_file(actual_path)
        logger.info("Saved table %s to %s", table.name, actual_path)
        return actual_path

    def select_table(self, name: str) -> Table:
        table = self.get_table(name)
        self._current = name
        return table

    def drop_table(self, name: str) -> None:
        """Forget a table; clears the selection if it was current"""
        self.get_table(name)
        del self.tables[name]
        if self._current == name:
            self._current = None
        logger.info("Dropped table %s", name)

    def edit_cell(self, cell_ref: str, new_value: str) -> None:
        """
        Set the cell named by a reference such as "Name5".

        Rows past the end are created (all empty) until the referenced
        row exists.
        """
        table = self._require_current()
        ref = parse_cell_reference(cell_ref)

        if not table.has_column(ref.column):
            raise UnknownColumnError(f"Column not found: {ref.column}")

        width = len(table.column_names())
        while ref.row >= table.row_count():
            table.add_row([""] * width)

        table.set_cell(ref.column, ref.row, new_value)

    def add_table_row(self, values: Sequence[str]) -> None:
        self._require_current().add_row(values)

    def list_tables(self) -> List[str]:
        return sorted(self.tables)

    def render_current(self) -> str:
        return self._require_current().render()

    # -- command API -------------------------------------------------------

    def _run(self, name: str, action: Callable[[], CommandResult]) -> CommandResult:
        logger.debug("Running command %s", name)
        try:
            return action()
        except RowDBError as e:
            logger.debug("Command %s failed: %s (%s)", name, e.message, e.kind.name)
            return CommandResult.failure(e)

    def create(self, table_name: str, column_names: Sequence[str]) -> CommandResult:
        def action():
            self.create_table(table_name, column_names)
            return CommandResult.success(f"Table '{table_name}' created successfully.")
        return self._run('create', action)

    def edit(self, cell_ref: str, value: str) -> CommandResult:
        def action():
            self.edit_cell(cell_ref, value)
            return CommandResult.success(f"Cell {cell_ref} updated to: {value}")
        return self._run('edit', action)

    def view(self) -> CommandResult:
        return self._run('view', lambda: CommandResult.success(output=self.render_current()))

    def select(self, table_name: str) -> CommandResult:
        def action():
            self.select_table(table_name)
            return CommandResult.success(f"Selected table: {table_name}")
        return self._run('select', action)

    def load(self, path: str) -> CommandResult:
        def action():
            table, actual_path = self.load_table(path)
            return CommandResult.success(
                f"Table '{table.name}' loaded successfully from '{actual_path}'."
            )
        return self._run('load', action)

    def save(self, path: str) -> CommandResult:
        def action():
            actual_path = self.save_table(path)
            return CommandResult.success(f"Table saved to '{actual_path}' successfully.")
        return self._run('save', action)

    def add_row(self, values: Sequence[str]) -> CommandResult:
        def action():
            self.add_table_row(values)
            return CommandResult.success("Row added successfully.")
        return self._run('add_row', action)

    def drop(self, table_name: str) -> CommandResult:
        def action():
            self.drop_table(table_name)
            return CommandResult.success(f"Table '{table_name}' dropped.")
        return self._run('drop', action)

    def show_tables(self) -> CommandResult:
        names = self.list_tables()
        if not names:
            return CommandResult.success("No tables loaded.")
        lines = ["Available tables:"] + [f"  {name}" for name in names]
        return CommandResult.success(lines[0], output="\n".join(lines[1:]))
