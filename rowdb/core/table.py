"""
Table Module - Cells, columns and tables, plus the .odt text format

A Table is a named set of Columns sharing one row count. Every value is
plain text; there are no column types.

File format (one table per file):

    TABLE:<name>
    COLUMNS:<col1>,<col2>,...
    ROWS:<count>
    DATA:
    <v1>,<v2>,...

Fields are split on commas and trimmed. Embedded commas cannot be
represented; a value containing one will not load back correctly.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from .errors import FormatError, RowShapeError, ShapeMismatchError, UnknownColumnError
from ..storage.engine import read_text, write_text


TABLE_PREFIX = "TABLE:"
COLUMNS_PREFIX = "COLUMNS:"
ROWS_PREFIX = "ROWS:"
DATA_MARKER = "DATA:"
DELIMITER = ","


@dataclass
class Cell:
    """A single text value"""
    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass
class Column:
    """
    A named, ordered sequence of cells.

    Reads past the end return an empty cell without growing the column;
    writes past the end extend it with empty cells first.
    """
    name: str
    cells: List[Cell] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    def size(self) -> int:
        """Number of stored cells"""
        return len(self.cells)

    def get(self, index: int) -> Cell:
        """Cell at index, or a detached empty cell when out of bounds"""
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return Cell()

    def get_mutable(self, index: int) -> Cell:
        """Stored cell at index, extending the column as needed"""
        if index >= len(self.cells):
            self.cells.extend(Cell() for _ in range(index + 1 - len(self.cells)))
        return self.cells[index]

    def append(self, value: str) -> None:
        self.cells.append(Cell(value))

    def insert_at(self, index: int, value: str) -> None:
        """Overwrite the cell at index (not a shifting insert)"""
        self.get_mutable(index).value = value

    def remove_at(self, index: int) -> None:
        if 0 <= index < len(self.cells):
            del self.cells[index]

    def values(self) -> List[str]:
        return [cell.value for cell in self.cells]


class Table:
    """
    A named collection of columns with a declared column order.

    The row count is kept as an explicit counter rather than derived from
    any one column, since single columns may lag behind (a column added
    after rows exist starts empty) or be grown by set_cell.
    """

    def __init__(self, name: str, columns: Optional[Sequence[str]] = None):
        self.name = name
        self._order: List[str] = []
        self._columns: Dict[str, Column] = {}
        self._row_count = 0

        for col_name in columns or []:
            self.add_column(col_name)

    def __repr__(self) -> str:
        return f"Table({self.name!r}, columns={self._order!r}, rows={self._row_count})"

    # -- columns ---------------------------------------------------------

    def add_column(self, name: str) -> None:
        """Add an empty column; adding an existing name does nothing"""
        if name in self._columns:
            return
        self._columns[name] = Column(name)
        self._order.append(name)

    def remove_column(self, name: str) -> None:
        if name not in self._columns:
            return
        del self._columns[name]
        self._order.remove(name)
        if not self._order:
            self._row_count = 0

    def has_column(self, name: str) -> bool:
        return name in self._columns

    def column_names(self) -> List[str]:
        return list(self._order)

    def get_column(self, name: str) -> Optional[Column]:
        return self._columns.get(name)

    # -- rows and cells --------------------------------------------------

    def row_count(self) -> int:
        if not self._columns:
            return 0
        return self._row_count

    def get_cell(self, col_name: str, row: int) -> Cell:
        column = self._columns.get(col_name)
        if column is None:
            return Cell()
        return column.get(row)

    def set_cell(self, col_name: str, row: int, value: str) -> None:
        column = self._columns.get(col_name)
        if column is None:
            raise UnknownColumnError(f"Column not found: {col_name}")
        column.get_mutable(row).value = value
        if row >= self._row_count:
            self._row_count = row + 1

    def add_row(self, values: Sequence[str]) -> None:
        """Append one row; values must match the declared columns one to one"""
        if len(values) != len(self._order):
            raise ShapeMismatchError(
                f"Number of values doesn't match number of columns "
                f"(expected {len(self._order)}, got {len(values)})"
            )

        row = self._row_count
        for col_name, value in zip(self._order, values):
            self._columns[col_name].insert_at(row, value)
        self._row_count = row + 1

    def rows(self) -> Iterator[List[str]]:
        """Yield each row as a list of values in column order"""
        for row in range(self.row_count()):
            yield [self.get_cell(col_name, row).value for col_name in self._order]

    # -- serialization ---------------------------------------------------

    def dumps(self) -> str:
        """Serialize to the .odt text format"""
        lines = [
            f"{TABLE_PREFIX}{self.name}",
            f"{COLUMNS_PREFIX}{DELIMITER.join(self._order)}",
            f"{ROWS_PREFIX}{self.row_count()}",
            DATA_MARKER,
        ]
        for values in self.rows():
            lines.append(DELIMITER.join(values))
        return "\n".join(lines) + "\n"

    @classmethod
    def loads(cls, text: str) -> 'Table':
        """Parse the .odt text format"""
        lines = text.splitlines()

        def line_at(index: int) -> str:
            return lines[index] if index < len(lines) else ""

        data_start = 4

        name = _strip_prefix(line_at(0), TABLE_PREFIX, "TABLE")
        columns_str = _strip_prefix(line_at(1), COLUMNS_PREFIX, "COLUMNS")
        rows_str = _strip_prefix(line_at(2), ROWS_PREFIX, "ROWS").strip()

        if not rows_str.isdecimal():
            raise FormatError(f"Invalid file format: bad row count '{rows_str}'")
        row_count = int(rows_str)

        col_names = _split_fields(columns_str) if columns_str.strip() else []
        table = cls(name, col_names)

        # Line 3 is the DATA: marker, taken as-is
        for row in range(row_count):
            if data_start + row >= len(lines):
                if not col_names:
                    break
                raise RowShapeError(row)
            line = lines[data_start + row]
            if not col_names and not line.strip():
                continue
            values = _split_fields(line)
            if len(values) != len(col_names):
                raise RowShapeError(row)
            for col_name, value in zip(col_names, values):
                table.set_cell(col_name, row, value)

        return table

    def save_to_file(self, path: str) -> None:
        write_text(path, self.dumps())

    @classmethod
    def load_from_file(cls, path: str) -> 'Table':
        return cls.loads(read_text(path))

    # -- display ---------------------------------------------------------

    def render(self) -> str:
        """Render as a bordered ASCII grid with a leading row-number column"""
        if not self._columns:
            return "Table is empty."

        row_count = self.row_count()
        widths = [len(col_name) for col_name in self._order]
        for values in self.rows():
            for idx, value in enumerate(values):
                widths[idx] = max(widths[idx], len(value))

        num_width = max(len(str(row_count)), len("#"))
        border = "+" + "-" * (num_width + 2) + "+" + "".join("-" * (w + 2) + "+" for w in widths)

        def render_line(label: str, values: Sequence[str]) -> str:
            cells = "".join(f" {value.ljust(width)} |" for value, width in zip(values, widths))
            return f"| {label.ljust(num_width)} |{cells}"

        out = [border, render_line("#", self._order), border]
        for idx, values in enumerate(self.rows()):
            out.append(render_line(str(idx + 1), values))
        out.append(border)
        return "\n".join(out)


def _strip_prefix(line: str, prefix: str, header: str) -> str:
    if not line.startswith(prefix):
        raise FormatError(f"Invalid file format: missing {header} header")
    return line[len(prefix):]


def _split_fields(text: str) -> List[str]:
    return [part.strip() for part in text.split(DELIMITER)]
