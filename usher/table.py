r"""
Usher text table: a fixed set of columns with per-column overflow policies.

Overview
- Overflow
  • TRUNCATE: text wider than the column is cut silently.
  • SPAN: text wider than the column continues in the following columns of the
    same row; whatever is left after the last column moves to a new row,
    starting again at the original column with the wrapped-lines indent.
  • WRAP: text is word-wrapped; every continuation line goes to the same column
    of the next row, indented by the column indent plus the wrapped-lines indent.

- Column(width, indent=0, overflow=Overflow.TRUNCATE)
  • Immutable column definition; width > 0, indent >= 0.

- Cell(column, row)
  • Address of the last cell a put_value() call wrote to.

- TextTable(*columns, indent_wrapped_lines=2)
  • Mutable grid of rows (one string per column) built during a single
    rendering pass; without explicit columns the default five-column option
    layout is used (see default_columns()).

Row emission
- add_row_values(*values) appends one logical row. When a value spans or wraps
  and more values follow, a fresh row is appended first so later values land
  below the expansion; one logical row may thus produce several physical rows.
- A value count that differs from the column count raises InvalidLayoutError
  before anything is written (no partial rows).

Measurement
- Widths are terminal cells measured with rich.cells, so double-width (CJK)
  characters count as two.

Rendering
- to_text() pads every cell to its column width, strips trailing blanks from each
  physical row and terminates every row with the platform line separator.

Quick example:
    >>> table = TextTable(Column(15, 2, Overflow.TRUNCATE), Column(20, 1, Overflow.WRAP))
    >>> table.add_row_values("-v", "print more details while running")
    >>> print(table, end="")
      -v            print more details
                      while running
"""
import os
import re
from collections import namedtuple
from enum import Enum

from rich.cells import cell_len, get_character_cell_size
from rich.text import Text

from .faults import *
from .utils import *


class Overflow(Enum):
    """
    Overflow policy of a column.
    """
    TRUNCATE = "truncate"
    WRAP = "wrap"
    SPAN = "span"


class Column(namedtuple("Column", ("width", "indent", "overflow"))):
    """
    Immutable column definition.

    Parameters
    - width: int > 0, in terminal cells.
    - indent: int >= 0, blank cells written before the first line of a value.
    - overflow: Overflow member, or its name/value as a string ("wrap", "SPAN").

    Warnings
    - CrampedColumnWarning when the indent leaves no room for text; values are
      still written (one character per line at the last cell).
    """
    __slots__ = ()

    def __new__(cls, width, indent=0, overflow=Overflow.TRUNCATE):
        if not isinstance(width, int) or isinstance(width, bool):
            raise TypeError("column 'width' must be an integer")
        elif width <= 0:
            raise ValueError("column 'width' must be a positive integer")
        if not isinstance(indent, int) or isinstance(indent, bool):
            raise TypeError("column 'indent' must be an integer")
        elif indent < 0:
            raise ValueError("column 'indent' cannot be negative")
        if isinstance(overflow, str):
            try:
                overflow = Overflow(overflow.lower())
            except ValueError:
                raise ValueError(f"column 'overflow' must be one of {', '.join(map(repr, Overflow._value2member_map_))}") from None
        elif not isinstance(overflow, Overflow):
            raise TypeError("column 'overflow' must be an overflow policy")

        if indent >= width:
            trigger(
                CrampedColumnWarning(f"column indent {indent} leaves no room in a column of width {width}"),
                code=FaultCode.CRAMPED_COLUMN,
                title="cramped column",
                hint="widen the column or reduce its indent",
            )
        return super().__new__(cls, width, indent, overflow)


Cell = namedtuple("Cell", ("column", "row"))


def default_columns(width=80, options_width=29, /):
    """
    Build the default five-column option layout.

    Columns
    - required marker      (2, 0, TRUNCATE)
    - short option name    (2, 0, TRUNCATE)
    - comma                (1, 0, TRUNCATE)
    - long names + label   (options_width - 5, 1, SPAN)
    - description          (width - options_width, 1, WRAP)

    With the defaults (80, 29) descriptions start at column 30.
    """
    if not isinstance(width, int) or not isinstance(options_width, int):
        raise TypeError("default_columns() arguments must be integers")
    if options_width <= 5:
        raise ValueError("default_columns() 'options_width' must be greater than 5")
    if width <= options_width:
        raise ValueError("default_columns() 'width' must be greater than 'options_width'")
    return (
        Column(2, 0, Overflow.TRUNCATE),
        Column(2, 0, Overflow.TRUNCATE),
        Column(1, 0, Overflow.TRUNCATE),
        Column(options_width - 5, 1, Overflow.SPAN),
        Column(width - options_width, 1, Overflow.WRAP),
    )


def _prefix(text, room, /):
    """
    Internal: longest prefix of text that fits in `room` terminal cells.
    """
    used = 0
    for index, character in enumerate(text):
        used += get_character_cell_size(character)
        if used > room:
            return text[:index]
    return text


def _words(text, room, /):
    """
    Internal: longest run of whole words (with their trailing blanks) that fits
    in `room` cells. A first word wider than the room is cut to fit.
    """
    used = end = 0
    for match in re.finditer(r"\s*\S+\s*", text):
        width = cell_len(match.group())
        if used + width > room:
            break
        used += width
        end = match.end()
    return text[:end] if end else _prefix(text, room)


class TextTable:
    """
    Fixed-column text grid with Truncate/Wrap/Span overflow handling.

    Properties
    - columns: tuple of Column (fixed once constructed).
    - indent_wrapped_lines: extra indent for continuation lines of SPAN/WRAP values.
    - row_count: number of physical rows emitted so far.

    Notes
    - put_value() replaces the content of the cells it writes to.
    - A table belongs to a single rendering pass; build a new one per command.
    """
    columns = mirror("columns")
    indent_wrapped_lines = mirror("indent_wrapped_lines")

    def __init__(self, *columns, indent_wrapped_lines=2):
        if not columns:
            columns = default_columns()
        for column in columns:
            if not isinstance(column, Column):
                raise TypeError("text-table columns must be Column instances")
        if not isinstance(indent_wrapped_lines, int) or isinstance(indent_wrapped_lines, bool):
            raise TypeError("text-table 'indent_wrapped_lines' must be an integer")
        elif indent_wrapped_lines < 0:
            raise ValueError("text-table 'indent_wrapped_lines' cannot be negative")

        self._columns = tuple(columns)
        self._indent_wrapped_lines = indent_wrapped_lines
        self._rows = []

    @property
    def row_count(self):
        return len(self._rows)

    def add_empty_row(self):
        """
        Append a row of empty cells and return its index.
        """
        self._rows.append([""] * len(self._columns))
        return len(self._rows) - 1

    def add_row_values(self, *values):
        """
        Append one logical row, one value per column (None or "" for blank cells).

        Raises
        - InvalidLayoutError: the number of values differs from the column count.
        """
        if len(values) != len(self._columns):
            trigger(
                InvalidLayoutError(f"expected {len(self._columns)} values but received {len(values)}"),
                code=FaultCode.INVALID_LAYOUT,
                title="invalid layout",
                hint="pair the renderer with a table that has one column per rendered cell",
                count=len(values),
            )

        self.add_empty_row()
        for column, value in enumerate(values):
            row = self.row_count - 1
            cell = self.put_value(row, column, value)
            if (cell.row != row or cell.column != column) and column != len(values) - 1:
                self.add_empty_row()

    def put_value(self, row, column, value, /):
        """
        Write value into the cell at (row, column) following the column overflow.

        Returns
        - Cell(column, row) of the last cell written; the given address when
          value is None or empty.

        Raises
        - InvalidLayoutError: row or column outside the table.
        """
        if not 0 <= row < self.row_count:
            trigger(
                InvalidLayoutError(f"row {row} is outside a table of {self.row_count} row(s)"),
                code=FaultCode.ROW_OUT_OF_RANGE,
                title="row out of range",
                hint="call add_empty_row() before writing into a new row",
                row=row,
            )
        if not 0 <= column < len(self._columns):
            trigger(
                InvalidLayoutError(f"column {column} is outside a table of {len(self._columns)} column(s)"),
                code=FaultCode.COLUMN_OUT_OF_RANGE,
                title="column out of range",
                hint="use a column index lower than the number of columns",
                column=column,
            )
        if not value:
            return Cell(column, row)

        value = str(value)
        definition = self._columns[column]
        indent = definition.indent

        match definition.overflow:
            case Overflow.TRUNCATE:
                self._copy(row, column, indent, value, _prefix)
                return Cell(column, row)

            case Overflow.SPAN:
                start = column
                while True:
                    last = column == len(self._columns) - 1
                    value = self._copy(row, column, indent, value, _words if last else _prefix)
                    indent = 0
                    if not value.strip():
                        return Cell(column, row)
                    column += 1
                    if column == len(self._columns):
                        row = self._next_row(row)
                        column = start
                        indent = definition.indent + self._indent_wrapped_lines

            case Overflow.WRAP:
                while True:
                    value = self._copy(row, column, indent, value, _words)
                    if not value.strip():
                        return Cell(column, row)
                    indent = definition.indent + self._indent_wrapped_lines
                    row = self._next_row(row)

    def _next_row(self, row, /):
        """
        Internal: index of the row below `row`, appending it when needed.
        """
        if row + 1 == self.row_count:
            self.add_empty_row()
        return row + 1

    def _copy(self, row, column, indent, value, fit, /):
        """
        Internal: write the part of value that fits after `indent` blank cells
        and return the remainder. At least one character is always written.
        """
        width = self._columns[column].width
        indent = min(indent, width - 1)
        chunk = fit(value, width - indent) or value[:1]
        self._rows[row][column] = " " * indent + chunk
        return value[len(chunk):]

    def text_at(self, row, column, /):
        """
        Return the raw content of a cell (indent included, no padding).
        """
        return self._rows[row][column]

    def to_text(self):
        result = []
        for row in self._rows:
            line = "".join(
                cell + " " * max(definition.width - cell_len(cell), 0)
                for cell, definition in zip(row, self._columns)
            )
            result.append(line.rstrip(" ") + os.linesep)
        return "".join(result)

    def __str__(self):
        return self.to_text()

    def __rich__(self):
        return Text(self.to_text().removesuffix(os.linesep))

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(map(repr, self._columns))}, indent_wrapped_lines={self._indent_wrapped_lines})"


__all__ = (
    "Overflow",
    "Column",
    "Cell",
    "default_columns",
    "TextTable",
)
