"""
Usher layouts: drive cell renderers into a text table.

Overview
- Layout(table, options, parameters, *, config)
  • Pairs a TextTable with an option renderer and a parameter renderer.
  • add_option(s)/add_positional_parameter(s) skip hidden descriptors, render the
    rest and hand each cell grid to layout().
  • layout(descriptor, values) is the extension point; by default every row of
    the grid becomes one logical table row (add_row_values).

- SideBySideLayout
  • Places consecutive single-row grids next to each other on one physical row
    when the table has enough columns left, and opens a new row otherwise.
    When the previous value already spilled into a fresh row (span/wrap), that
    row is reused instead of adding a second one.

Quick example:
    >>> layout = Layout()
    >>> layout.add_options(options, DefaultValueLabelRenderer())
    >>> print(layout, end="")
"""
from .descriptors import CommandConfig
from .renderers import DefaultOptionRenderer, DefaultParameterRenderer
from .table import TextTable
from .utils import *


class Layout:
    table = mirror("table")
    option_renderer = mirror("option_renderer")
    parameter_renderer = mirror("parameter_renderer")

    def __init__(self, table=Unset, options=Unset, parameters=Unset, /, *, config=Unset):
        """
        Build a layout.

        Parameters
        - table: TextTable to fill (default: a new five-column table).
        - options: option cell renderer (default: DefaultOptionRenderer(config)).
        - parameters: parameter cell renderer (default: DefaultParameterRenderer(config)).
        - config: CommandConfig used by the default renderers.
        """
        if not isinstance(table, TextTable | Unset):
            raise TypeError("layout 'table' must be a text-table")
        config = CommandConfig() if config is Unset else config

        self._table = TextTable() if table is Unset else table
        self._option_renderer = DefaultOptionRenderer(config) if options is Unset else options
        self._parameter_renderer = DefaultParameterRenderer(config) if parameters is Unset else parameters

    def layout(self, descriptor, values, /):
        """
        Copy a rendered cell grid into the table, one logical row per grid row.
        """
        for row in values:
            self._table.add_row_values(*row)

    def add_options(self, options, labels, /):
        for option in options:
            self.add_option(option, labels)

    def add_option(self, option, labels, /):
        if option.hidden:
            return
        self.layout(option, self._option_renderer.render(option, labels))

    def add_positional_parameters(self, parameters, labels, /):
        for parameter in parameters:
            self.add_positional_parameter(parameter, labels)

    def add_positional_parameter(self, parameter, labels, /):
        if parameter.hidden:
            return
        self.layout(parameter, self._parameter_renderer.render(parameter, labels))

    def __str__(self):
        return str(self._table)

    def __rich__(self):
        return self._table.__rich__()


class SideBySideLayout(Layout):
    """
    Layout that packs single-row cell grids side by side.

    Each grid is written at the column following the last cell written; when it
    would not fit before the end of the row, writing restarts at column 0 of a
    new row.
    """

    def __init__(self, table=Unset, options=Unset, parameters=Unset, /, *, config=Unset):
        super().__init__(table, options, parameters, config=config)
        self._previous = None

    def layout(self, descriptor, values, /):
        table = self._table
        for row in values:
            column = 0 if self._previous is None else self._previous.column + 1
            if self._previous is None or column + len(row) > len(table.columns):
                if self._previous is None or table.row_count == self._previous.row + 1:
                    table.add_empty_row()
                column = 0
            for index, value in enumerate(row):
                self._previous = table.put_value(table.row_count - 1, column + index, value)


__all__ = (
    "Layout",
    "SideBySideLayout",
)
