"""
Usher cell renderers: turn one descriptor into a small grid of table cells.

Contract
- render(descriptor, labels) -> list[list[str]]
  • One inner list per physical row; every row carries one string per column of
    the table the renderer is paired with (two for minimal, five for default).
  • labels is a value-label renderer (see usher.labels).

Variants
- MinimalOptionRenderer / MinimalParameterRenderer
  • One row, two cells: primary name + inline label, first description line.
- DefaultOptionRenderer(config)
  • Five cells: marker, short name, comma, remaining names + inline label,
    first description line. Extra description lines and the "Default: x" line
    become rows of their own, blank except for the last cell.
- DefaultParameterRenderer(config)
  • Five cells: marker (only when a value is required), two blanks, label,
    first description line; same extra-line expansion.

Notes
- The marker cell is "" for anything optional, whatever the configured marker.
- Missing descriptions render as "".
"""
from .comparators import shortest_first
from .descriptors import CommandConfig
from .utils import *


def _description_rows(description, width, /):
    """
    Internal: one blank-padded row per description line after the first.
    """
    return [[""] * (width - 1) + [line] for line in description[1:]]


def _first_line(description, /):
    return description[0] if description else ""


class MinimalOptionRenderer:
    def render(self, option, labels, /):
        return [[option.names[0] + labels.render(option), _first_line(option.description)]]


class MinimalParameterRenderer:
    def render(self, parameter, labels, /):
        return [[labels.render(parameter), _first_line(parameter.description)]]


class _ConfiguredRenderer:
    """
    Internal base for renderers that read the command configuration.
    """
    config = mirror("config")

    def __init__(self, config=Unset, /):
        if not isinstance(config, CommandConfig | Unset):
            raise TypeError(f"{type(self).__name__} 'config' must be a command-config")
        self._config = CommandConfig() if config is Unset else config

    def __repr__(self):
        return f"{type(self).__name__}({self.config!r})"


class DefaultOptionRenderer(_ConfiguredRenderer):
    """
    Five-column option renderer.

    Layout of the first row
    - marker: the configured required marker for required options, "" otherwise.
    - short: the shortest name when it is a two-character option ("-x"), else "".
    - comma: "," when there is a short name and at least one more name.
    - long: the remaining names joined with ", ", followed by the inline label.
    - description: the first description line.
    """

    def render(self, option, labels, /):
        names = shortest_first(option.names)
        short = names[0] if len(names[0]) == 2 else ""
        others = names[1:] if short else names

        rows = [[
            self.config.required_marker if option.required else "",
            short,
            "," if short and others else "",
            ", ".join(others) + labels.render(option),
            _first_line(option.description),
        ]]
        rows.extend(_description_rows(option.description, 5))

        if self.config.show_defaults and not option.flag and option.default is not None:
            rows.append(["", "", "", "", f"Default: {option.default}"])
        return rows


class DefaultParameterRenderer(_ConfiguredRenderer):
    """
    Five-column positional parameter renderer (marker only for required ones).
    """

    def render(self, parameter, labels, /):
        rows = [[
            self.config.required_marker if parameter.required else "",
            "",
            "",
            labels.render(parameter),
            _first_line(parameter.description),
        ]]
        rows.extend(_description_rows(parameter.description, 5))
        return rows


__all__ = (
    "MinimalOptionRenderer",
    "MinimalParameterRenderer",
    "DefaultOptionRenderer",
    "DefaultParameterRenderer",
)
