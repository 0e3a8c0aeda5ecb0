"""
Usher help facade: assemble the complete usage text of one command.

Overview
- Help(config, options, parameters)
  • Holds one CommandConfig plus the option/parameter descriptors of a command.
  • Sections: header(), synopsis(), description(), parameter_list(),
    option_list(), footer(); usage() concatenates them, skipping empty ones.
  • Factories (create_*) expose the default and minimal strategies so callers
    can mix their own layout, sort order or renderers with the defaults.

Defaults
- Options are listed and summarized sorted by shortest name (help options last).
- Positional parameters are listed by index with bare value labels.
- The option table uses the five-column layout sized to CommandConfig.width.

Rich integration
- Help objects render through rich (console.print(help)) as plain text.

Quick example:
    >>> from usher import CommandConfig, OptionDescriptor, Help
    >>> config = CommandConfig(show_defaults=True)
    >>> file = OptionDescriptor("-f", "--file", required=True, description="the file to use", default="theDefault.txt")
    >>> print(Help(config, [file]).usage(), end="")
    Usage: <main class> -f=<file>
      -f, --file=<file>           the file to use
                                  Default: theDefault.txt
"""
import os

from rich.text import Text

from .comparators import by_option_arity_and_name, by_parameter_index, by_shortest_option_name
from .descriptors import CommandConfig, OptionDescriptor, ParameterDescriptor
from .labels import DefaultValueLabelRenderer, MinimalValueLabelRenderer
from .layout import Layout
from .renderers import *
from .synopses import abbreviated_synopsis as _abbreviated_synopsis
from .synopses import detailed_synopsis as _detailed_synopsis
from .synopses import synopsis as _synopsis
from .table import TextTable, default_columns
from .utils import *


def _text(block, /):
    return "".join(line + os.linesep for line in block)


class Help:
    config = mirror("config")
    options = mirror("options")
    parameters = mirror("parameters")

    def __init__(self, config=Unset, options=(), parameters=()):
        if not isinstance(config, CommandConfig | Unset):
            raise TypeError("help 'config' must be a command-config")
        options, parameters = tuple(options), tuple(parameters)
        if not all(isinstance(option, OptionDescriptor) for option in options):
            raise TypeError("help 'options' must be option-descriptors")
        if not all(isinstance(parameter, ParameterDescriptor) for parameter in parameters):
            raise TypeError("help 'parameters' must be parameter-descriptors")

        self._config = CommandConfig() if config is Unset else config
        self._options = options
        self._parameters = parameters

    # --- sections ---

    def header(self):
        return _text(self.config.header)

    def description(self):
        return _text(self.config.description)

    def footer(self):
        return _text(self.config.footer)

    def synopsis(self, heading=""):
        """
        Synopsis in the configured form: custom, abbreviated or detailed
        (options sorted by shortest name, flags clustered).
        """
        return _synopsis(
            self.config,
            sorted(self._options, key=by_shortest_option_name),
            self._parameters,
            self.create_default_value_label_renderer(),
            heading=heading,
        )

    def abbreviated_synopsis(self, heading=""):
        return _abbreviated_synopsis(
            self.config,
            self._options,
            self._parameters,
            self.create_default_value_label_renderer(),
            heading=heading,
        )

    def detailed_synopsis(self, sort=None, cluster=True, heading=""):
        """
        Detailed synopsis with an explicit option order.

        Parameters
        - sort: key function for the options, or None for declaration order.
        - cluster: combine single-character flags into "-abc" tokens.
        - heading: text put in front of the command name.
        """
        options = self._options if sort is None else sorted(self._options, key=sort)
        return _detailed_synopsis(
            self.config,
            options,
            self._parameters,
            self.create_default_value_label_renderer(),
            cluster=cluster,
            heading=heading,
        )

    def option_list(self, layout=Unset, sort=Unset, labels=Unset):
        """
        Render the options table.

        Parameters
        - layout: Layout to fill (default: create_default_layout()).
        - sort: key function, None for declaration order (default: by shortest name).
        - labels: value-label renderer (default: create_default_value_label_renderer()).
        """
        sort = coalesce(sort, by_shortest_option_name)
        layout = self.create_default_layout() if layout is Unset else layout
        labels = self.create_default_value_label_renderer() if labels is Unset else labels
        layout.add_options(self._options if sort is None else sorted(self._options, key=sort), labels)
        return str(layout)

    def parameter_list(self, layout=Unset, labels=Unset):
        """
        Render the positional parameters table (by index, bare labels by default).
        """
        layout = self.create_default_layout() if layout is Unset else layout
        labels = self.create_minimal_value_label_renderer() if labels is Unset else labels
        layout.add_positional_parameters(sorted(self._parameters, key=by_parameter_index), labels)
        return str(layout)

    def usage(self):
        """
        Complete usage text: header, heading + synopsis, description, parameters,
        options and footer. Empty sections produce no output.
        """
        return "".join((
            self.header(),
            self.synopsis(heading=self.config.heading),
            self.description(),
            self.parameter_list(),
            self.option_list(),
            self.footer(),
        ))

    # --- factories ---

    def create_text_table(self):
        width, options_width = self.config.width, 29
        # narrow budgets split the line evenly between names and descriptions
        if width <= options_width:
            options_width = max(width // 2, 6)
            width = max(width, options_width + 1)
        return TextTable(*default_columns(width, options_width))

    def create_default_layout(self):
        return Layout(
            self.create_text_table(),
            self.create_default_option_renderer(),
            self.create_default_parameter_renderer(),
        )

    def create_default_option_renderer(self):
        return DefaultOptionRenderer(self.config)

    def create_default_parameter_renderer(self):
        return DefaultParameterRenderer(self.config)

    def create_default_value_label_renderer(self):
        return DefaultValueLabelRenderer(self.config.separator)

    @staticmethod
    def create_minimal_option_renderer():
        return MinimalOptionRenderer()

    @staticmethod
    def create_minimal_parameter_renderer():
        return MinimalParameterRenderer()

    @staticmethod
    def create_minimal_value_label_renderer():
        return MinimalValueLabelRenderer()

    @staticmethod
    def create_short_option_name_comparator():
        return by_shortest_option_name

    @staticmethod
    def create_option_arity_and_name_comparator():
        return by_option_arity_and_name

    # --- representation ---

    def __str__(self):
        return self.usage()

    def __rich__(self):
        return Text(self.usage().removesuffix(os.linesep))

    def __repr__(self):
        return f"{type(self).__name__}({self.config!r}, options={len(self._options)}, parameters={len(self._parameters)})"


def usage(config=Unset, options=(), parameters=()):
    """
    Shortcut for Help(config, options, parameters).usage().
    """
    return Help(config, options, parameters).usage()


__all__ = (
    "Help",
    "usage",
)
