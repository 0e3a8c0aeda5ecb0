r"""
Usher synopsis builders: the one-line (or wrapped) usage summary.

Forms
- custom
  • CommandConfig.custom_synopsis lines are emitted verbatim, one per line.
- abbreviated
  • "<name> [OPTIONS] <positionals>"; [OPTIONS] appears only when at least one
    option is visible.
- detailed
  • Required flag cluster ("-AVX"), optional flag cluster ("[-avx]"), one token
    per remaining option in the given order, then the positionals by index.
  • Flag letters inside a cluster are sorted by code point, never declaration order.
  • Only single-character short flags ("-v") can be clustered; other flags are
    rendered on their own.

Option tokens (ArityShape)
- FLAG          -v
- ONE           -c=<count>                 (label repeated arity.min times)
- ZERO_OR_ONE   -c[=<count>]   | -c [<count>]        (space separator)
- ZERO_OR_MANY  -c[=<count>...] | -c [<count>...]    (space separator)
- ONE_OR_MANY   -c=<count> [<count>...]
Optional options are wrapped in an outer pair of brackets.

Positional tokens
- The label repeated arity.min times, then "[label...]" for an unbounded arity
  or one "[label]" per additional bounded occurrence.

Wrapping
- Tokens are never split; a line that would exceed CommandConfig.width continues
  on the next line, indented to align under the first token. The width budget
  starts at the command name, so a heading such as "Usage: " does not count.
  Every line ends with the platform line separator.

Quick example:
    >>> synopsis(CommandConfig(), options, parameters)
    '<main class> [-v] -c=<count>\n'
"""
import os
from enum import Enum, auto

from rich.cells import cell_len

from .comparators import by_parameter_index, shortest_first
from .labels import DefaultValueLabelRenderer
from .utils import *


class ArityShape(Enum):
    """
    Synopsis notation of an option, derived from its arity.
    """
    FLAG = auto()
    ONE = auto()
    ZERO_OR_ONE = auto()
    ZERO_OR_MANY = auto()
    ONE_OR_MANY = auto()

    @classmethod
    def of(cls, option, /):
        arity = option.arity
        if option.flag or arity.max == 0:
            return cls.FLAG
        if arity.min == 0:
            return cls.ZERO_OR_ONE if arity.max == 1 else cls.ZERO_OR_MANY
        if arity.min == arity.max:
            return cls.ONE
        return cls.ONE_OR_MANY


def _labels(config, labels, /):
    return DefaultValueLabelRenderer(config.separator) if labels is Unset else labels


def _clusterable(option, /):
    name = shortest_first(option.names)[0]
    return option.flag and len(name) == 2 and name[0] == "-" and name[1] != "-"


def _option_token(option, config, labels, /):
    name = shortest_first(option.names)[0]
    label = labels.render_bare(option)
    separator = config.separator
    spaced = separator == " "
    values = " ".join([label] * option.arity.min)

    match ArityShape.of(option):
        case ArityShape.FLAG:
            token = name
        case ArityShape.ONE:
            token = name + separator + values
        case ArityShape.ZERO_OR_ONE:
            token = f"{name} [{label}]" if spaced else f"{name}[{separator}{label}]"
        case ArityShape.ZERO_OR_MANY:
            token = f"{name} [{label}...]" if spaced else f"{name}[{separator}{label}...]"
        case ArityShape.ONE_OR_MANY:
            token = f"{name}{separator}{values} [{label}...]"

    return token if option.required else f"[{token}]"


def _parameter_tokens(parameters, labels, /):
    tokens = []
    for parameter in sorted(parameters, key=by_parameter_index):
        if parameter.hidden or not parameter.synopsis:
            continue
        label = labels.render_bare(parameter)
        arity = parameter.arity
        tokens.extend([label] * arity.min)
        if arity.max is None:
            tokens.append(f"[{label}...]")
        else:
            tokens.extend([f"[{label}]"] * (arity.max - arity.min))
    return tokens


def _wrap(config, heading, tokens, /):
    """
    Internal: join tokens after the command name, wrapping at config.width.

    The width budget starts at the command name; the heading is put in front of
    the first line and continuation lines are shifted by the same amount.
    """
    indent = " " * cell_len(config.name + " ")
    lines = [config.name]
    for index, token in enumerate(tokens):
        if index and cell_len(lines[-1]) + 1 + cell_len(token) > config.width:
            lines.append(indent + token)
        else:
            lines[-1] += " " + token
    shift = " " * cell_len(heading)
    return "".join((shift if number else heading) + line + os.linesep for number, line in enumerate(lines))


def custom_synopsis(config, /, heading=""):
    """
    Emit the configured custom synopsis lines verbatim (heading on the first line).
    """
    return "".join(
        (heading if index == 0 else "") + line + os.linesep
        for index, line in enumerate(config.custom_synopsis)
    )


def abbreviated_synopsis(config, options, parameters, labels=Unset, /, *, heading=""):
    """
    Build "<name> [OPTIONS] <positionals>".
    """
    tokens = []
    if any(not option.hidden for option in options):
        tokens.append("[OPTIONS]")
    tokens.extend(_parameter_tokens(parameters, _labels(config, labels)))
    return _wrap(config, heading, tokens)


def detailed_synopsis(config, options, parameters, labels=Unset, /, *, cluster=True, heading=""):
    """
    Build the detailed synopsis for options in the order given.

    Parameters
    - config: CommandConfig (name, separator, width).
    - options/parameters: descriptor sequences; options are never re-sorted here.
    - labels: value-label renderer (default: DefaultValueLabelRenderer(config.separator)).
    - cluster: combine single-character flags into "-abc"/"[-abc]" tokens.
    - heading: text put in front of the command name (e.g., "Usage: ").
    """
    labels = _labels(config, labels)
    required, optional, tokens = [], [], []

    for option in options:
        if option.hidden:
            continue
        if cluster and _clusterable(option):
            (required if option.required else optional).append(shortest_first(option.names)[0][1])
        else:
            tokens.append(_option_token(option, config, labels))

    clusters = []
    if required:
        clusters.append("-" + "".join(sorted(required)))
    if optional:
        clusters.append("[-" + "".join(sorted(optional)) + "]")

    return _wrap(config, heading, clusters + tokens + _parameter_tokens(parameters, labels))


def synopsis(config, options, parameters, labels=Unset, /, *, cluster=True, heading=""):
    """
    Build the synopsis in the form selected by the configuration.
    """
    if config.custom_synopsis:
        return custom_synopsis(config, heading)
    if config.abbreviate_synopsis:
        return abbreviated_synopsis(config, options, parameters, labels, heading=heading)
    return detailed_synopsis(config, options, parameters, labels, cluster=cluster, heading=heading)


__all__ = (
    "ArityShape",
    "custom_synopsis",
    "abbreviated_synopsis",
    "detailed_synopsis",
    "synopsis",
)
