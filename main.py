from rich.console import Console
from rich.pretty import pprint

from usher import *

config = CommandConfig(
    "cat",
    abbreviate_synopsis=True,
    description="Concatenate FILE(s), or standard input, to standard output.",
    footer="Copyright(c) 2017",
)

options = [
    OptionDescriptor("-A", "--show-all", boolean=True, description="equivalent to -vET"),
    OptionDescriptor("-b", "--number-nonblank", boolean=True, description="number nonempty output lines, overrides -n"),
    OptionDescriptor("-n", "--number", boolean=True, description="number all output lines"),
    OptionDescriptor("-w", "--width", label="COLUMNS", description="wrap lines at COLUMNS", default=80),
    OptionDescriptor("--help", boolean=True, help=True, description="display this help and exit"),
]

parameters = [
    ParameterDescriptor("files", arity="0..*", label="FILE", description="Files whose contents to display"),
]


if __name__ == '__main__':
    help = Help(config, options, parameters)
    pprint(help.options[3])
    Console().print(help)
