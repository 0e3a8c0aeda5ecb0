"""
Usher comparators: display orderings for names and descriptors.

Every ordering is expressed as a key function for sorted()/list.sort(). Python
sorts are stable, so declaration order is the last tie-breaker everywhere.

Orderings
- shortest_first(names)
  • Names by length ascending; equal lengths keep declaration order (not lexical).
- by_shortest_option_name(option)
  • Help options last; then the option's shortest name compared case-insensitively,
    with lower case ahead of upper case when the letters are the same ("-e" < "-E").
- by_option_arity_and_name(option)
  • arity.max ascending (unbounded last), arity.min ascending, then
    by_shortest_option_name. Flags come before single-value options, which come
    before multi-value options.
- by_parameter_index(parameter)
  • Positionals by the first index they cover.

Quick example:
    >>> sorted(options, key=by_shortest_option_name)
"""
import math


def shortest_first(names, /):
    """
    Return the given names sorted by length (stable, shortest first).
    """
    return sorted(names, key=len)


def by_shortest_option_name(option, /):
    shortest = shortest_first(option.names)[0]
    return option.help, shortest.upper(), shortest.swapcase()


def by_option_arity_and_name(option, /):
    arity = option.arity
    return (math.inf if arity.max is None else arity.max, arity.min) + by_shortest_option_name(option)


def by_parameter_index(parameter, /):
    return parameter.index.min


__all__ = (
    "shortest_first",
    "by_shortest_option_name",
    "by_option_arity_and_name",
    "by_parameter_index",
)
