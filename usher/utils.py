"""
Small helpers used across usher.

Overview
- Unset / UnsetType
  • Marker for "the caller passed nothing here". Descriptors accept None as a
    real default value, so None cannot play that role.
  • Falsy, prints as "Unset", has a single instance and cannot be subclassed.
  • Usable in isinstance unions: isinstance(label, str | Unset).

- coalesce(value, default=None)
  • Swap Unset for a default. Any other value, falsy or not, passes through.

- rename(function, name) / @rename("name")
  • Give generated methods and properties a readable __name__ and __qualname__,
    so reprs and tracebacks point at "names" rather than "<lambda>".

- mirror("names")
  • Property reading self._names and handing back a frozen view, so option
    names, descriptions and other snapshot fields stay read-only.

- lines(value)
  • Accept a description given as one string or as several and return a tuple
    holding one entry per physical line.

Example
    >>> class Snapshot:
    ...     def __init__(self):
    ...         self._names = ["-v", "--verbose"]
    ...     names = mirror("names")
    >>> Snapshot().names
    ('-v', '--verbose')
    >>> lines("Show help.")
    ('Show help.',)
"""
from collections.abc import Iterable, Mapping, Sequence, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Type of the Unset marker.

    Calling UnsetType() again returns the existing instance.
    """
    __slots__ = ()
    __instance = None

    def __new__(cls):
        if cls.__instance is None:
            cls.__instance = super().__new__(cls)
        return cls.__instance

    def __init_subclass__(cls, **options):
        raise TypeError("UnsetType cannot be subclassed")

    def __or__(self, other, /):
        return type(self) | other

    def __ror__(self, other, /):
        return other | type(self)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"


Unset = UnsetType()


def coalesce(value, default=None, /):
    """
    coalesce(Unset, "x") -> "x"; coalesce(None, "x") -> None.
    """
    return default if value is Unset else value


def rename(target, name=Unset, /):
    """
    Rename a function in place, or build a decorator that will.

    - rename(function, "name") sets __name__ and __qualname__ and returns function.
    - rename("name") returns a decorator doing the same to whatever it wraps.

    Built-ins refuse attribute updates and raise TypeError, as do
    non-callable targets and non-string names.
    """
    if name is Unset:
        if not isinstance(target, str):
            raise TypeError(f"rename() expected a name, got {type(target).__name__}")
        return lambda function: rename(function, target)
    if not callable(target):
        raise TypeError(f"rename() cannot rename {type(target).__name__} objects")
    if not isinstance(name, str):
        raise TypeError(f"rename() expected a name, got {type(name).__name__}")
    try:
        target.__name__ = target.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError(f"rename() cannot rename {target!r}") from None
    return target


def _freeze(value):
    # tuples (named ones included), strings and frozensets are already frozen
    match value:
        case tuple() | str() | frozenset():
            return value
        case Sequence():
            return tuple(value)
        case Mapping():
            return MappingProxyType(value)
        case Set():
            return frozenset(value)
    return value


def mirror(name, /):
    """
    Read-only property exposing self._<name> as a frozen view.

    Lists come back as tuples, sets as frozensets and dicts as mapping proxies.
    """
    if not isinstance(name, str):
        raise TypeError(f"mirror() expected a field name, got {type(name).__name__}")
    field = "_" + name
    return property(rename(lambda self: _freeze(getattr(self, field)), name))


def lines(value, /):
    """
    Turn a description into a tuple of lines.

    None and Unset mean no lines. A string is split on its line breaks, and so
    is every string of an iterable; an empty string stays one blank line.
    """
    if value is None or value is Unset:
        return ()
    if isinstance(value, str):
        return tuple(value.splitlines() or [value])
    if not isinstance(value, Iterable):
        raise TypeError(f"expected text or lines of text, got {type(value).__name__}")
    result = tuple(value)
    for line in result:
        if not isinstance(line, str):
            raise TypeError(f"lines of text must be strings, got {type(line).__name__}")
    return tuple(part for line in result for part in (line.splitlines() or [line]))


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "rename",
    "mirror",
    "lines",
)
