r"""
Usher descriptor model: immutable snapshots of a command's help metadata.

Overview
- Range
  • Inclusive (min, max) pair used for arities and positional indices; max=None
    means unbounded. Parses "1", "0..1", "1..*", "2..", "*".

- CommandConfig
  • Command-level settings consumed by renderers and the synopsis builder:
    name, header/description/footer lines, synopsis mode, option/value
    separator, required marker, default display and the line width budget.

- OptionDescriptor
  • Named argument with one or more names (declaration order kept), arity,
    value label, description lines, default value and visibility bits.

- ParameterDescriptor
  • Positional argument with an index range, arity, value label, description
    lines and visibility bits.

Introspection & representation
- DescriptorType metaclass exposes every field listed in __introspectable__ as a
  read-only property (via mirror()) and provides stable __repr__/__rich_repr__,
  so descriptors print nicely with rich.pretty.pprint().

Validation on construction
- Text blocks (header, description, footer, descriptions) accept a string
  (one line) or an iterable of strings, and are normalized to tuples.
- Arity/index accept Range | int | str | (min, max).
- Labels must be non-empty strings when provided; a missing label falls back to
  the derived fallback name at render time.

Quick example:
    >>> from usher.descriptors import CommandConfig, OptionDescriptor, ParameterDescriptor
    >>> config = CommandConfig("cat", abbreviate_synopsis=True)
    >>> verbose = OptionDescriptor("-v", "--verbose", boolean=True, description="be chatty")
    >>> files = ParameterDescriptor("files", arity="0..*", label="FILE")

Public API
- Classes: Range, CommandConfig, OptionDescriptor, ParameterDescriptor
"""
import functools
import operator
import re
from collections import namedtuple

from .utils import *


class Range(namedtuple("Range", ("min", "max"))):
    """
    Inclusive integer range with an optionally unbounded upper end.

    Construction
    - Range(n)          → n..n
    - Range(a, b)       → a..b
    - Range(a, None)    → a..* (unbounded)

    Invariants
    - 0 <= min, and min <= max unless max is None; violations raise ValueError.
    """
    __slots__ = ()

    def __new__(cls, min=0, max=Unset):
        max = coalesce(max, min)
        if not isinstance(min, int) or isinstance(min, bool):
            raise TypeError("range 'min' must be an integer")
        if max is not None and (not isinstance(max, int) or isinstance(max, bool)):
            raise TypeError("range 'max' must be an integer or None")
        if min < 0:
            raise ValueError("range 'min' cannot be negative")
        if max is not None and max < min:
            raise ValueError("range 'max' cannot be lower than 'min'")
        return super().__new__(cls, min, max)

    @classmethod
    def parse(cls, text, /):
        """
        Parse the textual range notation.

        Accepted forms: "n", "a..b", "a..*", "a.." and "*" (same as "0..*").
        """
        if not isinstance(text, str):
            raise TypeError("range notation must be a string")
        match = re.fullmatch(r"\s*(?:(\*)|(\d+)(?:\s*\.\.\s*(\d+|\*)?)?)\s*", text)
        if not match:
            raise ValueError(f"invalid range notation {text!r}")
        star, low, high = match.groups()
        if star:
            return cls(0, None)
        if ".." not in text:
            return cls(int(low))
        return cls(int(low), None if high in (None, "*") else int(high))

    @classmethod
    def of(cls, object, /):
        """
        Coerce Range | int | str | (min, max) into a Range.
        """
        match object:
            case Range():
                return object
            case bool():
                raise TypeError("range cannot be built from a boolean")
            case int():
                return cls(object)
            case str():
                return cls.parse(object)
            case (low, high):
                return cls(low, high)
            case _:
                raise TypeError("range must be a Range, an integer, a string or a (min, max) pair")

    @property
    def variable(self):
        """True when the upper end is unbounded."""
        return self.max is None

    def __str__(self):
        if self.max == self.min:
            return str(self.min)
        return f"{self.min}..{'*' if self.max is None else self.max}"


class DescriptorType(type):
    """
    Metaclass of the descriptor snapshots.

    Each field named in __introspectable__ becomes a mirror() property over the
    matching "_field" attribute. Instances repr as "option-descriptor(names=...)",
    and __rich_repr__ yields the same pairs for rich.pretty. A class may set
    __displayable__ to show fewer fields than it exposes.

    __typename__ is the hyphenated, lower-cased class name; sanitizers use it in
    their error messages.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                field: mirror(field) for field in namespace.get("__introspectable__", ())
            },
            **options,
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for field in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield field, getattr(self, field)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_text(cls, metadata, field, /):
    """
    Internal: normalize a "line or lines" field into a tuple of strings.
    """
    try:
        metadata[field] = lines(metadata[field])
    except TypeError:
        raise TypeError(f"{cls.__typename__} {field!r} must be a string or an iterable of strings") from None


def _sanitize_label(cls, metadata, field, /):
    """
    Internal: validate an optional, non-empty label-like string (Unset → None).
    """
    if not isinstance(label := metadata[field], str | Unset):
        raise TypeError(f"{cls.__typename__} {field!r} must be a string")
    elif isinstance(label, str) and not label.strip():
        raise ValueError(f"{cls.__typename__} {field!r} cannot be empty")
    metadata[field] = coalesce(label)


def _sanitize_range(cls, metadata, field, default, /):
    """
    Internal: coerce a range-like field into a Range (Unset → default).
    """
    try:
        metadata[field] = Range.of(coalesce(metadata[field], default))
    except (TypeError, ValueError) as error:
        raise type(error)(f"{cls.__typename__} {field!r} is invalid: {error}") from None


def _sanitize_config_metadata(cls, metadata, /):
    """
    Internal: validate and normalize CommandConfig metadata in place.

    Rules
    - name: non-empty string.
    - header/description/footer/custom_synopsis: normalized to tuples of lines.
    - separator: non-empty string.
    - required_marker: exactly one character.
    - width: integer greater than zero.
    - heading: string (may be empty).
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name.strip():
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")

    for field in ("header", "description", "footer", "custom_synopsis"):
        _sanitize_text(cls, metadata, field)

    if not isinstance(separator := metadata["separator"], str):
        raise TypeError(f"{cls.__typename__} 'separator' must be a string")
    elif not separator:
        raise ValueError(f"{cls.__typename__} 'separator' cannot be empty")

    if not isinstance(marker := metadata["required_marker"], str):
        raise TypeError(f"{cls.__typename__} 'required_marker' must be a string")
    elif len(marker) != 1:
        raise ValueError(f"{cls.__typename__} 'required_marker' must be a single character")

    if not isinstance(width := metadata["width"], int) or isinstance(width, bool):
        raise TypeError(f"{cls.__typename__} 'width' must be an integer")
    elif width <= 0:
        raise ValueError(f"{cls.__typename__} 'width' must be a positive integer")

    if not isinstance(metadata["heading"], str):
        raise TypeError(f"{cls.__typename__} 'heading' must be a string")


class CommandConfig(metaclass=DescriptorType):
    """
    Command-level help settings.

    Snapshots are immutable; use replace(**changes) to derive a modified copy.

    Properties
    - name: command name shown in the synopsis ("<main class>" when unnamed).
    - header/description/footer: tuples of lines printed around the usage body.
    - abbreviate_synopsis: render "name [OPTIONS] params" instead of the detailed form.
    - custom_synopsis: literal synopsis lines overriding both generated forms.
    - separator: text between an option name and its value label ("=" by default).
    - required_marker: single character shown in front of required entries.
    - show_defaults: append a "Default: <value>" row for valued options.
    - width: line width budget for the synopsis and the default table.
    - heading: label put in front of the synopsis by the usage text.
    """

    __introspectable__ = (
        "name",
        "header",
        "description",
        "footer",
        "abbreviate_synopsis",
        "custom_synopsis",
        "separator",
        "required_marker",
        "show_defaults",
        "width",
        "heading",
    )

    def __init__(
            self,
            name="<main class>",
            *,
            header=(),
            description=(),
            footer=(),
            abbreviate_synopsis=False,
            custom_synopsis=(),
            separator="=",
            required_marker=" ",
            show_defaults=True,
            width=80,
            heading="Usage: ",
    ):
        metadata = {
            "name": name,
            "header": header,
            "description": description,
            "footer": footer,
            "abbreviate_synopsis": bool(abbreviate_synopsis),
            "custom_synopsis": custom_synopsis,
            "separator": separator,
            "required_marker": required_marker,
            "show_defaults": bool(show_defaults),
            "width": width,
            "heading": heading,
        }
        _sanitize_config_metadata(type(self), metadata)

        for field, object in metadata.items():
            setattr(self, "_" + field, object)

    def replace(self, **changes):
        """
        Return a copy of this configuration with the given fields replaced.
        """
        if unknown := changes.keys() - set(type(self).__introspectable__):
            raise TypeError(f"{type(self).__typename__} has no field(s) {', '.join(sorted(unknown))}")
        return type(self)(**{field: getattr(self, field) for field in type(self).__introspectable__} | changes)

    __replace__ = replace


def _derive_fallback(names, /):
    """
    Internal: derive a value-label fallback from the longest option name.

    Leading prefix characters ("-", "--", "/") are stripped; when nothing is
    left, the name itself is used.
    """
    longest = max(names, key=len)
    return re.sub(r"^[^\w]+", "", longest) or longest


def _sanitize_option_metadata(cls, metadata, /):
    """
    Internal: validate and normalize OptionDescriptor metadata in place.

    Rules
    - names: at least one; each a non-empty string without whitespace; no duplicates.
      Declaration order is preserved.
    - arity: defaults to 0 for boolean options, 1 otherwise.
    - label/fallback: non-empty strings when provided; fallback derives from the
      longest name otherwise.
    - description: normalized to a tuple of lines.
    """
    if not metadata["names"]:
        raise TypeError(f"{cls.__typename__} must specify at least one name")

    names = []
    for name in metadata["names"]:
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} names must be strings")
        elif not name or re.search(r"\s", name):
            raise ValueError(f"{cls.__typename__} names must be non-empty and cannot contain whitespace")
        elif name in names:
            raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
        names.append(name)
    metadata["names"] = tuple(names)

    _sanitize_range(cls, metadata, "arity", Range(0) if metadata["boolean"] else Range(1))
    _sanitize_label(cls, metadata, "label")
    _sanitize_label(cls, metadata, "fallback")
    metadata["fallback"] = coalesce(metadata["fallback"]) or _derive_fallback(metadata["names"])
    _sanitize_text(cls, metadata, "description")


class OptionDescriptor(metaclass=DescriptorType):
    """
    Named argument snapshot (e.g., -f/--file).

    Properties
    - names: tuple of names in declaration order.
    - required: the option must be given (shows the required marker).
    - arity: Range of values consumed per occurrence.
    - label: explicit value label, or None.
    - fallback: derived name used when no label is given.
    - description: tuple of description lines.
    - default: default value (None when there is none).
    - hidden: suppressed from every help output.
    - boolean: the option carries a boolean value.
    - help: usage/version help option (sorted last).
    - flag (derived): boolean option taking no value (arity.min == 0).
    """

    __introspectable__ = (
        "names",
        "required",
        "arity",
        "label",
        "fallback",
        "description",
        "default",
        "hidden",
        "boolean",
        "help",
    )

    def __init__(
            self,
            *names,
            required=False,
            arity=Unset,
            label=Unset,
            fallback=Unset,
            description=(),
            default=None,
            hidden=False,
            boolean=False,
            help=False,
    ):
        metadata = {
            "names": names,
            "required": bool(required),
            "arity": arity,
            "label": label,
            "fallback": fallback,
            "description": description,
            "default": default,
            "hidden": bool(hidden),
            "boolean": bool(boolean),
            "help": bool(help),
        }
        _sanitize_option_metadata(type(self), metadata)

        for field, object in metadata.items():
            setattr(self, "_" + field, object)

    @property
    def flag(self):
        return self.boolean and self.arity.min == 0


def _sanitize_parameter_metadata(cls, metadata, /):
    """
    Internal: validate and normalize ParameterDescriptor metadata in place.

    Rules
    - fallback: required non-empty string.
    - index: defaults to 0..* (every position).
    - arity: defaults to exactly one value.
    - label: non-empty string when provided.
    - description: normalized to a tuple of lines.
    """
    if not isinstance(fallback := metadata["fallback"], str):
        raise TypeError(f"{cls.__typename__} 'fallback' must be a string")
    elif not fallback.strip():
        raise ValueError(f"{cls.__typename__} 'fallback' cannot be empty")

    _sanitize_range(cls, metadata, "index", Range(0, None))
    _sanitize_range(cls, metadata, "arity", Range(1))
    _sanitize_label(cls, metadata, "label")
    _sanitize_text(cls, metadata, "description")


class ParameterDescriptor(metaclass=DescriptorType):
    """
    Positional argument snapshot.

    Properties
    - fallback: derived name used when no label is given (e.g., "files").
    - index: Range of command-line positions the parameter covers.
    - arity: Range of values it consumes.
    - label: explicit value label, or None.
    - description: tuple of description lines.
    - hidden: suppressed from every help output.
    - synopsis: shown in the synopsis line.
    - required (derived): at least one value is expected (arity.min > 0).
    """

    __introspectable__ = (
        "fallback",
        "index",
        "arity",
        "label",
        "description",
        "hidden",
        "synopsis",
    )

    def __init__(
            self,
            fallback,
            /,
            index=Unset,
            arity=Unset,
            label=Unset,
            description=(),
            *,
            hidden=False,
            synopsis=True,
    ):
        metadata = {
            "fallback": fallback,
            "index": index,
            "arity": arity,
            "label": label,
            "description": description,
            "hidden": bool(hidden),
            "synopsis": bool(synopsis),
        }
        _sanitize_parameter_metadata(type(self), metadata)

        for field, object in metadata.items():
            setattr(self, "_" + field, object)

    @property
    def required(self):
        return self.arity.min > 0


__all__ = (
    "Range",
    "CommandConfig",
    "OptionDescriptor",
    "ParameterDescriptor",
)
