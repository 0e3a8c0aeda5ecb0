"""
Errors and warnings raised while laying out help text.

Scope
- FaultCode: numeric identifiers for every problem the table and layout code
  can report. Errors live in 211xx, warnings in 221xx.
- UsageException / UsageWarning: carry a message and read-only options (code,
  title, hint, and whatever row/column context the reporter attached), and
  print themselves through rich.
- trigger(): the one call site table and layout code use to report a fault.
  Exceptions are raised, warnings go through warnings.warn().

Presentation
- A header "[ prog — code | Title ]", the message, then "→ hint".
- The program name comes from __main__.__prog__, falling back to "usher".
- __main__.__styles__ overrides palette entries; __main__.__codes__ maps codes
  to custom labels.
- colorful=False drops styling, fancy=True draws the body inside a panel.

A host that prefers a friendly report over a traceback catches
UsageException and hands it to Console.print().
"""
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce


class FaultCode(IntEnum):
    """
    Stable identifiers of layout faults.

    - INVALID_LAYOUT: a row does not supply one value per column.
    - ROW_OUT_OF_RANGE, COLUMN_OUT_OF_RANGE: a cell address outside the table.
    - CRAMPED_COLUMN: a column indent leaves no room for text.
    """
    # layout errors
    INVALID_LAYOUT              = 21101
    ROW_OUT_OF_RANGE            = 21102
    COLUMN_OUT_OF_RANGE         = 21103

    # layout warnings
    CRAMPED_COLUMN              = 22101

    def normalize(self):
        """
        Label shown in fault headers: the __main__.__codes__ entry when the host
        defines one, else the number itself.
        """
        labels = getattr(__import__("__main__"), "__codes__", {})
        return str(labels.get(self, self.value))


class _Fault:
    __palette__ = {}

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = message
        self.options = MappingProxyType(options)

    def __replace__(self, *unused, **overrides):
        assert not unused, "only keyword overrides are accepted"
        return type(self)(self.message, **(dict(self.options) | overrides))

    def __rich__(self):
        main = __import__("__main__")
        options = self.options
        colorful = options.get("colorful", True)
        kind = "warning" if isinstance(self, Warning) else "error"
        styles = defaultdict(str, type(self).__palette__ | getattr(main, "__styles__", {}))

        def styled(fragment, role):
            if not fragment:
                return Text("")
            if isinstance(fragment, Text) and colorful:
                return fragment
            return Text(str(fragment), styles[role] if colorful else "")

        code = options.get("code")
        header = Text.assemble(
            "[ ",
            styled(getattr(main, "__prog__", "usher"), "prog-name"),
            " — ",
            styled(code.normalize() if isinstance(code, FaultCode) else "?", "code"),
            " | ",
            styled(options.get("title", kind).title(), f"{kind}-title"),
            " ]",
        )
        body = styled(coalesce(self.message, ""), f"{kind}-message")
        hint = Text.assemble(styled(" → ", "hint-arrow"), styled(options.get("hint", ""), "hint"))

        if options.get("fancy", False):
            return Panel(Group(body, hint), title=header, title_align="left")
        return Group(header, body, hint)


class UsageException(_Fault, Exception):
    __palette__ = {
        "prog-name": "bold #E6E6F0",
        "code": "bold #00E5FF",
        "error-title": "bold #FF4DA6",
        "error-message": "#C8C8D0",
        "hint-arrow": "#9CE19C dim",
        "hint": "italic #9CE19C",
    }

    def __trigger__(self) -> None:
        raise self from None


class InvalidLayoutError(UsageException, ValueError): ...


class UsageWarning(_Fault, ABC, UserWarning):
    # warnings use a softer variant of the error palette
    __palette__ = {
        "prog-name": "bold #E6E6F0",
        "code": "bold #FFB400",
        "warning-title": "bold #FFC2E0",
        "warning-message": "#D6D6DE",
        "hint-arrow": "#B8EFAF dim",
        "hint": "italic #B8EFAF",
    }

    def __trigger__(self) -> None:
        warnings.warn(self, stacklevel=self.options.get("stacklevel", 4))


class CrampedColumnWarning(UsageWarning): ...


def trigger(fault, /, **options):
    """
    Report a fault after merging the given options into it.

    fault must implement __replace__ and __trigger__ (any UsageException or
    UsageWarning does). Typical options are code, title and hint, plus the
    row, column or count that caused the problem.
    """
    for hook in ("__replace__", "__trigger__"):
        if not callable(getattr(fault, hook, None)):
            raise TypeError(f"trigger() cannot report {type(fault).__name__} objects")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "UsageException",
    "InvalidLayoutError",
    "UsageWarning",
    "CrampedColumnWarning",
    "trigger",
)
