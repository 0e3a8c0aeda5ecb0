"""
Usher value-label renderers: placeholder text for an expected value.

Contract
- render(descriptor) -> str
  • Inline form used right after an option name (or alone for positionals).
- render_bare(descriptor) -> str
  • The label itself, without separator, used for positional display and for
    repeated occurrences in the synopsis.

Rules
- Label text is the descriptor's explicit label when present.
- Flags (boolean options taking no value) never show a placeholder: render() -> "".
- Options render separator + label; with a single-space separator that gives
  "-c <count>" rather than "-c= <count>".
- Positionals render the label alone, whatever the separator.

Variants
- DefaultValueLabelRenderer(separator="="): falls back to "<fallback>".
- MinimalValueLabelRenderer(): stateless; falls back to the bare fallback name
  and always separates options from their label with a space.
"""
from .descriptors import OptionDescriptor
from .utils import *


class DefaultValueLabelRenderer:
    """
    Value-label renderer honouring the command's option/value separator.
    """
    separator = mirror("separator")

    def __init__(self, separator="=", /):
        if not isinstance(separator, str):
            raise TypeError("value-label renderer 'separator' must be a string")
        elif not separator:
            raise ValueError("value-label renderer 'separator' cannot be empty")
        self._separator = separator

    def render_bare(self, descriptor, /):
        return descriptor.label or f"<{descriptor.fallback}>"

    def render(self, descriptor, /):
        if not isinstance(descriptor, OptionDescriptor):
            return self.render_bare(descriptor)
        if descriptor.flag:
            return ""
        return self.separator + self.render_bare(descriptor)

    def __repr__(self):
        return f"{type(self).__name__}({self.separator!r})"


class MinimalValueLabelRenderer:
    """
    Configuration-free value-label renderer: bare names, space-separated.
    """

    def render_bare(self, descriptor, /):
        return descriptor.label or descriptor.fallback

    def render(self, descriptor, /):
        if not isinstance(descriptor, OptionDescriptor):
            return self.render_bare(descriptor)
        if descriptor.flag:
            return ""
        return " " + self.render_bare(descriptor)

    def __repr__(self):
        return f"{type(self).__name__}()"


__all__ = (
    "DefaultValueLabelRenderer",
    "MinimalValueLabelRenderer",
)
