"""
Value-label renderers behavioral tests.

Scope
- Validate the default renderer: "<fallback>" placeholders, explicit labels,
  separators, flags and positionals.
- Validate the minimal renderer: bare names and a space separator.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from usher import *


class TestDefaultValueLabelRenderer(TestCase):
    """Configured placeholder text."""

    def testFallbackInAngleBrackets(self):
        option = OptionDescriptor("--long", fallback="longField")
        self.assertEqual(DefaultValueLabelRenderer().render(option), "=<longField>")
        self.assertEqual(DefaultValueLabelRenderer().render_bare(option), "<longField>")

    def testExplicitLabelWithSpaceSeparator(self):
        option = OptionDescriptor("--long", label="LABEL")
        self.assertEqual(DefaultValueLabelRenderer(" ").render(option), " LABEL")

    def testCustomSeparator(self):
        option = OptionDescriptor("-c", "--count")
        self.assertEqual(DefaultValueLabelRenderer(":").render(option), ":<count>")

    def testFlagsHaveNoPlaceholder(self):
        self.assertEqual(DefaultValueLabelRenderer().render(OptionDescriptor("-v", boolean=True)), "")

    def testBooleanTakingAValueHasAPlaceholder(self):
        option = OptionDescriptor("-e", boolean=True, arity=1)
        self.assertEqual(DefaultValueLabelRenderer().render(option), "=<e>")

    def testPositionalsIgnoreTheSeparator(self):
        renderer = DefaultValueLabelRenderer(" ")
        self.assertEqual(renderer.render(ParameterDescriptor("positional")), "<positional>")
        self.assertEqual(renderer.render(ParameterDescriptor("positional", label="POSITIONAL_ARGS")), "POSITIONAL_ARGS")

    def testSeparatorValidated(self):
        with self.assertRaises(ValueError):
            DefaultValueLabelRenderer("")
        with self.assertRaises(TypeError):
            DefaultValueLabelRenderer(None)

    def testRepresentation(self):
        self.assertEqual(repr(DefaultValueLabelRenderer(" ")), "DefaultValueLabelRenderer(' ')")


class TestMinimalValueLabelRenderer(TestCase):
    """Configuration-free placeholder text."""

    def testBareFallbackName(self):
        option = OptionDescriptor("-p", fallback="proto")
        self.assertEqual(MinimalValueLabelRenderer().render(option), " proto")
        self.assertEqual(MinimalValueLabelRenderer().render_bare(option), "proto")

    def testExplicitLabelWins(self):
        self.assertEqual(MinimalValueLabelRenderer().render(OptionDescriptor("-p", label="PROTO")), " PROTO")

    def testFlagsHaveNoPlaceholder(self):
        self.assertEqual(MinimalValueLabelRenderer().render(OptionDescriptor("-v", boolean=True)), "")

    def testPositionals(self):
        self.assertEqual(MinimalValueLabelRenderer().render(ParameterDescriptor("files")), "files")


if __name__ == "__main__":
    unittest.main()
