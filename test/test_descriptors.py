"""
Descriptor model behavioral tests.

Scope
- Validate Range construction, parsing, coercion and display.
- Validate CommandConfig defaults, normalization, validation and replace().
- Validate OptionDescriptor/ParameterDescriptor defaults (arity, fallback label,
  description lines) and their derived properties (flag, required).
- Validate read-only snapshots and rich-friendly representations.

Conventions
- Test method names follow CamelCase per project convention.
"""
import io
import unittest
from unittest import TestCase

from rich.console import Console
from rich.pretty import pprint

from usher import *


class TestRange(TestCase):
    """Range value object."""

    def testSingleValueRange(self):
        self.assertEqual(Range(1), (1, 1))
        self.assertFalse(Range(1).variable)

    def testUnboundedRange(self):
        self.assertEqual(Range(0, None), (0, None))
        self.assertTrue(Range(0, None).variable)

    def testRangeRejectsInvertedBounds(self):
        with self.assertRaises(ValueError):
            Range(3, 1)
        with self.assertRaises(ValueError):
            Range(-1)

    def testRangeRejectsNonIntegers(self):
        with self.assertRaises(TypeError):
            Range("1")
        with self.assertRaises(TypeError):
            Range(True)

    def testRangeParse(self):
        self.assertEqual(Range.parse("1"), Range(1))
        self.assertEqual(Range.parse("0..1"), Range(0, 1))
        self.assertEqual(Range.parse("1..*"), Range(1, None))
        self.assertEqual(Range.parse("4.."), Range(4, None))
        self.assertEqual(Range.parse("*"), Range(0, None))
        self.assertEqual(Range.parse(" 2 .. 3 "), Range(2, 3))

    def testRangeParseRejectsGarbage(self):
        for text in ("", "a", "1..2..3", "..3", "-1"):
            with self.subTest(text=text), self.assertRaises(ValueError):
                Range.parse(text)

    def testRangeOf(self):
        self.assertEqual(Range.of(2), Range(2))
        self.assertEqual(Range.of("0..*"), Range(0, None))
        self.assertEqual(Range.of((1, 3)), Range(1, 3))
        same = Range(1, 2)
        self.assertIs(Range.of(same), same)
        with self.assertRaises(TypeError):
            Range.of(1.5)
        with self.assertRaises(TypeError):
            Range.of(False)

    def testRangeDisplay(self):
        self.assertEqual(str(Range(1)), "1")
        self.assertEqual(str(Range(0, 1)), "0..1")
        self.assertEqual(str(Range(1, None)), "1..*")


class TestCommandConfig(TestCase):
    """Command-level configuration."""

    def testDefaults(self):
        config = CommandConfig()
        self.assertEqual(config.name, "<main class>")
        self.assertEqual(config.header, ())
        self.assertEqual(config.description, ())
        self.assertEqual(config.footer, ())
        self.assertFalse(config.abbreviate_synopsis)
        self.assertEqual(config.custom_synopsis, ())
        self.assertEqual(config.separator, "=")
        self.assertEqual(config.required_marker, " ")
        self.assertTrue(config.show_defaults)
        self.assertEqual(config.width, 80)
        self.assertEqual(config.heading, "Usage: ")

    def testSingleStringBecomesOneLine(self):
        config = CommandConfig("cat", description="Concatenate FILE(s).", footer=["a", "b"])
        self.assertEqual(config.description, ("Concatenate FILE(s).",))
        self.assertEqual(config.footer, ("a", "b"))

    def testTextLinesMustBeStrings(self):
        with self.assertRaises(TypeError):
            CommandConfig(header=[1, 2])
        with self.assertRaises(TypeError):
            CommandConfig(footer=42)

    def testMarkerMustBeOneCharacter(self):
        with self.assertRaises(ValueError):
            CommandConfig(required_marker="**")
        with self.assertRaises(ValueError):
            CommandConfig(required_marker="")

    def testSeparatorCannotBeEmpty(self):
        with self.assertRaises(ValueError):
            CommandConfig(separator="")

    def testWidthMustBePositive(self):
        with self.assertRaises(ValueError):
            CommandConfig(width=0)
        with self.assertRaises(TypeError):
            CommandConfig(width="80")

    def testNameCannotBeBlank(self):
        with self.assertRaises(ValueError):
            CommandConfig("  ")

    def testReplaceReturnsModifiedCopy(self):
        config = CommandConfig("tool", separator=":")
        other = config.replace(separator=" ", width=100)
        self.assertEqual(other.name, "tool")
        self.assertEqual(other.separator, " ")
        self.assertEqual(other.width, 100)
        self.assertEqual(config.separator, ":")

    def testCopyReplaceProtocol(self):
        config = CommandConfig("tool")
        self.assertEqual(config.__replace__(name="other").name, "other")

    def testReplaceRejectsUnknownFields(self):
        with self.assertRaises(TypeError):
            CommandConfig().replace(colour=True)

    def testFieldsAreReadOnly(self):
        config = CommandConfig()
        with self.assertRaises(AttributeError):
            config.name = "other"


class TestOptionDescriptor(TestCase):
    """Option snapshots."""

    def testNamesKeepDeclarationOrder(self):
        option = OptionDescriptor("--file", "-f")
        self.assertEqual(option.names, ("--file", "-f"))

    def testAtLeastOneName(self):
        with self.assertRaises(TypeError):
            OptionDescriptor()

    def testNamesValidated(self):
        with self.assertRaises(TypeError):
            OptionDescriptor("-a", 1)
        with self.assertRaises(ValueError):
            OptionDescriptor("-a", "-a")
        with self.assertRaises(ValueError):
            OptionDescriptor("--bad name")

    def testArityDefaultsToOneForValuedOptions(self):
        self.assertEqual(OptionDescriptor("-c").arity, Range(1))

    def testArityDefaultsToZeroForBooleans(self):
        option = OptionDescriptor("-v", boolean=True)
        self.assertEqual(option.arity, Range(0))
        self.assertTrue(option.flag)

    def testBooleanWithArityIsNotAFlag(self):
        option = OptionDescriptor("-v", boolean=True, arity=1)
        self.assertFalse(option.flag)

    def testArityAcceptsNotation(self):
        self.assertEqual(OptionDescriptor("-c", arity="1..*").arity, Range(1, None))

    def testInvalidArityRejected(self):
        with self.assertRaises(ValueError):
            OptionDescriptor("-c", arity="2..1")

    def testFallbackDerivesFromLongestName(self):
        self.assertEqual(OptionDescriptor("-f", "--file").fallback, "file")
        self.assertEqual(OptionDescriptor("---long", "-L").fallback, "long")
        self.assertEqual(OptionDescriptor("/x").fallback, "x")

    def testExplicitFallbackWins(self):
        self.assertEqual(OptionDescriptor("-f", fallback="path").fallback, "path")

    def testLabelMustNotBeEmpty(self):
        with self.assertRaises(ValueError):
            OptionDescriptor("-f", label=" ")
        with self.assertRaises(TypeError):
            OptionDescriptor("-f", label=3)

    def testDescriptionLines(self):
        self.assertEqual(OptionDescriptor("-f", description="one").description, ("one",))
        self.assertEqual(OptionDescriptor("-f", description=["one", "two"]).description, ("one", "two"))
        self.assertEqual(OptionDescriptor("-f").description, ())

    def testDefaultsAndFlags(self):
        option = OptionDescriptor("-f")
        self.assertFalse(option.required)
        self.assertFalse(option.hidden)
        self.assertFalse(option.help)
        self.assertIsNone(option.label)
        self.assertIsNone(option.default)

    def testRepresentation(self):
        option = OptionDescriptor("-v", "--verbose", boolean=True)
        self.assertTrue(repr(option).startswith("option-descriptor(names=('-v', '--verbose')"))
        self.assertIn(("arity", Range(0)), list(option.__rich_repr__()))

    def testPrettyPrinting(self):
        console = Console(file=io.StringIO(), width=120, color_system=None)
        pprint(OptionDescriptor("-v", boolean=True), console=console)
        output = console.file.getvalue()
        self.assertIn("OptionDescriptor(", output)
        self.assertIn("names=", output)

    def testDescriptionIsReadOnly(self):
        option = OptionDescriptor("-v", description=["a"])
        with self.assertRaises(AttributeError):
            option.description = ("b",)


class TestParameterDescriptor(TestCase):
    """Positional parameter snapshots."""

    def testDefaults(self):
        parameter = ParameterDescriptor("files")
        self.assertEqual(parameter.index, Range(0, None))
        self.assertEqual(parameter.arity, Range(1))
        self.assertTrue(parameter.required)
        self.assertTrue(parameter.synopsis)
        self.assertFalse(parameter.hidden)
        self.assertIsNone(parameter.label)

    def testOptionalParameter(self):
        self.assertFalse(ParameterDescriptor("interval", arity="0..1").required)

    def testIndexNotation(self):
        self.assertEqual(ParameterDescriptor("files", index="4..*").index, Range(4, None))
        self.assertEqual(ParameterDescriptor("host", index=0).index, Range(0))

    def testFallbackIsRequired(self):
        with self.assertRaises(ValueError):
            ParameterDescriptor("")
        with self.assertRaises(TypeError):
            ParameterDescriptor(None)


if __name__ == "__main__":
    unittest.main()
