"""
Layouts behavioral tests.

Scope
- Validate that the default layout forwards every rendered row to the table.
- Validate hidden descriptors are skipped.
- Validate the side-by-side layout packing two options per physical row, and
  falling back to a row of its own when a value spans the remaining columns.

Conventions
- Test method names follow CamelCase per project convention.
- Expected texts are built line by line and joined with os.linesep.
"""
import io
import os
import unittest
from unittest import TestCase

from rich.console import Console

from usher import *


def text(*lines):
    return "".join(line + os.linesep for line in lines)


class RecordingTable(TextTable):
    def __init__(self, *columns, **options):
        super().__init__(*columns, **options)
        self.received = []

    def add_row_values(self, *values):
        self.received.append(values)
        super().add_row_values(*values)


class TestLayout(TestCase):
    """Default layout."""

    def testAddsEachRowToTheTable(self):
        table = RecordingTable(*(Column(5) for _ in range(4)))
        values = [["a", "b", "c", "d"], ["1", "2", "3", "4"]]
        Layout(table).layout(None, values)
        self.assertEqual(table.received, [("a", "b", "c", "d"), ("1", "2", "3", "4")])
        self.assertEqual(table.row_count, 2)

    def testHiddenDescriptorsAreSkipped(self):
        layout = Layout()
        layout.add_options([
            OptionDescriptor("-v", boolean=True, description="verbose"),
            OptionDescriptor("-h", boolean=True, hidden=True, description="help"),
        ], DefaultValueLabelRenderer())
        layout.add_positional_parameters([
            ParameterDescriptor("secret", hidden=True),
        ], MinimalValueLabelRenderer())
        self.assertEqual(layout.table.row_count, 1)
        self.assertEqual(str(layout), text("  -v" + " " * 26 + "verbose"))

    def testDefaultRenderersFollowTheConfig(self):
        layout = Layout(config=CommandConfig(required_marker="*"))
        layout.add_option(OptionDescriptor("-f", required=True, description="file"), DefaultValueLabelRenderer())
        self.assertEqual(str(layout), text("* -f  =<f>" + " " * 20 + "file"))

    def testTableValidated(self):
        with self.assertRaises(TypeError):
            Layout("table")

    def testMismatchedRendererIsRejected(self):
        layout = Layout(TextTable(Column(10), Column(10)))
        with self.assertRaises(InvalidLayoutError):
            layout.add_option(OptionDescriptor("-v", boolean=True), DefaultValueLabelRenderer())

    def testRichRenderingEndsWithASingleNewline(self):
        layout = Layout()
        layout.add_option(OptionDescriptor("-v", boolean=True, description="verbose"), DefaultValueLabelRenderer())
        console = Console(file=io.StringIO(), width=80, color_system=None)
        console.print(layout)
        self.assertEqual(console.file.getvalue(), "  -v" + " " * 26 + "verbose\n")


class TestSideBySideLayout(TestCase):
    """Two options per row."""

    def testZipUsage(self):
        description = [
            "Copyright (c) 1990-2008 Info-ZIP - Type 'zip \"-L\"' for software license.",
            "Zip 3.0 (July 5th 2008). Command:",
            "zip [-options] [-b path] [-t mmddyyyy] [-n suffixes] [zipfile list] [-xi list]",
            "  The default action is to add or replace zipfile entries from list, which",
            "  can include the special name - to compress standard input.",
            "  If zipfile and list are omitted, zip compresses stdin to stdout.",
        ]
        options = [OptionDescriptor(name, boolean=True, description=line) for name, line in (
            ("-f", "freshen: only changed files"),
            ("-u", "update: only changed or new files"),
            ("-d", "delete entries in zipfile"),
            ("-m", "move into zipfile (delete OS files)"),
            ("-r", "recurse into directories"),
            ("-j", "junk (don't record) directory names"),
            ("-0", "store only"),
            ("-l", "convert LF to CR LF (-ll CR LF to LF)"),
            ("-1", "compress faster"),
            ("-9", "compress better"),
            ("-q", "quiet operation"),
            ("-v", "verbose operation/print version info"),
            ("-c", "add one-line comments"),
            ("-z", "add zipfile comment"),
            ("-@", "read names from stdin"),
            ("-o", "make zipfile as old as latest entry"),
            ("-x", "exclude the following names"),
            ("-i", "include only the following names"),
            ("-F", "fix zipfile (-FF try harder)"),
            ("-D", "do not add directory entries"),
            ("-A", "adjust self-extracting exe"),
            ("-J", "junk zipfile prefix (unzipsfx)"),
            ("-T", "test zipfile integrity"),
            ("-X", "eXclude eXtra file attributes"),
            ("-y", "store symbolic links as the link instead of the referenced file"),
            ("-e", "encrypt"),
            ("-n", "don't compress these suffixes"),
            ("-h2", "show more help"),
        )]
        help = Help(CommandConfig(description=description), options)

        table = TextTable(
            Column(5, 2, Overflow.TRUNCATE),
            Column(30, 2, Overflow.SPAN),
            Column(4, 1, Overflow.TRUNCATE),
            Column(39, 2, Overflow.WRAP),
        )
        layout = SideBySideLayout(table, MinimalOptionRenderer(), MinimalParameterRenderer())
        layout.add_options(help.options, help.create_default_value_label_renderer())

        self.assertEqual(help.description() + str(layout), text(
            "Copyright (c) 1990-2008 Info-ZIP - Type 'zip \"-L\"' for software license.",
            "Zip 3.0 (July 5th 2008). Command:",
            "zip [-options] [-b path] [-t mmddyyyy] [-n suffixes] [zipfile list] [-xi list]",
            "  The default action is to add or replace zipfile entries from list, which",
            "  can include the special name - to compress standard input.",
            "  If zipfile and list are omitted, zip compresses stdin to stdout.",
            "  -f   freshen: only changed files  -u   update: only changed or new files",
            "  -d   delete entries in zipfile    -m   move into zipfile (delete OS files)",
            "  -r   recurse into directories     -j   junk (don't record) directory names",
            "  -0   store only                   -l   convert LF to CR LF (-ll CR LF to LF)",
            "  -1   compress faster              -9   compress better",
            "  -q   quiet operation              -v   verbose operation/print version info",
            "  -c   add one-line comments        -z   add zipfile comment",
            "  -@   read names from stdin        -o   make zipfile as old as latest entry",
            "  -x   exclude the following names  -i   include only the following names",
            "  -F   fix zipfile (-FF try harder) -D   do not add directory entries",
            "  -A   adjust self-extracting exe   -J   junk zipfile prefix (unzipsfx)",
            "  -T   test zipfile integrity       -X   eXclude eXtra file attributes",
            "  -y   store symbolic links as the link instead of the referenced file",
            "  -e   encrypt                      -n   don't compress these suffixes",
            "  -h2  show more help",
        ))

    def testSingleOptionPerRowWhenColumnsRunOut(self):
        table = TextTable(Column(4, 0), Column(10, 0))
        layout = SideBySideLayout(table, MinimalOptionRenderer(), MinimalParameterRenderer())
        layout.add_options([
            OptionDescriptor("-a", boolean=True, description="alpha"),
            OptionDescriptor("-b", boolean=True, description="beta"),
        ], DefaultValueLabelRenderer())
        self.assertEqual(str(layout), text("-a  alpha", "-b  beta"))


if __name__ == "__main__":
    unittest.main()
