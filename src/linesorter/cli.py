#!/usr/bin/env python3
"""
LineSorter CLI — Command line interface for sorting the lines of a file or of standard input.
Uses the same core engine as library callers.
In-place rewrites are safe: the previous version of the file is moved to system trash, never erased.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    from send2trash import send2trash
except ImportError:
    _MISSING_DEPS.append("send2trash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from linesorter import __version__
from linesorter.core.models import SortDirection, SortMode, SortParams, UnparseableLineError
from linesorter.commands import SortCommand
from linesorter.services.text_service import TextService
from linesorter.aliases import SORT_MODE_ALIASES, SORT_MODE_CHOICES, SORT_MODE_HELP_TEXT, EPILOG_TEXT

STDIN_MARKER = "-"


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="linesorter",
            description="LineSorter — Sort lines as text or as numbers",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "input",
            nargs="?",
            default=STDIN_MARKER,
            type=str,
            help="File whose lines are sorted. Default: '-' (standard input)"
        )

        # Sorting options
        parser.add_argument(
            "--mode", "-s",
            choices=SORT_MODE_CHOICES,
            default="lexicographic",
            type=str,
            metavar='MODE',
            help=SORT_MODE_HELP_TEXT
        )
        parser.add_argument(
            "--descending", "-d",
            action="store_true",
            help="Sort from the highest to the lowest value"
        )

        # Output options
        parser.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            metavar='FILE',
            help="Write the result to FILE instead of standard output"
        )
        parser.add_argument(
            "--in-place", "-i",
            action="store_true",
            dest="in_place",
            help="Rewrite the input file. The previous version is moved to trash."
        )
        parser.add_argument(
            "--no-backup",
            action="store_true",
            dest="no_backup",
            help="With --in-place: overwrite without moving the previous version to trash"
        )
        parser.add_argument(
            "--encoding",
            default="utf-8",
            type=str,
            metavar='ENCODING',
            help="Text encoding of input and output files. Default: utf-8"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show statistics and debug logging on stderr"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.in_place and args.input == STDIN_MARKER:
            self.error_exit("--in-place needs an input file, not standard input")
        if args.in_place and args.output:
            self.error_exit("--in-place cannot be combined with --output")
        if args.no_backup and not args.in_place:
            self.error_exit("--no-backup can only be used with --in-place")
        if args.quiet and args.verbose:
            self.warning("--quiet and --verbose both given, --verbose wins")

        if args.input != STDIN_MARKER:
            if not os.path.exists(args.input):
                self.error_exit(f"File not found: {args.input}")
            if not os.path.isfile(args.input):
                self.error_exit(f"Path is not a file: {args.input}")

        if args.mode not in SORT_MODE_ALIASES:
            self.error_exit(
                f"Invalid sort mode: '{args.mode}'.\n"
                f"Valid options: {', '.join(SORT_MODE_CHOICES)}"
            )

    def create_params(self, args: argparse.Namespace) -> SortParams:
        """Create SortParams from CLI arguments."""
        try:
            mode = SORT_MODE_ALIASES.get(args.mode, SortMode.LEXICOGRAPHIC)
            direction = SortDirection.from_flag(args.descending)
            return SortParams(mode=mode, direction=direction)
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def read_input(self, args: argparse.Namespace) -> str:
        if args.input == STDIN_MARKER:
            return sys.stdin.read()
        try:
            return TextService.read_text(args.input, encoding=args.encoding)
        except (FileNotFoundError, RuntimeError) as e:
            self.error_exit(str(e))

    def run_sort(self, text: str, params: SortParams) -> str:
        """Execute sorting workflow. Unparseable lines abort without touching any file."""
        command = SortCommand()
        try:
            result, stats = command.execute(text, params)
        except UnparseableLineError as e:
            self.error_exit(
                f"Line {e.line_number} cannot be read as {params.mode.display_name.lower()}: {e.line!r}"
            )

        if self.verbose:
            print(stats.print_summary(), file=sys.stderr)
        return result

    def write_output(self, result: str, args: argparse.Namespace) -> None:
        try:
            if args.in_place:
                TextService.replace_with_backup(
                    args.input, result, encoding=args.encoding, backup=not args.no_backup
                )
                self.info(f"✅ Sorted {args.input} in place")
            elif args.output:
                TextService.write_text(args.output, result, encoding=args.encoding)
                self.info(f"✅ Result written to {args.output}")
            else:
                sys.stdout.write(result)
                sys.stdout.flush()
        except (FileNotFoundError, RuntimeError) as e:
            self.error_exit(f"Failed to write result: {e}")

    def info(self, message: str) -> None:
        """Print a status message to stderr (stdout may carry the sorted text)."""
        if not self.quiet:
            print(message, file=sys.stderr)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet and not args.verbose

        if self.verbose:
            logging.getLogger("linesorter").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        text = self.read_input(args)
        result = self.run_sort(text, params)
        self.write_output(result, args)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
