"""
betwixt Command-Line Interface.

Runs the marker operations on text given with --text or read from stdin.

Usage:
    betwixt between "{" "}" --text "a {b} c"
    betwixt between "{" "}" --mark "payload:" --trim < input.txt
    betwixt find-all "{" "}" --include-markers --json
    betwixt remove-between "{" "}" " " "\\t"
    betwixt replace '"' --which first-and-last
    betwixt replace-word island village
    betwixt remove cats dogs
    betwixt split " " --exclude "{" "}" --remove-empty
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from betwixt import __version__
from betwixt.core.extraction import (
    find_all_between,
    take_between,
    take_between_after_mark,
    take_between_multiple,
)
from betwixt.core.mutation import (
    OccurrenceSelector,
    ReplacementSpec,
    apply_replacement,
    multiple_remove,
    remove_between,
    replace_word,
)
from betwixt.core.splitter import SplitOptions, split
from betwixt.utils.errors import BetwixtError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stderr.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


SELECTORS = {
    "first": OccurrenceSelector.FIRST,
    "last": OccurrenceSelector.LAST,
    "first-and-last": OccurrenceSelector.FIRST_AND_LAST,
    "all": OccurrenceSelector.ALL,
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="betwixt",
        description="betwixt - marker-based text extraction, removal, replacement and splitting",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-t",
        "--text",
        default=None,
        help="Input text (default: read from stdin)",
    )
    common.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Between command
    between_parser = subparsers.add_parser(
        "between",
        aliases=["b"],
        parents=[common],
        help="Print the text between two markers",
    )
    between_parser.add_argument("open", help="Opening marker")
    between_parser.add_argument("close", help="Closing marker")
    between_parser.add_argument(
        "--mark",
        default=None,
        help="Only look after the first occurrence of this anchor",
    )
    between_parser.add_argument(
        "--multiple",
        action="store_true",
        help="Keep extracting after each closing marker",
    )
    between_parser.add_argument(
        "--trim",
        action="store_true",
        help="Strip surrounding whitespace from the result",
    )

    # Find-all command
    find_parser = subparsers.add_parser(
        "find-all",
        aliases=["f"],
        parents=[common],
        help="Print the content of every marker pair",
    )
    find_parser.add_argument("open", help="Opening marker")
    find_parser.add_argument("close", help="Closing marker")
    find_parser.add_argument(
        "--include-markers",
        action="store_true",
        help="Keep the markers around each result",
    )

    # Remove-between command
    remove_between_parser = subparsers.add_parser(
        "remove-between",
        parents=[common],
        help="Remove patterns inside the first marker-delimited zone",
    )
    remove_between_parser.add_argument("open", help="Opening marker")
    remove_between_parser.add_argument("close", help="Closing marker")
    remove_between_parser.add_argument("patterns", nargs="+", help="Patterns to remove")

    # Replace command
    replace_parser = subparsers.add_parser(
        "replace",
        parents=[common],
        help="Replace the first, last, first and last, or all occurrences",
    )
    replace_parser.add_argument("occurrence", help="Text to replace")
    replace_parser.add_argument("replacement", nargs="?", default="", help="Replacement text")
    replace_parser.add_argument(
        "--which",
        choices=list(SELECTORS),
        default="first",
        help="Occurrences to replace (default: first)",
    )

    # Replace-word command
    word_parser = subparsers.add_parser(
        "replace-word",
        parents=[common],
        help="Replace a whole word",
    )
    word_parser.add_argument("previous", help="Word to replace")
    word_parser.add_argument("new", help="Replacement word")

    # Remove command
    remove_parser = subparsers.add_parser(
        "remove",
        parents=[common],
        help="Remove every occurrence of each pattern, in order",
    )
    remove_parser.add_argument("patterns", nargs="+", help="Patterns to remove")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        aliases=["s"],
        parents=[common],
        help="Split on separators, keeping exclusion zones whole",
    )
    split_parser.add_argument("separators", nargs="+", help="Separators")
    split_parser.add_argument(
        "-x",
        "--exclude",
        nargs=2,
        action="append",
        default=[],
        metavar=("OPEN", "CLOSE"),
        help="Marker pair delimiting a zone that must not be split (repeatable)",
    )
    split_parser.add_argument(
        "--trim",
        action="store_true",
        help="Strip whitespace around each segment",
    )
    split_parser.add_argument(
        "--remove-empty",
        action="store_true",
        help="Drop empty segments",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _read_text(args: argparse.Namespace) -> str:
    """Return the --text argument, or stdin without its final newline."""
    if args.text is not None:
        return args.text
    return sys.stdin.read().removesuffix("\n")


def _emit(result: str | list[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, ensure_ascii=False))
    elif isinstance(result, list):
        for item in result:
            print(item)
    else:
        print(result)


def cmd_between(args: argparse.Namespace) -> str | list[str]:
    """Handle the between command."""
    text = _read_text(args)
    if args.multiple:
        return take_between_multiple(text, args.open, args.close, args.trim)
    if args.mark is not None:
        return take_between_after_mark(text, args.mark, args.open, args.close, args.trim)
    return take_between(text, args.open, args.close, args.trim)


def cmd_find_all(args: argparse.Namespace) -> list[str]:
    """Handle the find-all command."""
    return find_all_between(_read_text(args), args.open, args.close, args.include_markers)


def cmd_remove_between(args: argparse.Namespace) -> str:
    """Handle the remove-between command."""
    return remove_between(_read_text(args), args.patterns, args.open, args.close)


def cmd_replace(args: argparse.Namespace) -> str:
    """Handle the replace command."""
    spec = ReplacementSpec(SELECTORS[args.which], args.replacement)
    return apply_replacement(_read_text(args), args.occurrence, spec)


def cmd_replace_word(args: argparse.Namespace) -> str:
    """Handle the replace-word command."""
    return replace_word(_read_text(args), args.previous, args.new)


def cmd_remove(args: argparse.Namespace) -> str:
    """Handle the remove command."""
    return multiple_remove(_read_text(args), args.patterns)


def cmd_split(args: argparse.Namespace) -> list[str]:
    """Handle the split command."""
    options = SplitOptions(remove_empty=args.remove_empty, trim=args.trim)
    pairs = [tuple(pair) for pair in args.exclude]
    return split(_read_text(args), args.separators, pairs, options)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    command_handlers = {
        "between": cmd_between,
        "b": cmd_between,
        "find-all": cmd_find_all,
        "f": cmd_find_all,
        "remove-between": cmd_remove_between,
        "replace": cmd_replace,
        "replace-word": cmd_replace_word,
        "remove": cmd_remove,
        "split": cmd_split,
        "s": cmd_split,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        result = handler(args)
    except BetwixtError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    logger.debug("%s produced %s", args.command, type(result).__name__)
    _emit(result, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
