"""
prettycli — print JSON data as aligned tables and key/value trees
"""

import argparse
import sys

from prettycli import config
from prettycli.args import getopt, getswitchopt
from prettycli.commands import cmd_dict, cmd_table
from prettycli.exceptions import CliError

HELP_TEXT = """\
Usage: prettycli <command> [args...]

Global flags:
  --quiet, -q             Suppress warnings
  --verbose, -v           Log render details to stderr
  --version               Show version number

Commands:
  table [FILE]            - Print a JSON array of objects as a table
                            (FILE defaults to stdin; "-" also reads stdin)
    -c, --columns <a,b>     Column order (default: first-seen order)
    -w, --max-col-width <n> Wrap cells wider than n columns (default: 80)
                            (--max-col-width=<n> also accepted)
  dict [FILE]             - Print a JSON object as an indented key tree
    --prefix <text>         Indent unit per nesting level (default: two spaces)
    --sep <text>            Key/value delimiter (default: " -> ")
    --name <text>           Print a "dict <name>" title line first
  version                 - Show version number
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so flags work after the subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (quiet, verbose, remaining_argv). Handles --version directly.
    """
    remaining = list(argv)
    if getopt(remaining, ["--version"], takes_value=False):
        print(f"prettycli {config.VERSION}")
        sys.exit(0)
    quiet = getswitchopt(remaining, ["--quiet", "-q"]).value
    verbose = getswitchopt(remaining, ["--verbose", "-v"]).value
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _positive_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a positive integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return parsed


def build_parser():
    parser = _SubcommandParser(
        prog="prettycli",
        description="Print JSON data as aligned tables and key/value trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- table ---
    p = sub.add_parser("table")
    p.add_argument("file", nargs="?")
    p.add_argument("--columns", "-c")  # comma-separated: name,age
    p.add_argument("--max-col-width", "-w", type=_positive_int, dest="max_col_width")
    p.set_defaults(func=cmd_table)

    # --- dict ---
    p = sub.add_parser("dict")
    p.add_argument("file", nargs="?")
    p.add_argument("--prefix")
    p.add_argument("--sep")
    p.add_argument("--name")
    p.set_defaults(func=cmd_dict)

    # --- version (bare word) ---
    sub.add_parser("version").set_defaults(func=None)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    try:
        # Extract global flags from anywhere in argv
        quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"prettycli {config.VERSION}")
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler:
            handler(ns)
        else:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")

    except CliError as e:
        print(str(e), file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
