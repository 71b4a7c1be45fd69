"""
protochain Command-Line Interface (CLI)

Small demonstrations of the library via subcommands:
- Persistent list construction and traversal
- Zig-zag string conversion
- Copy-per-slot array filling

Usage examples:
    python -m protochain.cli print-list 3 2 1
    python -m protochain.cli zigzag --text PAYPALISHIRING --rows 3
    python -m protochain.cli fill-unique --length 3 --value '{"a": 1}' --start 1
"""

import argparse
import json
import logging
import sys

from . import config
from .datastructures import CustomArray, cons, empty_list, print_list
from .algorithms import zigzag_conversion, zigzag_rows

log = logging.getLogger(__name__)

# Exit status used when invalid input is reported
EXIT_USAGE_ERROR = 2


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_print_list(args):
    """Build a persistent list from the arguments (first one is the head) and print it."""
    lst = empty_list()
    for value in reversed(args.values):
        lst = cons(value, lst)
    print_list(lst)


def cmd_zigzag(args):
    """Print the zig-zag conversion of --text, or its rows with --show-rows."""
    if args.show_rows:
        for row in zigzag_rows(args.text, args.rows):
            print("".join(row))
    else:
        print(zigzag_conversion(args.text, args.rows))


def cmd_fill_unique(args):
    """Fill a fresh array with copies of a JSON value and print it as JSON."""
    try:
        value = json.loads(args.value)
    except json.JSONDecodeError as exc:
        raise ValueError(f"--value is not valid JSON: {exc}") from exc

    arr = CustomArray(args.length).fill_unique(value, args.start, args.end)
    print(json.dumps(arr.to_py()))


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m protochain.cli", description="protochain demos")
    p.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=config.LOG_LEVELS,
        type=str.upper,
        help="Logging level (default from PROTOCHAIN_LOG_LEVEL)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- persistent list ---
    s = sub.add_parser("print-list", help="Build a persistent list and print its values")
    s.add_argument("values", nargs="*")
    s.set_defaults(func=cmd_print_list)

    # --- zig-zag ---
    s = sub.add_parser("zigzag", help="Zig-zag convert a string")
    s.add_argument("--text", required=True)
    s.add_argument("--rows", type=int, default=config.DEFAULT_ZIGZAG_ROWS)
    s.add_argument("--show-rows", action="store_true", help="Print each row instead of the joined result")
    s.set_defaults(func=cmd_zigzag)

    # --- arrays ---
    s = sub.add_parser("fill-unique", help="Fill an array with independent copies of a JSON value")
    s.add_argument("--length", type=int, required=True)
    s.add_argument("--value", required=True, help="JSON literal, e.g. '[]' or '{\"a\": 1}'")
    s.add_argument("--start", type=int, default=None)
    s.add_argument("--end", type=int, default=None)
    s.set_defaults(func=cmd_fill_unique)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m protochain.cli`. Returns the exit code."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse does not check choices against the default, so an
    # unknown PROTOCHAIN_LOG_LEVEL has to be rejected here.
    if args.log_level not in config.LOG_LEVELS:
        parser.error(f"unknown log level {args.log_level!r} (from PROTOCHAIN_LOG_LEVEL)")

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)
    log.debug("running %s", args.cmd)

    try:
        args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
