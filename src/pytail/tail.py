"""
tail.py: Display the last part of files.

Mimics Unix 'tail' command:
  tail <file>...          - Show last 10 lines of each file
  tail -n 20 <file>       - Show last 20 lines
  tail -n +20 <file>      - Show everything from line 20 on
  tail -q <file> <file>   - Never print '==> file <==' headers
  cmd | tail              - Read standard input when no file (or '-') is given
"""

import argparse
import sys

from .common import setup_logging, print_error
from .config import DEFAULT_LINES, Direction, parse_line_count, resolve_config
from .dispatcher import TailDispatcher
from .sources import Sink
from .version import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tail",
        description="Print the last 10 lines of each FILE to standard output. "
                    "With more than one FILE, precede each with a header giving the file name. "
                    "With no FILE, or when FILE is -, read standard input.",
        usage="tail [OPTION]... [FILE]...",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to display.")
    parser.add_argument("-n", "--lines", type=parse_line_count, metavar="[+]NUM",
                        default=(DEFAULT_LINES, Direction.FROM_BOTTOM),
                        help="Output the last NUM lines (default: 10); "
                             "use +NUM to output starting with line NUM.")
    parser.add_argument("-q", "--quiet", "--silent", dest="headers", action="store_const", const=False,
                        help="Never output headers giving file names.")
    parser.add_argument("-v", "--verbose", dest="headers", action="store_const", const=True,
                        help="Always output headers giving file names.")
    parser.add_argument("-V", "--version", action="version", version=f"pytail {__version__}")
    parser.add_argument("--log-level", default="WARNING",
                        help="Diagnostic log level written to stderr (default: WARNING).")
    parser.add_argument("-O", "--outfile", help="Also write diagnostic logs to this file.")
    return parser


def main(args_list=None):
    if args_list is None:
        args_list = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(args_list)

    try:
        setup_logging({'LOG_LEVEL': args.log_level, 'OUTFILE': args.outfile})
    except ValueError as e:
        parser.error(str(e))

    config = resolve_config(args)
    dispatcher = TailDispatcher(config, Sink())
    for result in dispatcher.run():
        if not result.ok:
            print_error(str(result.error))

    return 1 if dispatcher.failed else 0


if __name__ == "__main__":
    sys.exit(main())
