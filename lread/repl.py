#!/usr/bin/env python3
##
## lread - reader and printer for a tiny lisp
## Copyright (C) 2025  Mark Hays (github:minmus-9)
##
## This program is free software: you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation, either version 3 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program.  If not, see <https://www.gnu.org/licenses/>.

"repl.py - read a line, print what it reads as, repeat"

## pylint: disable=invalid-name
## XXX pylint: disable=missing-docstring

import argparse
import logging
import sys
import traceback

from .printer import stringify
from .reader import Reader
from .symbols import SymbolTable

__all__ = ("main", "repl")

LOG = logging.getLogger("lread.repl")

LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


## {{{ main repl


def repl(reader, prompt="> ", read_all=False):
    try:
        import readline as _  ## pylint: disable=import-outside-toplevel
    except ImportError:
        pass

    def feed(line):
        if read_all:
            values = list(reader.read_all(line))
        else:
            ## one expression per line; whatever follows it is dropped
            value, rest = reader.read(line)
            if rest.strip():
                LOG.debug("discarding %r", rest)
            values = [value]
        for value in values:
            print(stringify(value))

    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            break
        try:
            feed(line)
        except Exception:  ## pylint: disable=broad-except
            traceback.print_exception(*sys.exc_info())
    print()
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="lread",
        description="read s-expressions, one per line, and print them back",
    )
    parser.add_argument(
        "-p", "--prompt", default="> ", help="prompt string (default: '> ')"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help="reject input nested more than N deep",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="read_all",
        action="store_true",
        help="print every expression on a line, not just the first",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="more logging; repeat for debug output",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LEVELS[min(args.verbose, len(LEVELS) - 1)],
        format="%(name)s: %(levelname)s: %(message)s",
    )
    LOG.info("max depth %s", args.max_depth)

    reader = Reader(SymbolTable(), max_depth=args.max_depth)
    raise SystemExit(repl(reader, args.prompt, args.read_all))


## }}}

if __name__ == "__main__":
    main()


## EOF
