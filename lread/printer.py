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

"""
printer.py - values to text

improper lists print as (a b . c). the reader does not accept that
notation back; "." is just another symbol to it.
"""

## pylint: disable=invalid-name
## XXX pylint: disable=missing-docstring

from .values import (
    NIL,
    Closure,
    Error,
    NativeProc,
    Number,
    Pair,
    Symbol,
)

__all__ = ("stringify",)


def stringify_atom(x):
    ## pylint: disable=too-many-return-statements
    if x is NIL:
        return "nil"
    if isinstance(x, Number):
        return str(x.value)
    if isinstance(x, Symbol):
        return x.name
    if isinstance(x, Error):
        return "<error: " + x.message + ">"
    if isinstance(x, NativeProc):
        return "<subr>"
    if isinstance(x, Closure):
        return "<expr>"
    raise TypeError(f"cannot stringify {x!r}")


def stringify(x):
    parts = []
    tails = []  ## rest of each list we are in the middle of
    while True:
        if isinstance(x, Pair):
            parts.append("(")
            tails.append(x.tail)
            x = x.head
            continue
        parts.append(stringify_atom(x))
        ## x is done; find the next thing to print
        while tails:
            rest = tails.pop()
            if isinstance(rest, Pair):
                parts.append(" ")
                tails.append(rest.tail)
                x = rest.head
                break
            if rest is not NIL:
                parts.append(" . ")
                parts.append(stringify_atom(rest))
            parts.append(")")
        else:
            return "".join(parts)


## EOF
