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
lread - read a tiny lisp into tagged values and print them back

    >>> from lread import Reader, stringify
    >>> r = Reader()
    >>> value, rest = r.read("(a 'b) c")
    >>> stringify(value), rest
    ('(a (quote b))', ' c')
"""

## pylint: disable=invalid-name

from .printer import stringify
from .reader import ParseState, Reader, read
from .symbols import SymbolTable
from .values import (
    NIL,
    Closure,
    Error,
    NativeProc,
    Nil,
    Number,
    Pair,
    Symbol,
    Value,
    equal,
    iter_list,
    make_closure,
    make_error,
    make_list,
    make_native,
    make_number,
    make_pair,
    make_symbol,
    nreverse,
    safe_head,
    safe_tail,
)

__all__ = (
    "NIL",
    "Closure",
    "Error",
    "NativeProc",
    "Nil",
    "Number",
    "Pair",
    "ParseState",
    "Reader",
    "Symbol",
    "SymbolTable",
    "Value",
    "equal",
    "iter_list",
    "make_closure",
    "make_error",
    "make_list",
    "make_native",
    "make_number",
    "make_pair",
    "make_symbol",
    "nreverse",
    "read",
    "safe_head",
    "safe_tail",
    "stringify",
)

__version__ = "0.1.0"

## EOF
