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
reader.py - text to values

the reader never raises on bad syntax. it hands back an Error value with
an empty remainder instead, and nothing after the error is looked at.

nesting is kept on an explicit stack of frames rather than on the python
stack, so "((((((...))))))" a million deep is fine.
"""

## pylint: disable=invalid-name
## XXX pylint: disable=missing-docstring

import collections
import logging
import re

from .symbols import SymbolTable
from .values import (
    INT_MAX,
    INT_MIN,
    NIL,
    Error,
    make_error,
    make_number,
    make_pair,
    make_symbol,
    nreverse,
)

__all__ = ("ParseState", "Reader", "read")

LOG = logging.getLogger("lread.reader")


## {{{ lexical stuff

SPACE = " \t\r\n"
LPAR = "("
RPAR = ")"
TICK = "'"
DELIMITERS = SPACE + LPAR + RPAR + TICK

## [0-9] rather than \d: only ascii digits make a number
NUMBER = re.compile(r"[+-]?[0-9]+\Z")

E_EMPTY = "empty input"
E_SYNTAX = "invalid syntax: "
E_UNFINISHED = "unfinished parenthesis"
E_DEPTH = "nesting too deep"


def skip_spaces(text, pos):
    n = len(text)
    while pos < n and text[pos] in SPACE:
        pos += 1
    return pos


def make_num_or_sym(token, symbols):
    ## bad or too-big numbers quietly turn into symbols
    if NUMBER.match(token):
        n = int(token)
        if INT_MIN <= n <= INT_MAX:
            return make_number(n)
    return make_symbol(token, symbols)


## }}}
## {{{ reader


ParseState = collections.namedtuple("ParseState", "value rest")


class Frame:
    ## pylint: disable=too-few-public-methods

    __slots__ = ("kind", "acc")

    def __init__(self, kind):
        self.kind = kind
        self.acc = NIL  ## list elements, newest first


class Reader:
    F_LIST = "list"
    F_QUOTE = "quote"

    def __init__(self, symbols=None, max_depth=None):
        self.symbols = SymbolTable() if symbols is None else symbols
        self.max_depth = max_depth

    def error(self, message):
        ## pylint: disable=no-self-use
        LOG.debug("syntax error: %s", message)
        return ParseState(make_error(message), "")

    def read(self, text):
        """
        read one expression from the start of text and return
        ParseState(value, rest-of-text)
        """
        ## pylint: disable=too-many-branches
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        stack, pos, n = [], 0, len(text)
        while True:
            pos = skip_spaces(text, pos)
            value = None
            if stack and stack[-1].kind is self.F_LIST:
                if pos == n:
                    return self.error(E_UNFINISHED)
                if text[pos] == RPAR:
                    frame = stack.pop()
                    ## frame.acc is ours alone, so reverse it in place
                    value, frame.acc = nreverse(frame.acc), NIL
                    pos += 1
            if value is None:
                ## an expression has to start here
                if pos == n:
                    return self.error(E_EMPTY)
                ch = text[pos]
                if ch == RPAR:
                    return self.error(E_SYNTAX + text[pos:])
                if ch in (LPAR, TICK):
                    if self.max_depth is not None and len(stack) >= self.max_depth:
                        return self.error(E_DEPTH)
                    stack.append(Frame(self.F_LIST if ch == LPAR else self.F_QUOTE))
                    pos += 1
                    continue
                value, pos = self.read_atom(text, pos)
            ## deliver value to the innermost waiting frame
            while stack and stack[-1].kind is self.F_QUOTE:
                stack.pop()
                value = make_pair(
                    make_symbol("quote", self.symbols), make_pair(value, NIL)
                )
            if not stack:
                return ParseState(value, text[pos:])
            frame = stack[-1]
            frame.acc = make_pair(value, frame.acc)

    def read_atom(self, text, pos):
        end, n = pos, len(text)
        while end < n and text[end] not in DELIMITERS:
            end += 1
        return make_num_or_sym(text[pos:end], self.symbols), end

    def read_all(self, text):
        "yield every expression in text; an Error is yielded last"
        while skip_spaces(text, 0) < len(text):
            value, text = self.read(text)
            yield value
            if isinstance(value, Error):
                return


def read(text, symbols=None):
    "one-shot read; pass symbols to keep symbol identity across calls"
    return Reader(symbols).read(text)


## }}}

## EOF
