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
values.py - the tagged value model

every lisp value is an instance of one of the Value subclasses below.
the set is closed: nil, number, symbol, error, pair, plus two reserved
variants (native procs and closures) for an evaluator to use later.
"""

## pylint: disable=invalid-name
## XXX pylint: disable=missing-docstring

__all__ = (
    "INT_MAX",
    "INT_MIN",
    "NIL",
    "Closure",
    "Error",
    "NativeProc",
    "Nil",
    "Number",
    "Pair",
    "Symbol",
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
    "safe_head",
    "safe_tail",
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


## {{{ value classes


class Value:
    ## pylint: disable=too-few-public-methods

    __slots__ = ()
    tag = None

    def __str__(self):
        ## pylint: disable=import-outside-toplevel,cyclic-import
        from .printer import stringify

        return stringify(self)


class Nil(Value):
    "the empty list. there is exactly one of these: NIL"

    __slots__ = ()
    tag = "nil"

    def __new__(cls):
        try:
            return NIL
        except NameError:  ## first call, while this module loads
            return super().__new__(cls)

    def __repr__(self):
        return "NIL"

    def __bool__(self):
        return False


NIL = Nil()


class Number(Value):
    __slots__ = ("value",)
    tag = "num"

    def __init__(self, value):
        self.value = numcheck(value)

    def __eq__(self, other):
        if isinstance(other, Number):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value})"


_INTERN_KEY = object()


class Symbol(Value):
    """
    an interned name. only SymbolTable makes these; two symbols with the
    same spelling from one table are the same object, so compare with "is"
    """

    __slots__ = ("name",)
    tag = "sym"

    def __init__(self, name, key=None):
        if key is not _INTERN_KEY:
            raise TypeError("symbols are created by SymbolTable.intern()")
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"


class Error(Value):
    "an inert syntax error marker. readers return these instead of raising"

    __slots__ = ("message",)
    tag = "error"

    def __init__(self, message):
        self.message = message

    def __repr__(self):
        return f"Error({self.message!r})"


class Pair(Value):
    __slots__ = ("head", "tail")
    tag = "cons"

    def __init__(self, head, tail):
        self.head, self.tail = head, tail

    def __repr__(self):
        return f"<Pair {self}>"


class NativeProc(Value):
    ## reserved for an evaluator; the reader never makes one
    __slots__ = ("func",)
    tag = "subr"

    def __init__(self, func):
        self.func = func

    def __repr__(self):
        return f"NativeProc({self.func!r})"


class Closure(Value):
    ## reserved for an evaluator; the reader never makes one
    __slots__ = ("params", "body", "env")
    tag = "expr"

    def __init__(self, params, body, env):
        self.params, self.body, self.env = params, body, env

    def __repr__(self):
        return "<Closure>"


## }}}
## {{{ checks


def numcheck(x):
    if type(x) is not int:  ## pylint: disable=unidiomatic-typecheck
        raise TypeError(f"expected int, got {type(x).__name__}")
    if not INT_MIN <= x <= INT_MAX:
        raise ValueError(f"{x} does not fit in 32 bits")
    return x


def valuecheck(x):
    if not isinstance(x, Value):
        raise TypeError(f"expected Value, got {x!r}")
    return x


## }}}
## {{{ constructors


def make_number(n):
    return Number(n)


def make_symbol(spelling, symbols):
    "intern spelling in symbols; 'nil' is the empty list, not a symbol"
    if spelling == "nil":
        return NIL
    return symbols.intern(spelling)


def make_error(message):
    return Error(message)


def make_pair(head, tail):
    return Pair(valuecheck(head), valuecheck(tail))


def make_native(func):
    if not callable(func):
        raise TypeError(f"expected callable, got {func!r}")
    return NativeProc(func)


def make_closure(args, env):
    "args is (params . body) as it would appear after the lambda keyword"
    return Closure(safe_head(args), safe_tail(args), env)


## }}}
## {{{ list ops


def safe_head(x):
    return x.head if isinstance(x, Pair) else NIL


def safe_tail(x):
    return x.tail if isinstance(x, Pair) else NIL


def nreverse(lst):
    """
    reverse a pair chain in place and return the new head. the tail links
    of lst are rewritten, so the caller must drop its reference to lst.
    """
    ret = NIL
    while isinstance(lst, Pair):
        lst.tail, ret, lst = ret, lst, lst.tail
    return ret


def make_list(items, tail=NIL):
    ret = NIL
    for x in items:
        ret = make_pair(x, ret)
    if tail is NIL:
        return nreverse(ret)
    ## splice tail onto what will become the last node
    last = ret
    ret = nreverse(ret)
    if isinstance(last, Pair):
        last.tail = valuecheck(tail)
        return ret
    return tail


def iter_list(lst):
    while isinstance(lst, Pair):
        yield lst.head
        lst = lst.tail


## }}}
## {{{ equality


def equal(x, y):
    "structural equality, without recursion"
    todo = [(x, y)]
    while todo:
        x, y = todo.pop()
        if x is y:
            continue
        if isinstance(x, Pair):
            if not isinstance(y, Pair):
                return False
            todo.append((x.tail, y.tail))
            todo.append((x.head, y.head))
        elif isinstance(x, Number):
            if not (isinstance(y, Number) and x.value == y.value):
                return False
        elif isinstance(x, Error):
            if not (isinstance(y, Error) and x.message == y.message):
                return False
        else:
            ## nil, symbols and reserved variants: identity only
            return False
    return True


## }}}

## EOF
