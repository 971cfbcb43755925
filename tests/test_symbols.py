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

## pylint: disable=invalid-name
## XXX pylint: disable=missing-docstring

import threading

import pytest

from lread import NIL, Symbol, SymbolTable, make_symbol


def test_intern_returns_same_instance(symbols):
    a = symbols.intern("foo")
    assert symbols.intern("foo") is a
    assert a.name == "foo"
    assert len(symbols) == 1


def test_different_spellings_differ(symbols):
    assert symbols.intern("foo") is not symbols.intern("bar")
    assert sorted(symbols) == ["bar", "foo"]


def test_tables_are_independent():
    t1, t2 = SymbolTable(), SymbolTable()
    assert t1.intern("x") is not t2.intern("x")


def test_get_does_not_intern(symbols):
    assert symbols.get("x") is None
    assert "x" not in symbols
    x = symbols.intern("x")
    assert symbols.get("x") is x
    assert "x" in symbols


def test_nil_alias_only_in_make_symbol(symbols):
    assert make_symbol("nil", symbols) is NIL
    assert "nil" not in symbols
    ## the table itself has no special cases
    assert isinstance(symbols.intern("nil"), Symbol)


def test_direct_construction_is_refused():
    with pytest.raises(TypeError):
        Symbol("x")


def test_empty_spelling_is_refused(symbols):
    with pytest.raises(AssertionError):
        symbols.intern("")


def test_concurrent_intern(symbols):
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(symbols.intern("shared"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(r is results[0] for r in results)
    assert len(symbols) == 1


## EOF
