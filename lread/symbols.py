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

"symbols.py - symbol table"

## pylint: disable=invalid-name
## XXX pylint: disable=missing-docstring

import threading

from .values import Symbol, _INTERN_KEY  ## pylint: disable=protected-access

__all__ = ("SymbolTable",)


class SymbolTable:
    """
    maps spellings to unique Symbol instances. each Reader owns (or is
    handed) one of these; there is no global table, so two sessions never
    see each other's symbols.
    """

    def __init__(self):
        self.symbols = {}
        self.lock = threading.Lock()

    def intern(self, s):
        assert s and type(s) is str  ## pylint: disable=unidiomatic-typecheck
        ret = self.symbols.get(s)
        if ret is None:
            with self.lock:
                ret = self.symbols.get(s)
                if ret is None:
                    ret = self.symbols[s] = Symbol(s, _INTERN_KEY)
        return ret

    def get(self, s):
        return self.symbols.get(s)

    def __contains__(self, s):
        return s in self.symbols

    def __iter__(self):
        return iter(list(self.symbols))

    def __len__(self):
        return len(self.symbols)

    def __repr__(self):
        return f"<SymbolTable: {len(self)} symbols>"


## EOF
