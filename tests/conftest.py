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

## pylint: disable=invalid-name,redefined-outer-name
## XXX pylint: disable=missing-docstring

import pytest

from lread import Reader, SymbolTable


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def reader(symbols):
    return Reader(symbols)


@pytest.fixture
def read(reader):
    "read text and return just the value"

    def read_(text):
        return reader.read(text).value

    return read_


## EOF
