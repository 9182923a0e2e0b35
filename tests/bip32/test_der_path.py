#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdnode.bip32.der_path` module."


import pytest

from hdnode.bip32.der_path import (
    _HARDENING,
    DEFAULT_PATH,
    DEFAULT_PATH_METAMASK,
    DEFAULT_PATH_METAMASK_PREFIX,
    DEFAULT_PATH_PREFIX,
    HARDENED_OFFSET,
    _indexes_from_path_str,
    indexes_from_path,
    int_from_index_str,
    str_from_index_int,
    str_from_path,
)
from hdnode.exceptions import InvalidPathError


def test_from_path_str() -> None:

    test_reg_str_vectors = [
        # account 0, external branch, address_index 463
        ("m/0" + _HARDENING + "/0/463", [0x80000000, 0, 463]),
        # account 0, internal branch, address_index 267
        ("m/0" + _HARDENING + "/1/267", [0x80000000, 1, 267]),
    ]

    for der_path_str, der_path_ints in test_reg_str_vectors:
        # recover ints from str
        assert der_path_ints == _indexes_from_path_str(der_path_str)
        assert der_path_ints == indexes_from_path(der_path_str)
        # recover ints from ints
        assert der_path_ints == indexes_from_path(der_path_ints)
        # recover str from str
        assert der_path_str == str_from_path(der_path_str)
        # recover str from ints
        assert der_path_str == str_from_path(der_path_ints)

    test_irregular_str_vectors = [
        ("M/0h/0/463", [0x80000000, 0, 463]),
        ("m/0H/1/267", [0x80000000, 1, 267]),
        ("0'/1/267", [0x80000000, 1, 267]),
        (" m/0'/1/267 ", [0x80000000, 1, 267]),
    ]

    for der_path_str, der_path_ints in test_irregular_str_vectors:
        assert der_path_ints == indexes_from_path(der_path_str)
        # irregular str != normalized str
        assert der_path_str != str_from_path(der_path_str)
        assert str_from_path(der_path_str) == str_from_path(der_path_ints)

    for der_path_str in ("m/1/2/-3h/4", "m/1/2/-3/4", "m/1//2", "m/", "m/1/a"):
        with pytest.raises(InvalidPathError, match="invalid path component: "):
            _indexes_from_path_str(der_path_str)

    i = 0x80000000

    with pytest.raises(InvalidPathError, match="invalid index: "):
        _indexes_from_path_str("m/1/2/" + str(i) + "/4")

    with pytest.raises(InvalidPathError, match="invalid index: "):
        _indexes_from_path_str("m/1/2/" + str(i) + "h/4")

    # unicode digits are not indexes
    with pytest.raises(InvalidPathError, match="invalid path component: "):
        _indexes_from_path_str("m/١")


def test_index_int_to_from_str() -> None:

    for i in (0, 1, 0x80000000 - 1, 0x80000000, 0xFFFFFFFF):
        assert i == int_from_index_str(str_from_index_int(i))

    for i in (-1, 0xFFFFFFFF + 1):
        with pytest.raises(InvalidPathError):
            str_from_index_int(i)

    for s in ("-1", "-1h", str(0x80000000) + "h", str(0xFFFFFFFF + 1), "1\n", ""):
        with pytest.raises(InvalidPathError):
            int_from_index_str(s)

    with pytest.raises(InvalidPathError, match="invalid hardening symbol: "):
        str_from_index_int(0x80000000, "hardened")

    assert str_from_index_int(0x80000000 + 44, "h") == "44h"
    assert str_from_index_int(0x80000000 + 44, "H") == "44H"


def test_indexes_from_path() -> None:

    assert indexes_from_path("m") == []
    assert indexes_from_path("M") == []
    assert indexes_from_path("") == []
    assert indexes_from_path([]) == []
    assert indexes_from_path(7) == [7]
    assert indexes_from_path((1, HARDENED_OFFSET)) == [1, HARDENED_OFFSET]

    for der_path in (-1, [0, 0xFFFFFFFF + 1]):
        with pytest.raises(InvalidPathError, match="invalid index: "):
            indexes_from_path(der_path)


def test_str_from_path() -> None:

    assert str_from_path("m") == "m"
    assert str_from_path([]) == "m"
    der_path = "/44h/0h"
    assert str_from_path(der_path[1:], "h") == "m" + der_path
    assert str_from_path([HARDENED_OFFSET + 44, HARDENED_OFFSET], "H") == "m/44H/0H"


def test_default_paths() -> None:

    assert DEFAULT_PATH == DEFAULT_PATH_METAMASK_PREFIX
    assert DEFAULT_PATH.startswith(DEFAULT_PATH_PREFIX + "/")
    assert DEFAULT_PATH_METAMASK == DEFAULT_PATH_METAMASK_PREFIX + "/0"
    assert indexes_from_path(DEFAULT_PATH) == [
        HARDENED_OFFSET + 44,
        HARDENED_OFFSET + 60,
        HARDENED_OFFSET,
        0,
    ]
