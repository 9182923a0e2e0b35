#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A BIP32 derivation path can be represented as:

- "m/44'/60'/0'/0" or "44'/60'/0'/0" string
  ("h" and "H" are accepted as hardening symbols too)
- sequence of integer indexes (even a single int),
  where hardened indexes are already offset by 0x80000000
"""

from __future__ import annotations

import re
from typing import List, Sequence, Union

from hdnode.exceptions import InvalidPathError

HARDENED_OFFSET = 0x80000000

# default hardening symbol among the possible ones: "'", "h", "H"
_HARDENING = "'"

_INDEX_STR = re.compile(r"([0-9]+)(['hH]?)")

DEFAULT_PATH = "m/44'/60'/0'/0"
DEFAULT_PATH_PREFIX = "m/44'/60'/0'"
DEFAULT_PATH_METAMASK = "m/44'/60'/0'/0/0"
DEFAULT_PATH_METAMASK_PREFIX = "m/44'/60'/0'/0"


def int_from_index_str(s: str) -> int:
    "Return the raw 32-bit index of a path component like 44'."

    match = _INDEX_STR.fullmatch(s)
    if match is None:
        raise InvalidPathError(f"invalid path component: '{s}'")

    index = int(match.group(1))
    if not 0 <= index < HARDENED_OFFSET:
        raise InvalidPathError(f"invalid index: {index}")
    return index + (HARDENED_OFFSET if match.group(2) else 0)


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in ("'", "h", "H"):
        raise InvalidPathError(f"invalid hardening symbol: {hardening}")
    if not 0 <= i <= 0xFFFFFFFF:
        raise InvalidPathError(f"invalid index: {i}")
    if i < HARDENED_OFFSET:
        return str(i)
    return str(i - HARDENED_OFFSET) + hardening


def _indexes_from_path_str(der_path: str) -> List[int]:

    der_path = der_path.strip()
    if der_path in ("", "m", "M"):
        return []

    steps = der_path.split("/")
    if steps[0] in ("m", "M"):
        steps = steps[1:]

    return [int_from_index_str(s) for s in steps]


DerPath = Union[str, Sequence[int], int]


def indexes_from_path(der_path: DerPath) -> List[int]:
    "Return the list of raw 32-bit indexes of a derivation path."

    if isinstance(der_path, str):
        return _indexes_from_path_str(der_path)

    if isinstance(der_path, int):
        indexes = [der_path]
    else:
        # Sequence[int]
        indexes = [int(i) for i in der_path]

    for i in indexes:
        if not 0 <= i <= 0xFFFFFFFF:
            raise InvalidPathError(f"invalid index: {i}")
    return indexes


def str_from_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    "Return the normalized 'm/...' string of a derivation path."
    indexes = indexes_from_path(der_path)
    result = "/".join(str_from_index_int(i, hardening) for i in indexes)
    return "m/" + result if result else "m"
