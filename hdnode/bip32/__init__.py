#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdnode.bip32."""

from hdnode.bip32.codec import (
    EXTENDED_KEY_SIZE,
    b58decode,
    b58encode,
    deserialize,
    serialize,
)
from hdnode.bip32.der_path import (
    DEFAULT_PATH,
    DEFAULT_PATH_METAMASK,
    DEFAULT_PATH_METAMASK_PREFIX,
    DEFAULT_PATH_PREFIX,
    HARDENED_OFFSET,
    DerPath,
    indexes_from_path,
    int_from_index_str,
    str_from_index_int,
    str_from_path,
)
from hdnode.bip32.derivation import (
    derive_child,
    derive_from_account,
    derive_path,
    derive_private,
    derive_public,
    root_from_seed,
)
from hdnode.bip32.node import ExtendedKeyNode, PrivateKeyNode, PublicKeyNode

__all__ = [
    "ExtendedKeyNode",
    "PrivateKeyNode",
    "PublicKeyNode",
    "DerPath",
    "EXTENDED_KEY_SIZE",
    "HARDENED_OFFSET",
    "DEFAULT_PATH",
    "DEFAULT_PATH_PREFIX",
    "DEFAULT_PATH_METAMASK",
    "DEFAULT_PATH_METAMASK_PREFIX",
    "b58decode",
    "b58encode",
    "deserialize",
    "serialize",
    "derive_child",
    "derive_from_account",
    "derive_path",
    "derive_private",
    "derive_public",
    "root_from_seed",
    "indexes_from_path",
    "int_from_index_str",
    "str_from_index_int",
    "str_from_path",
]
