#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

Elliptic curve arithmetic is never performed here:
scalar validation, point multiplication and point addition
are delegated to libsecp256k1 through coincurve.
Keys are always exchanged as bytes:
32 bytes big endian private keys and
33 bytes SEC 1 compressed public keys.
"""

from __future__ import annotations

from coincurve import PrivateKey, PublicKey

from hdnode.alias import Octets
from hdnode.exceptions import InvalidPrivateKeyError, InvalidPublicKeyError
from hdnode.utils import bytes_from_octets

# secp256k1 group order
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

PRV_KEY_SIZE = 32
PUB_KEY_SIZE = 33


def int_from_prv_key(prv_key: Octets) -> int:
    "Return the private key as int, ensuring it is in 1..n-1."

    prv_key = bytes_from_octets(prv_key)
    if len(prv_key) != PRV_KEY_SIZE:
        err_msg = f"invalid private key length: {len(prv_key)} bytes"
        err_msg += f" instead of {PRV_KEY_SIZE}"
        raise InvalidPrivateKeyError(err_msg)
    q = int.from_bytes(prv_key, byteorder="big", signed=False)
    if not 0 < q < CURVE_ORDER:
        raise InvalidPrivateKeyError("private key not in 1..n-1")
    return q


def prv_key_from_int(q: int) -> bytes:
    "Return the 32 bytes big endian private key, keeping leading zeros."

    if not 0 < q < CURVE_ORDER:
        raise InvalidPrivateKeyError("private key not in 1..n-1")
    return q.to_bytes(PRV_KEY_SIZE, byteorder="big", signed=False)


def pub_key_from_prv_key(prv_key: Octets) -> bytes:
    "Return the SEC 1 compressed public key of a private key."

    prv_key = bytes_from_octets(prv_key)
    int_from_prv_key(prv_key)
    try:
        pub_key = PrivateKey(prv_key).public_key.format(compressed=True)
    except ValueError as e:  # pragma: no cover
        raise InvalidPrivateKeyError("invalid private key") from e

    if pub_key[0] not in (2, 3):  # pragma: no cover
        err_msg = "invalid public key prefix not in (0x02, 0x03): "
        err_msg += f"0x{pub_key[:1].hex()}"
        raise InvalidPublicKeyError(err_msg)
    return pub_key


def assert_valid_pub_key(pub_key: Octets) -> None:
    "Raise InvalidPublicKeyError if not a compressed secp256k1 point."

    pub_key = bytes_from_octets(pub_key)
    if len(pub_key) != PUB_KEY_SIZE:
        err_msg = f"invalid public key length: {len(pub_key)} bytes"
        err_msg += f" instead of {PUB_KEY_SIZE}"
        raise InvalidPublicKeyError(err_msg)
    if pub_key[0] not in (2, 3):
        err_msg = "invalid public key prefix not in (0x02, 0x03): "
        err_msg += f"0x{pub_key[:1].hex()}"
        raise InvalidPublicKeyError(err_msg)
    try:
        PublicKey(pub_key)
    except ValueError as e:
        raise InvalidPublicKeyError(f"invalid public key: 0x{pub_key.hex()}") from e


def tweak_pub_key(pub_key: Octets, tweak: Octets) -> bytes:
    """Return the compressed public key of tweak*G + pub_key.

    The tweak must already be known to be less than the group order:
    libsecp256k1 then fails only if the result is the point at infinity,
    reported as InvalidPublicKeyError.
    """

    pub_key = bytes_from_octets(pub_key, PUB_KEY_SIZE)
    tweak = bytes_from_octets(tweak, PRV_KEY_SIZE)
    try:
        child = PublicKey(pub_key).add(tweak)
    except ValueError as e:
        raise InvalidPublicKeyError("invalid tweaked public key") from e

    result = child.format(compressed=True)
    if result[0] not in (2, 3):  # pragma: no cover
        err_msg = "invalid public key prefix not in (0x02, 0x03): "
        err_msg += f"0x{result[:1].hex()}"
        raise InvalidPublicKeyError(err_msg)
    return result
