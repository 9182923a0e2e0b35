#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended key serialization.

A BIP32 serialized extended key is 82 bytes:

- [  : 4] version
- [ 4: 5] depth in the derivation path
- [ 5: 9] parent fingerprint
- [ 9:13] child number, big endian
- [13:45] chain code
- [45:78] compressed pub_key or [0x00][prv_key]
- [78:82] checksum, i.e. hash256 of the first 78 bytes, truncated to 4 bytes

The text form is the plain Base58 encoding of the 82 bytes:
the checksum is already embedded, so there is no further
Base58Check checksum.

The version is never computed from the key content:
the caller chooses if the private or the public payload is serialized,
and the KeyVersions providing the prefixes.
"""

from __future__ import annotations

from typing import Optional

import base58

from hdnode.alias import Octets, String
from hdnode.bip32.node import ExtendedKeyNode, PrivateKeyNode, PublicKeyNode
from hdnode.exceptions import (
    ChecksumMismatchError,
    InvalidEncodingError,
    InvalidLengthError,
    InvalidPrivateKeyError,
    InvalidVersionError,
    MissingPrivateKeyError,
)
from hdnode.hashes import hash256
from hdnode.utils import bytes_from_octets
from hdnode.versions import MAINNET, PRV_VERSIONS_ALL, KeyVersions

EXTENDED_KEY_SIZE = 82
_PAYLOAD_SIZE = 78


def serialize(
    node: ExtendedKeyNode, private: bool = False, versions: KeyVersions = MAINNET
) -> bytes:
    "Return the 82 bytes serialization of the private or public payload."

    if private:
        if not isinstance(node, PrivateKeyNode):
            raise MissingPrivateKeyError("not a private node")
        version = versions.prv
        key = b"\x00" + node.private_key
    else:
        version = versions.pub
        key = node.public_key

    payload = b"".join(
        [
            version,
            node.depth.to_bytes(1, byteorder="big", signed=False),
            node.parent_fingerprint,
            node.child_number.to_bytes(4, byteorder="big", signed=False),
            node.chain_code,
            key,
        ]
    )
    return payload + hash256(payload)[:4]


def _is_private_version(version: bytes, versions: Optional[KeyVersions]) -> bool:
    if versions is None:
        # any other prefix (e.g. ypub, zpub) is a public payload
        return version in PRV_VERSIONS_ALL

    if version == versions.prv:
        return True
    if version == versions.pub:
        return False
    raise InvalidVersionError(f"unknown extended key version: 0x{version.hex()}")


def deserialize(
    data: Octets, versions: Optional[KeyVersions] = None
) -> ExtendedKeyNode:
    """Return the node from its 82 bytes serialization.

    With no KeyVersions, a known private version marks a private payload
    and any other version a public one.
    With explicit KeyVersions, only its two versions are accepted.
    """

    data = bytes_from_octets(data)
    if len(data) != EXTENDED_KEY_SIZE:
        err_msg = f"invalid extended key length: {len(data)} bytes"
        err_msg += f" instead of {EXTENDED_KEY_SIZE}"
        raise InvalidLengthError(err_msg)

    payload, checksum = data[:_PAYLOAD_SIZE], data[_PAYLOAD_SIZE:]
    expected = hash256(payload)[:4]
    if checksum != expected:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{expected.hex()}"
        raise ChecksumMismatchError(err_msg)

    version = payload[0:4]
    depth = payload[4]
    parent_fingerprint = payload[5:9]
    child_number = int.from_bytes(payload[9:13], byteorder="big", signed=False)
    chain_code = payload[13:45]
    key = payload[45:78]

    if _is_private_version(version, versions):
        if key[0] != 0:
            raise InvalidPrivateKeyError(
                f"invalid private key prefix: 0x{key[:1].hex()}"
            )
        return PrivateKeyNode(
            private_key=key[1:],
            chain_code=chain_code,
            depth=depth,
            parent_fingerprint=parent_fingerprint,
            child_number=child_number,
        )

    return PublicKeyNode(
        public_key=key,
        chain_code=chain_code,
        depth=depth,
        parent_fingerprint=parent_fingerprint,
        child_number=child_number,
    )


def b58encode(
    node: ExtendedKeyNode, private: bool = False, versions: KeyVersions = MAINNET
) -> str:
    data = serialize(node, private, versions)
    return base58.b58encode(data).decode("ascii")


def b58decode(xkey: String, versions: Optional[KeyVersions] = None) -> ExtendedKeyNode:

    if isinstance(xkey, str):
        xkey = xkey.strip()

    try:
        data = base58.b58decode(xkey)
    except ValueError as e:
        raise InvalidEncodingError("invalid base58 extended key") from e
    return deserialize(data, versions)
