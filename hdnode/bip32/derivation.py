#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet derivation.

A deterministic wallet is a hash-chain of private/public key pairs that
derives from a single root, which is the only element requiring backup.
Moreover, there are schemes where public keys can be calculated without
accessing private keys.

A hierarchical deterministic wallet is a tree of multiple hash-chains,
derived from a single root, allowing for selective sharing of keypair
chains.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki.

Every function is pure: it reads the parent node and returns a new node.
An invalid candidate key (IL not less than the curve order,
zero private key, public key at infinity) is not an error:
derivation is retried with the next index, up to the end of the
index space.
"""

from __future__ import annotations

import logging
from typing import Optional

from hdnode.alias import Octets
from hdnode.bip32.der_path import (
    HARDENED_OFFSET,
    DerPath,
    indexes_from_path,
    str_from_index_int,
)
from hdnode.bip32.node import ExtendedKeyNode, PrivateKeyNode, PublicKeyNode
from hdnode.ecc import CURVE_ORDER, prv_key_from_int, tweak_pub_key
from hdnode.exceptions import (
    DepthOverflowError,
    DerivationExhaustedError,
    HardenedDerivationError,
    HDNodeValueError,
    InvalidIndexError,
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    InvalidSeedError,
    MissingPrivateKeyError,
)
from hdnode.hashes import hmac_sha512
from hdnode.utils import bytes_from_octets

log = logging.getLogger(__name__)

_MAX_INDEX = 0xFFFFFFFF
_MAX_DEPTH = 255


def root_from_seed(seed: Octets) -> PrivateKeyNode:
    """Return the BIP32 root (master) node from seed."""

    seed = bytes_from_octets(seed)
    bitlenght = len(seed) * 8
    if bitlenght < 128:
        raise InvalidSeedError(f"too few bits for seed: {bitlenght}")
    log.debug("root node from a %d bits seed", bitlenght)

    hmac_ = hmac_sha512(b"Bitcoin seed", seed)
    try:
        return PrivateKeyNode(
            private_key=hmac_[:32],
            chain_code=hmac_[32:],
            depth=0,
            parent_fingerprint=b"\x00" * 4,
            child_number=0,
            path="m",
        )
    except (InvalidPrivateKeyError, InvalidPublicKeyError) as e:
        raise InvalidSeedError("invalid master key from seed") from e


def _child_path(parent_path: Optional[str], child_number: int) -> Optional[str]:
    if parent_path is None:
        return None
    return parent_path + "/" + str_from_index_int(child_number)


def _assert_derivable(node: ExtendedKeyNode, index: int) -> None:
    if node.depth >= _MAX_DEPTH:
        raise DepthOverflowError(f"depth greater than 255: {node.depth + 1}")
    if not 0 <= index <= _MAX_INDEX:
        raise InvalidIndexError(f"invalid index: {index}")


def derive_private(
    node: PrivateKeyNode, index: int, hardened: bool = False
) -> PrivateKeyNode:
    """Private parent key → private child key (CKDpriv).

    The index is a raw 32-bit index: if it is not less than 0x80000000
    it already encodes a hardened derivation,
    otherwise the hardened flag offsets it.
    """

    if not isinstance(node, PrivateKeyNode):
        raise MissingPrivateKeyError("not a private node")
    _assert_derivable(node, index)

    first_index = index
    if hardened and index < HARDENED_OFFSET:
        first_index += HARDENED_OFFSET

    parent_q = int.from_bytes(node.private_key, byteorder="big", signed=False)
    for child_number in range(first_index, _MAX_INDEX + 1):
        ser32 = child_number.to_bytes(4, byteorder="big", signed=False)
        if child_number >= HARDENED_OFFSET:  # hardened derivation
            hmac_ = hmac_sha512(node.chain_code, b"\x00" + node.private_key + ser32)
        else:  # normal derivation
            hmac_ = hmac_sha512(node.chain_code, node.public_key + ser32)

        offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
        if offset >= CURVE_ORDER:
            log.warning("invalid IL at child number %d: retrying", child_number)
            continue
        q = (parent_q + offset) % CURVE_ORDER
        if q == 0:
            log.warning("zero private key at child number %d: retrying", child_number)
            continue

        return PrivateKeyNode(
            private_key=prv_key_from_int(q),
            chain_code=hmac_[32:],
            depth=node.depth + 1,
            parent_fingerprint=node.fingerprint,
            child_number=child_number,
            path=_child_path(node.path, child_number),
        )

    raise DerivationExhaustedError(f"no valid child from index {first_index}")


def derive_public(
    node: ExtendedKeyNode, index: int, hardened: bool = False
) -> PublicKeyNode:
    """Public parent key → public child key (CKDpub).

    It works on full nodes too, returning a public-only child.
    Hardened derivation is impossible without the private key.
    """

    if hardened or index >= HARDENED_OFFSET:
        raise HardenedDerivationError("invalid hardened derivation from public key")
    _assert_derivable(node, index)

    for child_number in range(index, HARDENED_OFFSET):
        ser32 = child_number.to_bytes(4, byteorder="big", signed=False)
        hmac_ = hmac_sha512(node.chain_code, node.public_key + ser32)

        offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
        if offset >= CURVE_ORDER:
            log.warning("invalid IL at child number %d: retrying", child_number)
            continue
        try:
            pub_key = tweak_pub_key(node.public_key, hmac_[:32])
        except InvalidPublicKeyError:
            log.warning("invalid public key at child number %d: retrying", child_number)
            continue

        return PublicKeyNode(
            public_key=pub_key,
            chain_code=hmac_[32:],
            depth=node.depth + 1,
            parent_fingerprint=node.fingerprint,
            child_number=child_number,
            path=_child_path(node.path, child_number),
        )

    raise DerivationExhaustedError(f"no valid non-hardened child from index {index}")


def derive_child(
    node: ExtendedKeyNode, index: int, hardened: bool = False, private: bool = True
) -> ExtendedKeyNode:
    "Derive a single child, with private (CKDpriv) or public (CKDpub) derivation."

    if private:
        # mypy cannot grok that derive_private checks the node type
        return derive_private(node, index, hardened)  # type: ignore
    return derive_public(node, index, hardened)


def derive_path(
    node: ExtendedKeyNode, der_path: DerPath, private: bool = True
) -> ExtendedKeyNode:
    """Derive a node across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/44'/60'/0'/0" (or "m/44h/60h/0h/0")
    - iterable integer indexes
    - one single integer index

    The whole path is validated before any derivation:
    either the final node is returned or an exception is raised.
    """

    indexes = indexes_from_path(der_path)

    final_depth = node.depth + len(indexes)
    if final_depth > _MAX_DEPTH:
        raise DepthOverflowError(f"final depth greater than 255: {final_depth}")
    if not private and any(i >= HARDENED_OFFSET for i in indexes):
        raise HardenedDerivationError("invalid hardened derivation from public key")

    for index in indexes:
        node = derive_child(node, index, private=private)
    return node


def derive_from_account(
    account: ExtendedKeyNode,
    branch: int,
    address_index: int,
    branches_0_1_only: bool = True,
    max_index: int = 0xFFFF,
) -> ExtendedKeyNode:
    """Derive a key at the given branch and index of an account.

    It also ensures that the account key is hardened,
    that the branch is a standard receive or change,
    and that the index is not arbitrarily high.
    """

    if not account.is_hardened:
        raise HDNodeValueError("unhardened account/master key")

    if branch >= HARDENED_OFFSET:
        raise HDNodeValueError("invalid private derivation at branch level")
    if branch > max_index:
        raise HDNodeValueError(f"too high branch: {branch}")
    if branches_0_1_only and branch not in (0, 1):
        raise HDNodeValueError(f"invalid branch: {branch} not in (0, 1)")

    if address_index >= HARDENED_OFFSET:
        raise HDNodeValueError("invalid private derivation at address index level")
    if address_index > max_index:
        raise HDNodeValueError(f"too high address index: {address_index}")

    return derive_path(account, [branch, address_index], account.has_private)

