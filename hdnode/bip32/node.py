#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended key nodes.

A node is one position of the hierarchical deterministic tree:
a key, its chain code, and the positional metadata
(depth, parent fingerprint, child number).

A node is either public-only (PublicKeyNode)
or full (PrivateKeyNode), and that is fixed at construction time.
Nodes are immutable: derivation always returns brand-new nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dataclasses_json import DataClassJsonMixin, config

from hdnode.alias import Octets
from hdnode.bip32.der_path import HARDENED_OFFSET
from hdnode.ecc import assert_valid_pub_key, int_from_prv_key, pub_key_from_prv_key
from hdnode.exceptions import (
    DepthOverflowError,
    HDNodeTypeError,
    HDNodeValueError,
    InvalidPublicKeyError,
)
from hdnode.hashes import hash160
from hdnode.utils import bytes_from_octets

_HEX = config(encoder=bytes.hex, decoder=bytes.fromhex)

_KEY_SIZE: List[Tuple[str, int]] = [
    ("parent_fingerprint", 4),
    ("chain_code", 32),
]


@dataclass(frozen=True, init=False)
class ExtendedKeyNode(DataClassJsonMixin):
    public_key: bytes = field(metadata=_HEX)
    chain_code: bytes = field(metadata=_HEX)
    depth: int
    parent_fingerprint: bytes = field(metadata=_HEX)
    # child_number is an int, not bytes, to avoid any byteorder ambiguity
    child_number: int
    # human readable derivation path, None when unknown
    path: Optional[str] = field(compare=False)

    def __init__(
        self,
        public_key: Octets,
        chain_code: Octets,
        depth: int = 0,
        parent_fingerprint: Octets = b"\x00" * 4,
        child_number: int = 0,
        path: Optional[str] = None,
        check_validity: bool = True,
    ) -> None:

        # a node is either public-only or full
        if type(self) is ExtendedKeyNode:
            raise HDNodeTypeError("use PublicKeyNode or PrivateKeyNode")

        object.__setattr__(self, "public_key", bytes_from_octets(public_key))
        object.__setattr__(self, "chain_code", bytes_from_octets(chain_code))
        object.__setattr__(self, "depth", int(depth))
        object.__setattr__(
            self, "parent_fingerprint", bytes_from_octets(parent_fingerprint)
        )
        object.__setattr__(self, "child_number", int(child_number))
        if path is None and self.depth == 0:
            path = "m"
        object.__setattr__(self, "path", path)

        if check_validity:
            self.assert_valid()

    @property
    def index(self) -> int:
        if self.is_hardened:
            return self.child_number - HARDENED_OFFSET
        return self.child_number

    @property
    def is_hardened(self) -> bool:
        return self.child_number >= HARDENED_OFFSET

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.child_number == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def has_private(self) -> bool:
        return False

    @property
    def identifier(self) -> bytes:
        "Return the HASH160 of the public key."
        return hash160(self.public_key)

    @property
    def fingerprint(self) -> bytes:
        "Return the first 4 bytes of the identifier, i.e. the child's parent fingerprint."
        return self.identifier[:4]

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise HDNodeValueError(err_msg)

        if self.depth > 255:
            raise DepthOverflowError(f"invalid depth: {self.depth}")
        if self.depth < 0:
            raise HDNodeValueError(f"invalid depth: {self.depth}")

        if not 0 <= self.child_number <= 0xFFFFFFFF:
            raise HDNodeValueError(f"invalid child number: {self.child_number}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise HDNodeValueError(err_msg)
            if self.child_number != 0:
                err_msg = f"zero depth with non-zero index: {self.child_number}"
                raise HDNodeValueError(err_msg)

        assert_valid_pub_key(self.public_key)

    def neutered(self) -> PublicKeyNode:
        """Neutered Derivation (N).

        Return the public-only node
        (“neutered” as it removes the ability to sign transactions).
        """
        return PublicKeyNode(
            public_key=self.public_key,
            chain_code=self.chain_code,
            depth=self.depth,
            parent_fingerprint=self.parent_fingerprint,
            child_number=self.child_number,
            path=self.path,
            check_validity=False,
        )


@dataclass(frozen=True, init=False)
class PublicKeyNode(ExtendedKeyNode):
    "Public-only node: no private key, no hardened derivation."


@dataclass(frozen=True, init=False)
class PrivateKeyNode(ExtendedKeyNode):
    "Full node: the public key is always the one of the private key."

    private_key: bytes = field(repr=False, metadata=_HEX)

    def __init__(
        self,
        private_key: Octets,
        chain_code: Octets,
        depth: int = 0,
        parent_fingerprint: Octets = b"\x00" * 4,
        child_number: int = 0,
        path: Optional[str] = None,
        public_key: Optional[Octets] = None,
        check_validity: bool = True,
    ) -> None:

        private_key = bytes_from_octets(private_key)
        computed_pub_key = pub_key_from_prv_key(private_key)
        if public_key is not None:
            if bytes_from_octets(public_key) != computed_pub_key:
                raise InvalidPublicKeyError("public key / private key mismatch")
        object.__setattr__(self, "private_key", private_key)

        super().__init__(
            computed_pub_key,
            chain_code,
            depth,
            parent_fingerprint,
            child_number,
            path,
            check_validity,
        )

    @property
    def has_private(self) -> bool:
        return True

    def assert_valid(self) -> None:
        int_from_prv_key(self.private_key)
        super().assert_valid()
