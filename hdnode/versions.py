#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Extended key version prefixes and associated functions.

The 4-bytes version prefix of a serialized extended key
is never computed from its content: it is chosen by the caller
according to the payload (private or public) and the network.
"""

import json
from dataclasses import dataclass, field
from os import path
from typing import Dict, List, Optional

from dataclasses_json import DataClassJsonMixin, config

from hdnode.alias import Octets
from hdnode.exceptions import InvalidVersionError
from hdnode.utils import bytes_from_octets

_VERSION_SIZE = 4


@dataclass(frozen=True, init=False)
class KeyVersions(DataClassJsonMixin):
    # base58 extended key starts with 'xprv' on mainnet
    prv: bytes = field(metadata=config(encoder=bytes.hex, decoder=bytes.fromhex))
    # base58 extended key starts with 'xpub' on mainnet
    pub: bytes = field(metadata=config(encoder=bytes.hex, decoder=bytes.fromhex))

    def __init__(self, prv: Octets, pub: Octets, check_validity: bool = True) -> None:

        object.__setattr__(self, "prv", bytes_from_octets(prv))
        object.__setattr__(self, "pub", bytes_from_octets(pub))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        for key in ("prv", "pub"):
            value = getattr(self, key)
            if len(value) != _VERSION_SIZE:
                err_msg = f"invalid {key} version length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {_VERSION_SIZE}"
                raise InvalidVersionError(err_msg)

        if self.prv == self.pub:
            err_msg = f"same version for private and public keys: 0x{self.prv.hex()}"
            raise InvalidVersionError(err_msg)


VERSIONS: Dict[str, KeyVersions] = {}
datadir = path.join(path.dirname(__file__), "_data")
with open(path.join(datadir, "versions.json"), "r", encoding="ascii") as file_:
    for net, dict_ in json.load(file_).items():
        VERSIONS[net] = KeyVersions.from_dict(dict_)

MAINNET = VERSIONS["mainnet"]
TESTNET = VERSIONS["testnet"]

PRV_VERSIONS_ALL: List[bytes] = [v.prv for v in VERSIONS.values()]
PUB_VERSIONS_ALL: List[bytes] = [v.pub for v in VERSIONS.values()]


def versions_from_network(network: str = "mainnet") -> KeyVersions:
    network = network.strip().lower()
    try:
        return VERSIONS[network]
    except KeyError as e:
        raise InvalidVersionError(f"unknown network: {network}") from e


def network_from_version(version: Octets) -> Optional[str]:
    "Return the network using the given version prefix, if any."
    version = bytes_from_octets(version)
    for net, versions in VERSIONS.items():
        if version in (versions.prv, versions.pub):
            return net
    return None
