#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

They are meant to discriminate between Exceptions being raised
by hdnode from those raised by other codebase,
and between the different ways a derivation or a decoding can fail.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the hdnode versions are derived.
"""


class HDNodeValueError(ValueError):
    pass


class HDNodeTypeError(TypeError):
    pass


class InvalidSeedError(HDNodeValueError):
    pass


class InvalidPrivateKeyError(HDNodeValueError):
    pass


class InvalidPublicKeyError(HDNodeValueError):
    pass


class DepthOverflowError(HDNodeValueError):
    pass


class DerivationExhaustedError(HDNodeValueError):
    pass


class InvalidPathError(HDNodeValueError):
    pass


class InvalidIndexError(HDNodeValueError):
    pass


class HardenedDerivationError(HDNodeValueError):
    "Hardened derivation requested on the public-only path."


class InvalidLengthError(HDNodeValueError):
    pass


class ChecksumMismatchError(HDNodeValueError):
    pass


class InvalidVersionError(HDNodeValueError):
    pass


class InvalidEncodingError(HDNodeValueError):
    pass


class MissingPrivateKeyError(HDNodeTypeError):
    "A private key operation was requested on a public-only node."
