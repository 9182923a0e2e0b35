#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdnode.utils` module."

import pytest

from hdnode.exceptions import HDNodeValueError
from hdnode.utils import bytes_from_octets


def test_bytes_from_octets() -> None:

    a_bytes = bytes.fromhex("01deadbeef00000000")
    assert bytes_from_octets(a_bytes) == a_bytes
    assert bytes_from_octets("01deadbeef00000000") == a_bytes
    assert bytes_from_octets(" 01 DEADBEEF 00000000 ") == a_bytes

    assert bytes_from_octets(a_bytes, 9) == a_bytes
    assert bytes_from_octets(a_bytes, (4, 9)) == a_bytes

    with pytest.raises(HDNodeValueError, match="invalid size: "):
        bytes_from_octets(a_bytes, 8)
    with pytest.raises(HDNodeValueError, match="invalid size: "):
        bytes_from_octets(a_bytes, [4, 8])

    # invalid hex-string: odd number of hex digits
    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        bytes_from_octets("1deadbeef00000000")
