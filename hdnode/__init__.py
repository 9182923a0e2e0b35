#!/usr/bin/env python3

# Copyright (C) The hdnode developers
#
# This file is part of hdnode. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdnode including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the hdnode package."

name = "hdnode"
__version__ = "2026.10.1"
__author__ = "The hdnode developers"
__author_email__ = "devs@hdnode.org"
__copyright__ = "Copyright (C) 2026 The hdnode developers"
__license__ = "MIT License"
