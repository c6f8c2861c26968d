# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink security digest.

When a projector greets with "PJLINK 1 <seed>", every command sent on that
connection must be prefixed with MD5(seed + password) rendered as 32
lowercase hex digits, with no separator.
"""

from __future__ import annotations

import hashlib

from ..exceptions import PJLinkInvalidParameterError

DIGEST_LENGTH = 32

def compute_digest(seed: str, password: str) -> str:
    """Returns the authentication token for a challenge seed and password.

    An empty password is hashed like any other; whether a digest is sent at all
    is decided by the projector's greeting.
    """
    try:
        data = (seed + password).encode('ascii')
    except UnicodeEncodeError as e:
        raise PJLinkInvalidParameterError("PJLink seed and password must be ASCII") from e
    return hashlib.md5(data).hexdigest()
