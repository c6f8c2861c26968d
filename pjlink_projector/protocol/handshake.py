# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PJLinkProtocolError
from .digest import compute_digest

# Connection handshake:
#   Projector: "PJLINK 0\r" if security is disabled, or "PJLINK 1 <seed>\r" if it is enabled
#   Client: "<command>\r", or f"{md5(seed + password)}<command>\r" if security is enabled
#   Projector: "<response>\r", or "PJLINK ERRA\r" if the digest was wrong
#   <Connection is closed after one command/response>

PJLINK_NO_AUTH = "PJLINK 0"
"""Sent by the projector immediately on connecting when security is disabled."""

PJLINK_AUTH_PREFIX = "PJLINK 1"
"""Sent by the projector immediately on connecting when security is enabled,
   followed by a space and the challenge seed."""

PJLINK_ERRA = "PJLINK ERRA"
"""Sent by the projector in response to a command with a missing or incorrect digest."""

RESPONSE_PADDING = "\r\0"
"""Trailing characters stripped from everything received from the projector."""

class PJLinkGreeting:
    """The first line a projector sends on a new connection."""

    requires_auth: bool
    challenge_seed: str

    def __init__(self, requires_auth: bool, challenge_seed: str='') -> None:
        self.requires_auth = requires_auth
        self.challenge_seed = challenge_seed

    @classmethod
    def parse(cls, text: str) -> PJLinkGreeting:
        """Parses a greeting with padding already trimmed.

        Raises PJLinkProtocolError if it is not a PJLink greeting.
        """
        if text == PJLINK_NO_AUTH:
            return cls(False)
        if text == PJLINK_AUTH_PREFIX:
            return cls(True)
        if text.startswith(PJLINK_AUTH_PREFIX + ' '):
            return cls(True, text[len(PJLINK_AUTH_PREFIX) + 1:])
        raise PJLinkProtocolError(f"Handshake: Unexpected greeting from projector: {text!r}")

    def __str__(self) -> str:
        if self.requires_auth:
            return f"{PJLINK_AUTH_PREFIX} {self.challenge_seed}"
        return PJLINK_NO_AUTH

    def __repr__(self) -> str:
        return f"PJLinkGreeting({str(self)!r})"

class PJLinkAuthContext:
    """Authentication state for a single connection.

    The password is fixed for the life of the client. requires_auth and
    challenge_seed are refreshed from the greeting of every new connection,
    since projectors issue a new seed each time.
    """

    password: str
    requires_auth: bool = False
    challenge_seed: str = ''

    def __init__(self, password: Optional[str]=None) -> None:
        self.password = '' if password is None else password

    def update_from_greeting(self, greeting: PJLinkGreeting) -> None:
        self.requires_auth = greeting.requires_auth
        # a stale seed must never be used against a projector that no longer asks for one
        self.challenge_seed = greeting.challenge_seed if greeting.requires_auth else ''

    @property
    def is_active(self) -> bool:
        """True iff commands on this connection must carry a digest."""
        return self.requires_auth and self.challenge_seed != ''

    def digest_prefix(self) -> str:
        """Returns the digest to prepend to the command, or '' if none is needed."""
        if not self.is_active:
            return ''
        return compute_digest(self.challenge_seed, self.password)

    def __str__(self) -> str:
        return f"PJLinkAuthContext(requires_auth={self.requires_auth}, challenge_seed={self.challenge_seed!r})"

    def __repr__(self) -> str:
        return str(self)
