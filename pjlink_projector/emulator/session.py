# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
A single client connection to the PJLink projector emulator.
"""

from __future__ import annotations

import asyncio

from ..internal_types import *
from ..pkg_logging import logger
from ..protocol import COMMAND_TERMINATOR

if TYPE_CHECKING:
    from .emulator_impl import PJLinkProjectorEmulator

TERMINATOR_BYTES = COMMAND_TERMINATOR.encode('ascii')

class PJLinkProjectorEmulatorSession(asyncio.Protocol):
    emulator: PJLinkProjectorEmulator
    session_id: int = -1
    transport: Optional[asyncio.Transport] = None
    recv_buffer: bytes
    challenge_seed: Optional[str] = None
    """The seed sent in the greeting, or None if authentication is disabled."""
    authenticated: bool = False

    def __init__(self, emulator: PJLinkProjectorEmulator) -> None:
        self.emulator = emulator
        self.recv_buffer = b''

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        assert isinstance(transport, asyncio.Transport)
        self.transport = transport
        self.session_id = self.emulator.alloc_session_id(self)
        peer = transport.get_extra_info('peername')
        logger.debug(f"{self}: Connection from {peer}")
        if self.emulator.password is None:
            self.authenticated = True
            greeting = "PJLINK 0"
        else:
            self.challenge_seed = self.emulator.new_challenge_seed()
            greeting = f"PJLINK 1 {self.challenge_seed}"
        if self.emulator.greeting_override is not None:
            greeting = self.emulator.greeting_override
        if greeting != "":
            self.write((greeting + COMMAND_TERMINATOR).encode('ascii'))

    def connection_lost(self, exc: Optional[Exception]) -> None:
        logger.debug(f"{self}: Connection lost: {exc}")
        self.emulator.free_session_id(self.session_id)
        self.transport = None

    def data_received(self, data: bytes) -> None:
        self.recv_buffer += data
        while TERMINATOR_BYTES in self.recv_buffer:
            line, self.recv_buffer = self.recv_buffer.split(TERMINATOR_BYTES, 1)
            self.emulator.on_line_received(self, line.decode('ascii', errors='replace'))

    def write(self, data: bytes) -> None:
        if self.transport is not None and not self.transport.is_closing():
            logger.debug(f"{self}: Sending {data!r}")
            self.transport.write(data)

    def close(self) -> None:
        if self.transport is not None:
            self.transport.close()

    def __str__(self) -> str:
        return f"PJLinkProjectorEmulatorSession({self.session_id})"

    def __repr__(self) -> str:
        return str(self)
