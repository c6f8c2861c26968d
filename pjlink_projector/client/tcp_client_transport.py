# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector TCP/IP client transport.

Provides an implementation of PJLinkClientTransport over a TCP/IP
socket.
"""

from __future__ import annotations

import asyncio

from ..internal_types import *
from ..exceptions import (
    PJLinkUnreachableError,
    PJLinkTimeoutError,
    PJLinkTransportError,
    PJLinkProtocolError,
  )
from ..constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_PORT,
    CONNECT_TIMEOUT,
    SETTLE_DELAY,
    RECEIVE_BUFFER_SIZE,
    UNREACHABLE_GUIDANCE,
  )
from ..pkg_logging import logger
from ..protocol import PJLinkGreeting, PJLinkAuthContext, RESPONSE_PADDING

from .client_transport import PJLinkClientTransport

class TcpPJLinkClientTransport(PJLinkClientTransport):
    """PJLink Projector TCP/IP client transport."""

    reader: Optional[asyncio.StreamReader] = None
    writer: Optional[asyncio.StreamWriter] = None
    host: str
    port: int
    connect_timeout_secs: float
    timeout_secs: Optional[float]
    settle_delay_secs: float
    receive_buffer_size: int
    greeting: Optional[PJLinkGreeting] = None
    closed: bool = False

    def __init__(
            self,
            host: str,
            password: Optional[str]=None,
            port: int=DEFAULT_PORT,
            connect_timeout_secs: float=CONNECT_TIMEOUT,
            timeout_secs: Optional[float]=DEFAULT_TIMEOUT,
            settle_delay_secs: float=SETTLE_DELAY,
            receive_buffer_size: int=RECEIVE_BUFFER_SIZE,
          ) -> None:
        """Initializes the transport. Does not connect.
        """
        super().__init__()
        self.host = host
        self.port = port
        self.connect_timeout_secs = connect_timeout_secs
        self.timeout_secs = timeout_secs
        self.settle_delay_secs = settle_delay_secs
        self.receive_buffer_size = receive_buffer_size
        # A new context for every connection; seeds are never carried over
        self.auth_context = PJLinkAuthContext(password)

    async def read_buffer(self) -> bytes:
        """Reads a single receive buffer from the projector, with timeout.

        PJLink has no length framing; a greeting or response arrives as one
        CR-terminated line, and one read is expected to return all of it.
        """
        assert self.reader is not None

        try:
            data = await asyncio.wait_for(self.reader.read(self.receive_buffer_size), self.timeout_secs)
        except asyncio.TimeoutError as e:
            raise PJLinkTimeoutError(
                f"Timed out after {self.timeout_secs} seconds waiting for projector at {self.host}:{self.port}") from e
        except OSError as e:
            raise PJLinkTransportError(str(e)) from e
        logger.debug(f"Read {len(data)} bytes: {data!r}")
        if len(data) == 0:
            raise PJLinkTransportError("Connection closed by projector while waiting for response")
        return data

    async def write_exactly(self, data: bytes) -> None:
        """Writes exactly the specified bytes to the projector, with timeout."""
        assert self.writer is not None

        try:
            self.writer.write(data)
            await asyncio.wait_for(self.writer.drain(), self.timeout_secs)
        except asyncio.TimeoutError as e:
            raise PJLinkTimeoutError(
                f"Timed out after {self.timeout_secs} seconds writing to projector at {self.host}:{self.port}") from e
        except OSError as e:
            raise PJLinkTransportError(str(e)) from e

    async def aclose(self) -> None:
        """Flushes, waits for the settle delay, then closes the socket.

        Has no effect if the transport is already closed. The socket is
        closed even if the caller is cancelled during the flush or the
        settle delay; the cancellation is then propagated. Raises nothing
        else.
        """
        if self.closed:
            return
        self.closed = True
        writer = self.writer
        if writer is None:
            return
        try:
            try:
                await asyncio.wait_for(writer.drain(), self.timeout_secs)
            except Exception:
                logger.debug("Exception while flushing writer", exc_info=True)
            if self.settle_delay_secs > 0:
                await asyncio.sleep(self.settle_delay_secs)
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except Exception:
                logger.debug("Exception while closing writer", exc_info=True)
            logger.debug(f"{self}: Connection closed")

    async def connect(self) -> None:
        """Connects to the projector and reads its greeting, with timeout.

        On success, auth_context reflects the greeting. On failure, the
        transport is closed before the exception is raised.
        """
        assert self.reader is None and self.writer is None
        logger.debug(f"Connecting to projector at {self.host}:{self.port}")
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port),
                self.connect_timeout_secs
              )
        except (asyncio.TimeoutError, OSError) as e:
            self.closed = True
            reason = "timed out" if isinstance(e, asyncio.TimeoutError) else str(e)
            raise PJLinkUnreachableError(
                f"The projector at {self.host}:{self.port} is not connected ({reason}). {UNREACHABLE_GUIDANCE}") from e
        try:
            logger.debug("Handshake: Waiting for greeting")
            greeting_bytes = await self.read_buffer()
            try:
                greeting_str = greeting_bytes.decode('ascii').rstrip(RESPONSE_PADDING)
            except UnicodeDecodeError as e:
                raise PJLinkProtocolError(f"Handshake: Non-ASCII greeting from projector: {greeting_bytes!r}") from e
            greeting = PJLinkGreeting.parse(greeting_str)
            self.greeting = greeting
            self.auth_context.update_from_greeting(greeting)
            logger.info(f"Handshake: {self} connected (requires_auth={greeting.requires_auth})")
        except BaseException:
            await self.aclose()
            raise

    def __str__(self) -> str:
        return f"TcpPJLinkClientTransport({self.host}:{self.port})"

    def __repr__(self) -> str:
        return str(self)
