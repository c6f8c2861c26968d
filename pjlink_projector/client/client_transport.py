# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client abstract transport interface.

A transport is one connection to a projector, used for exactly one
command/response transaction. By the time a connector hands out a transport,
the projector's greeting has been read and the transport's auth_context
reflects it. Does not provide any higher-level abstractions such as semantic
commands or responses.

This abstraction allows for the implementation of alternate network
transports and of fake transports for testing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from ..pkg_logging import logger
from ..protocol import PJLinkAuthContext


class PJLinkClientTransport(ABC):
    auth_context: PJLinkAuthContext

    @abstractmethod
    async def write_exactly(self, data: bytes) -> None:
        """Writes all of data to the projector.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    @abstractmethod
    async def read_buffer(self) -> bytes:
        """Reads a single receive buffer from the projector. Never returns
        an empty buffer; raises instead.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    @abstractmethod
    async def aclose(self) -> None:
        """Flushes pending output, waits for the settle delay, and releases
        the connection.

        Has no effect if the transport is already closed. Never raises;
        failures during teardown are logged and discarded so that they cannot
        mask an earlier error.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    async def __aenter__(self) -> PJLinkClientTransport:
        """Enters a context that will close the transport on exit."""
        return self

    async def __aexit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
          ) -> None:
        """Exits the context and closes the transport; any exception from the
        body propagates unchanged."""
        if exc is not None:
            logger.debug(f"{self}: Closing after exception: {exc!r}")
        await self.aclose()
