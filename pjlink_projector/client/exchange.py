# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink command/response exchange.

Drives one complete transaction: connect and read the greeting, prefix the
digest if the projector asked for one, send the command, read one response,
and close the connection. Every failure is returned as an Err result; the
connection is closed on every path.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PJLinkProtocolError, PJLinkAuthenticationError
from ..pkg_logging import logger
from ..protocol import PJLinkCommand, PJLINK_ERRA, RESPONSE_PADDING
from ..result import PJLinkResult

from .connector import PJLinkProjectorConnector

async def pjlink_exchange(
        connector: PJLinkProjectorConnector,
        command: Union[PJLinkCommand, str],
      ) -> PJLinkResult[str]:
    """Sends one command on a fresh connection and returns the trimmed response.

    Args:
        connector: Creates the connection for this transaction.
        command: A PJLinkCommand, or complete command text including the
                 trailing carriage return.

    Returns:
        Ok(response) with trailing CR/NUL removed, or Err(kind, message).
        ERRn codes in a well-formed response are returned as Ok values.
    """
    command_str = str(command)
    try:
        transport = await connector.connect()
    except Exception as e:
        logger.debug(f"Connect failed for {command_str!r}: {e}")
        return PJLinkResult.from_exception(e)

    try:
        async with transport:
            digest = transport.auth_context.digest_prefix()
            if digest != '':
                logger.debug(f"Sending authenticated command: <digest>{command_str!r}")
            else:
                logger.debug(f"Sending command: {command_str!r}")
            await transport.write_exactly((digest + command_str).encode('ascii'))
            response_bytes = await transport.read_buffer()
        try:
            response = response_bytes.decode('ascii').rstrip(RESPONSE_PADDING)
        except UnicodeDecodeError as e:
            raise PJLinkProtocolError(f"Non-ASCII response from projector: {response_bytes!r}") from e
        if response == PJLINK_ERRA:
            raise PJLinkAuthenticationError("Projector rejected the authentication digest (bad password?)")
    except Exception as e:
        logger.debug(f"Exchange failed for {command_str!r}: {e}")
        return PJLinkResult.from_exception(e)

    return PJLinkResult.ok(response)
