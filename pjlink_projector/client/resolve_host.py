# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector host IP/Port resolver.

Provides a method that can resolve host strings and environment variables
into a projector IP address and port.
"""

from __future__ import annotations

import os

from ..internal_types import *
from ..exceptions import PJLinkProjectorError
from ..constants import DEFAULT_PORT

def resolve_projector_tcp_host(
        host: Optional[str]=None,
        default_port: Optional[int]=None,
      ) -> Tuple[str, int]:
    """Resolves a projector host string into a hostname and port.

        Args:
            host: The hostname or IPV4 address of the projector.
                    may optionally be prefixed with "tcp://".
                    May be suffixed with ":<port>" to specify a
                    non-default port, which will override the default_port argument.
                    If None, the host will be taken from the
                    PJLINK_PROJECTOR_HOST environment variable.
            default_port: The default TCP/IP port number to use. If None, the port
                    will be taken from the PJLINK_PROJECTOR_PORT. If that
                    environment variable is not found, the standard PJLink
                    port (4352) will be used.

        Returns:
            A tuple of (hostname: str, port: int) where:
                hostname: The resolved host name or IP address.
                port:     The resolved port number.
    """
    if host is None or host == '':
        host = os.environ.get('PJLINK_PROJECTOR_HOST')
        if host is None or host == '':
            raise PJLinkProjectorError(
                "No projector host specified and PJLINK_PROJECTOR_HOST is not set")

    if default_port is None or default_port <= 0:
        default_port_str = os.environ.get('PJLINK_PROJECTOR_PORT')
        if default_port_str is None or default_port_str == '':
            default_port = DEFAULT_PORT
        else:
            default_port = parse_port(default_port_str)

    if host.startswith('tcp://'):
        host = host[6:]
    elif '://' in host:
        raise PJLinkProjectorError(f"Unsupported protocol in host specifier: '{host}'")

    port: int
    if ':' in host:
        host, port_str = host.rsplit(':', 1)
        port = parse_port(port_str)
    else:
        port = default_port

    if host == '':
        raise PJLinkProjectorError("Empty projector host name")

    return (host, port)

def parse_port(port_str: str) -> int:
    try:
        port = int(port_str)
    except ValueError as e:
        raise PJLinkProjectorError(f"Invalid TCP port number: '{port_str}'") from e
    if not 0 < port < 65536:
        raise PJLinkProjectorError(f"TCP port number out of range: {port}")
    return port
