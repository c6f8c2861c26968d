# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client.

Provides connectors, transports, the command/response exchange and the
high-level client for PJLink projectors on TCP/IP.
"""

from .resolve_host import resolve_projector_tcp_host
from .client_transport import PJLinkClientTransport
from .tcp_client_transport import TcpPJLinkClientTransport
from .connector import PJLinkProjectorConnector
from .tcp_connector import TcpPJLinkProjectorConnector
from .client_config import PJLinkProjectorClientConfig
from .exchange import pjlink_exchange
from .simple import pjlink_projector_client
from .client_impl import (
    PJLinkProjectorClient,
  )
