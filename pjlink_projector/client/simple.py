# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector simple client construction API.
"""

from __future__ import annotations

from ..internal_types import *
from .client_config import PJLinkProjectorClientConfig
from .client_impl import PJLinkProjectorClient
from .tcp_connector import TcpPJLinkProjectorConnector

def pjlink_projector_client(
        host: Optional[str]=None,
        password: Optional[str]=None,
        config: Optional[PJLinkProjectorClientConfig]=None
      ) -> PJLinkProjectorClient:
    """Create a PJLink projector client from a configuration.

    No connection is made until the first operation; every operation
    uses its own connection.

    Args:
        host: The hostname or IPV4 address of the projector.
                may optionally be prefixed with "tcp://".
                May be suffixed with ":<port>" to specify a
                non-default port.
                If None, the host will be taken from the config, or the
                PJLINK_PROJECTOR_HOST environment variable.
        password:
                The password to use to authenticate with the projector.
                If None, the password will be taken from the
                config.
        config: A PJLinkProjectorClientConfig object that specifies
                the default host, port, and password, etc. to use.
                If None, a default config will be created.
    """
    config = PJLinkProjectorClientConfig(
        default_host=host,
        password=password,
        base_config=config
      )
    connector = TcpPJLinkProjectorConnector(config=config)
    return PJLinkProjectorClient(connector)
