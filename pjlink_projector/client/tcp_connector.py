# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector TCP/IP client connector.

Provides a connector for a PJLinkClientTransport over a TCP/IP
socket.
"""

from __future__ import annotations

from ..internal_types import *
from .connector import PJLinkProjectorConnector
from .client_transport import PJLinkClientTransport
from .client_config import PJLinkProjectorClientConfig
from .resolve_host import resolve_projector_tcp_host

from .tcp_client_transport import TcpPJLinkClientTransport

class TcpPJLinkProjectorConnector(PJLinkProjectorConnector):
    """PJLink Projector TCP/IP client transport connector."""

    config: PJLinkProjectorClientConfig
    host: str
    port: int

    def __init__(
            self,
            host: Optional[str]=None,
            password: Optional[str]=None,
            port: Optional[int]=None,
            timeout_secs: Optional[float]=None,
            config: Optional[PJLinkProjectorClientConfig]=None,
          ) -> None:
        """Creates a connector that can create transports to
           a PJLink Projector that is reachable over TCP/IP.

              Args:
                host: The hostname or IPV4 address of the projector.
                      may optionally be prefixed with "tcp://".
                      May be suffixed with ":<port>" to specify a
                      non-default port, which will override the port argument.
                      If None, the host will be taken from the config, or
                        the PJLINK_PROJECTOR_HOST environment variable.
                password:
                      The projector password. If None, the password
                      will be taken from the config.
                port: The default TCP/IP port number to use. If None, the port
                      will be taken from the config.
                timeout_secs: The read timeout for transports. If None,
                      the config's timeout is used.
                config: A PJLinkProjectorClientConfig object that specifies
                        the default host, port, password, etc to use.
                        If None, a default config will be created.
        """
        super().__init__()
        self.config = PJLinkProjectorClientConfig(
            default_host=host,
            default_port=port,
            timeout_secs=timeout_secs,
            password=password,
            base_config=config
          )
        self.host, self.port = resolve_projector_tcp_host(
            self.config.default_host,
            self.config.default_port
          )

    def new_transport(self) -> TcpPJLinkClientTransport:
        """Create an unconnected TCP/IP client transport for the projector
           associated with this connector.
        """
        return TcpPJLinkClientTransport(
            self.host,
            password=self.config.password,
            port=self.port,
            connect_timeout_secs=self.config.connect_timeout_secs,
            timeout_secs=self.config.timeout_secs,
            settle_delay_secs=self.config.settle_delay_secs,
            receive_buffer_size=self.config.receive_buffer_size,
          )

    # @abstractmethod
    async def connect(self) -> PJLinkClientTransport:
        """Create a TCP/IP client transport for the projector associated with
           this connector, and read its greeting.
        """
        transport = self.new_transport()
        await transport.connect()
        return transport

    def __str__(self) -> str:
        return f"TcpPJLinkProjectorConnector(host='{self.host}', port={self.port})"

    def __repr__(self) -> str:
        return str(self)
