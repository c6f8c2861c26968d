# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client configuration.

Provides a general config object for PJLink projector clients and connectors.
"""

from __future__ import annotations

import os

from ..internal_types import *
from ..exceptions import PJLinkProjectorError
from ..constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_PORT,
    CONNECT_TIMEOUT,
    SETTLE_DELAY,
    RECEIVE_BUFFER_SIZE,
  )
from .resolve_host import parse_port

class PJLinkProjectorClientConfig:
    """PJLink Projector client configuration."""
    default_host: Optional[str]
    default_port: int
    password: str
    connect_timeout_secs: float
    timeout_secs: Optional[float]
    settle_delay_secs: float
    receive_buffer_size: int

    def __init__(
            self,
            default_host: Optional[str]=None,
            password: Optional[str]=None,
            *,
            default_port: Optional[int]=None,
            connect_timeout_secs: Optional[float]=None,
            timeout_secs: Optional[float]=None,
            settle_delay_secs: Optional[float]=None,
            receive_buffer_size: Optional[int]=None,
            base_config: Optional[PJLinkProjectorClientConfig]=None
          ) -> None:
        """Creates a configuration for a PJLink Projector client.

           Args:
             default_host: The default hostname or IPV4 address of the projector.
                   may optionally be prefixed with "tcp://".
                   May be suffixed with ":<port>" to specify a
                   non-default port, which will override the default_port argument.
                   If None, the default host will be taken from the
                     PJLINK_PROJECTOR_HOST environment variable.
             default_port: The default TCP/IP port number to use.
                    If None, the default port will be taken from PJLINK_PROJECTOR_PORT.
                    If that environment variable is not found, the standard PJLink
                    port (4352) will be used.
             password:
                   The projector password. If None, the password
                   will be taken from the PJLINK_PROJECTOR_PASSWORD
                   environment variable. If the environment variable is not
                   found, an empty password is used. Whether the password
                   is actually sent is decided by the projector's greeting.
             connect_timeout_secs:
                   The timeout for establishing a TCP connection, in seconds.
                   If None, CONNECT_TIMEOUT (1 second) is used.
             timeout_secs:
                   The timeout for reading the greeting and the response, in
                   seconds. If None, DEFAULT_TIMEOUT (5 seconds) is used. A
                   value <= 0 disables the read timeout.
             settle_delay_secs:
                   The delay between finishing a transaction and closing the
                   socket, in seconds. If None, SETTLE_DELAY (1.5 seconds) is used.
             receive_buffer_size:
                   The maximum number of bytes accepted in one response.
                   If None, RECEIVE_BUFFER_SIZE is used.
             base_config:
                     An optional base configuration to use.
        """
        if base_config is None:
            self.init_from_defaults()
        else:
            self.init_from_base_config(base_config)

        if default_host is not None and default_host != '':
            self.default_host = default_host

        if default_port is not None and default_port > 0:
            self.default_port = default_port

        if password is not None:
            self.password = password

        if connect_timeout_secs is not None:
            self.connect_timeout_secs = connect_timeout_secs

        if timeout_secs is not None:
            self.timeout_secs = timeout_secs if timeout_secs > 0 else None

        if settle_delay_secs is not None:
            if settle_delay_secs < 0:
                raise PJLinkProjectorError(f"Negative settle delay: {settle_delay_secs}")
            self.settle_delay_secs = settle_delay_secs

        if receive_buffer_size is not None:
            if receive_buffer_size <= 0:
                raise PJLinkProjectorError(f"Invalid receive buffer size: {receive_buffer_size}")
            self.receive_buffer_size = receive_buffer_size

    def init_from_defaults(self) -> None:
        """Initializes the configuration from defaults."""
        default_host: Optional[str] = os.environ.get('PJLINK_PROJECTOR_HOST')
        if default_host == '':
            default_host = None
        self.default_host = default_host
        default_port_str = os.environ.get('PJLINK_PROJECTOR_PORT')
        if default_port_str is None or default_port_str == '':
            self.default_port = DEFAULT_PORT
        else:
            self.default_port = parse_port(default_port_str)
        password = os.environ.get('PJLINK_PROJECTOR_PASSWORD')
        if password is None:
            password = ''
        self.password = password
        self.connect_timeout_secs = CONNECT_TIMEOUT
        self.timeout_secs = DEFAULT_TIMEOUT
        self.settle_delay_secs = SETTLE_DELAY
        self.receive_buffer_size = RECEIVE_BUFFER_SIZE

    def init_from_base_config(self, base_config: PJLinkProjectorClientConfig) -> None:
        """Initializes the configuration from a base configuration."""
        self.default_host = base_config.default_host
        self.default_port = base_config.default_port
        self.password = base_config.password
        self.connect_timeout_secs = base_config.connect_timeout_secs
        self.timeout_secs = base_config.timeout_secs
        self.settle_delay_secs = base_config.settle_delay_secs
        self.receive_buffer_size = base_config.receive_buffer_size

    @classmethod
    def from_jsonable(
            cls,
            jsonable: JsonableDict,
            base_config: Optional[PJLinkProjectorClientConfig]=None
          ) -> PJLinkProjectorClientConfig:
        """Creates a configuration from a JSON-compatible dict, such as a parsed config file.

        Keys that are missing or null fall back to base_config (or the defaults).
        """
        def get_float(name: str) -> Optional[float]:
            value = jsonable.get(name)
            if value is None:
                return None
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise PJLinkProjectorError(f"Config value '{name}' must be a number: {value!r}")
            return float(value)

        def get_int(name: str) -> Optional[int]:
            value = jsonable.get(name)
            if value is None:
                return None
            if not isinstance(value, int) or isinstance(value, bool):
                raise PJLinkProjectorError(f"Config value '{name}' must be an integer: {value!r}")
            return value

        def get_str(name: str) -> Optional[str]:
            value = jsonable.get(name)
            if value is None:
                return None
            if not isinstance(value, str):
                raise PJLinkProjectorError(f"Config value '{name}' must be a string: {value!r}")
            return value

        return cls(
            default_host=get_str('default_host'),
            password=get_str('password'),
            default_port=get_int('default_port'),
            connect_timeout_secs=get_float('connect_timeout_secs'),
            timeout_secs=get_float('timeout_secs'),
            settle_delay_secs=get_float('settle_delay_secs'),
            receive_buffer_size=get_int('receive_buffer_size'),
            base_config=base_config,
          )

    def to_jsonable(self) -> JsonableDict:
        """Returns a JSON-compatible dict for this configuration. The password is omitted."""
        return dict(
            default_host=self.default_host,
            default_port=self.default_port,
            connect_timeout_secs=self.connect_timeout_secs,
            timeout_secs=self.timeout_secs,
            settle_delay_secs=self.settle_delay_secs,
            receive_buffer_size=self.receive_buffer_size,
          )

    def __str__(self) -> str:
        return (
            f"PJLinkProjectorClientConfig("
            f"default_host={self.default_host}, "
            f"default_port={self.default_port}, "
            f"timeout_secs={self.timeout_secs!r})"
          )

    def __repr__(self) -> str:
        return str(self)
