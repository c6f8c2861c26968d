# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Package pjlink_projector provides an API for controlling projectors and
displays via the PJLink class 1 TCP/IP protocol.
"""

from .version import __version__

from .pkg_logging import logger

from .internal_types import Jsonable, JsonableDict

from .exceptions import (
    ErrorKind,
    PJLinkProjectorError,
    PJLinkUnreachableError,
    PJLinkTimeoutError,
    PJLinkTransportError,
    PJLinkProtocolError,
    PJLinkAuthenticationError,
    PJLinkInvalidParameterError,
  )

from .constants import DEFAULT_PORT, DEFAULT_TIMEOUT, CONNECT_TIMEOUT, SETTLE_DELAY

from .result import PJLinkResult

from .client import (
    PJLinkProjectorClient,
    resolve_projector_tcp_host,
    PJLinkClientTransport,
    TcpPJLinkClientTransport,
    PJLinkProjectorConnector,
    TcpPJLinkProjectorConnector,
    PJLinkProjectorClientConfig,
    pjlink_exchange,
    pjlink_projector_client,
  )

from .protocol import (
    PJLinkCommand,
    PJLinkGreeting,
    PJLinkAuthContext,
    PowerStatus,
    MuteStatus,
    InputType,
    AvMuteSetting,
    PJLinkErrorCode,
    ErrorLevel,
    LampInfo,
    ErrorStatusReport,
    compute_digest,
    decode_power_status,
    decode_mute_status,
    extract_value,
    response_error_code,
    parse_input_selector,
    parse_lamp_info,
    parse_error_status,
  )
