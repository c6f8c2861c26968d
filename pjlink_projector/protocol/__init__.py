# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Low-level protocol definitions for PJLink class 1 projectors.

Refer to https://pjlink.jbmia.or.jp/english/data_cl2/PJLink_5-1.pdf
for the official protocol documentation.
"""

from .command_meta import (
    CommandCode,
    PowerStatus,
    MuteStatus,
    InputType,
    PJLinkErrorCode,
    AvMuteSetting,
    ErrorLevel,
    power_status_map,
    mute_status_map,
    all_command_codes,
    QUERY_PARAM,
  )

from .command import (
    PJLinkCommand,
    input_selector,
    COMMAND_PREFIX,
    COMMAND_TERMINATOR,
  )

from .response import (
    decode_power_status,
    decode_mute_status,
    extract_value,
    response_error_code,
    parse_input_selector,
    parse_lamp_info,
    parse_error_status,
    LampInfo,
    ErrorStatusReport,
  )

from .digest import compute_digest, DIGEST_LENGTH

from .handshake import (
    PJLinkGreeting,
    PJLinkAuthContext,
    PJLINK_NO_AUTH,
    PJLINK_AUTH_PREFIX,
    PJLINK_ERRA,
    RESPONSE_PADDING,
  )
