# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Constants used by pjlink_projector"""

DEFAULT_PORT = 4352
"""The listen port number assigned to PJLink by the PJLink standard."""

CONNECT_TIMEOUT = 1.0
"""The timeout for establishing a TCP/IP connection to the projector, in seconds."""

DEFAULT_TIMEOUT = 5.0
"""The default timeout for reading the greeting or a response from the projector, in seconds."""

SETTLE_DELAY = 1.5
"""The delay between flushing a finished transaction and closing the socket, in seconds.
   Some projector firmware misbehaves if the connection is torn down immediately."""

RECEIVE_BUFFER_SIZE = 8088
"""The maximum number of bytes read from the projector in a single receive."""

UNREACHABLE_GUIDANCE = (
    "1. Check the projector IP address in the projector network menu. "
    "2. Check the IP address configured for this client. "
    "3. Check network connections and cabling. "
    "4. Check the network switch."
  )
"""Appended to the error message when the projector cannot be reached."""
