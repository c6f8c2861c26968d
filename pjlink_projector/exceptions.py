# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Exceptions defined by this package"""

from enum import Enum

class ErrorKind(Enum):
    """Classification of a failed projector transaction."""
    UNREACHABLE = "unreachable"
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    AUTHENTICATION = "authentication"
    INVALID_PARAMETER = "invalid_parameter"

class PJLinkProjectorError(Exception):
  """Base class for all error exceptions defined by this package."""
  kind: ErrorKind = ErrorKind.TRANSPORT

class PJLinkUnreachableError(PJLinkProjectorError):
  """The projector refused the connection or did not accept it in time."""
  kind = ErrorKind.UNREACHABLE

class PJLinkTimeoutError(PJLinkProjectorError):
  """The projector did not send a greeting or response in time."""
  kind = ErrorKind.TIMEOUT

class PJLinkTransportError(PJLinkProjectorError):
  """The connection failed after it was established."""
  kind = ErrorKind.TRANSPORT

class PJLinkProtocolError(PJLinkProjectorError):
  """The projector sent something that is not valid PJLink."""
  kind = ErrorKind.PROTOCOL

class PJLinkAuthenticationError(PJLinkProjectorError):
  """The projector rejected the authentication digest (PJLINK ERRA)."""
  kind = ErrorKind.AUTHENTICATION

class PJLinkInvalidParameterError(PJLinkProjectorError):
  """A command parameter supplied by the caller is out of range."""
  kind = ErrorKind.INVALID_PARAMETER

def exception_class_for_kind(kind: ErrorKind) -> type:
  """Returns the exception class that carries the given ErrorKind."""
  for cls in PJLinkProjectorError.__subclasses__():
    if cls.kind is kind:
      return cls
  return PJLinkProjectorError
